import unittest

import gpreg.num as gnp
from examples import (
    gpreg_example01_kernels,
    gpreg_example02_1d_regression,
    gpreg_example03_sample_paths,
)


class TestExamples(unittest.TestCase):
    def test_01(self):
        matrices = gpreg_example01_kernels.main()
        self.assertTrue(
            gnp.allclose(matrices["exponentiated quadratic"], 4.0 * matrices["gaussian"])
        )

    def test_02(self):
        results = gpreg_example02_1d_regression.main()
        self.assertEqual(results["zpm"].shape, (101,))
        self.assertLess(results["rmse"], 0.5)

    def test_03(self):
        results = gpreg_example03_sample_paths.main()
        self.assertEqual(results["posterior_paths"].shape, (200, 41))
        self.assertTrue(gnp.all(results["zpv"] >= 0.0))


if __name__ == "__main__":
    unittest.main()
