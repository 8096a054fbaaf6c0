'''
Kernels and covariance matrices.

Build covariance matrices for a few standard kernels on a 1D grid, and
combine kernels with the kernel algebra (sum, product, scaling,
composition with a point transform).

----
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
'''
import math
import numpy as np
import gpreg.num as gnp
import gpreg as gr


def main():
    """Print covariance matrices and return them in a dict."""
    xs = [0.0, 0.5, 1.0, 2.0]

    kernels = {
        "gaussian": gr.kernel.GaussianKernel(1.0),
        "exponentiated quadratic": gr.kernel.ExponentiatedQuadraticKernel(2.0, math.sqrt(0.5)),
        "exponential": gr.kernel.ExponentialKernel(1.0, 0.5),
        "matern 3/2": gr.kernel.MaternKernel(1, 1.0, 0.5),
        "matern 5/2": gr.kernel.MaternKernel(2, 1.0, 0.5),
    }

    # sum of a long and a short range component, and a warped kernel
    long_range = gr.kernel.ExponentiatedQuadraticKernel(1.0, 2.0)
    short_range = gr.kernel.ExponentialKernel(0.3, 0.1)
    kernels["long + short"] = long_range + short_range
    kernels["0.5 * gaussian * matern"] = 0.5 * kernels["gaussian"] * kernels["matern 3/2"]
    kernels["warped gaussian"] = kernels["gaussian"].compose_with(lambda x: gnp.exp(x))

    matrices = {}
    with np.printoptions(precision=3, suppress=True):
        for name, k in kernels.items():
            K = gr.kernel.build_covariance_matrix(xs, k)
            matrices[name] = K
            print(f"--- {name}")
            print(K)

    # The exponentiated quadratic kernel with sigma=2 and lengthscale
    # sqrt(1/2) is four times the Gaussian kernel with sigma=1
    ratio = matrices["exponentiated quadratic"] / matrices["gaussian"]
    print(f"EQ / Gaussian: min {ratio.min():.6f}, max {ratio.max():.6f}")

    K_cross = gr.kernel.build_cross_covariance_matrix(xs, [0.25, 1.5], kernels["gaussian"])
    print("Cross-covariance, shape", K_cross.shape)
    matrices["cross"] = K_cross
    return matrices


if __name__ == "__main__":
    main()
