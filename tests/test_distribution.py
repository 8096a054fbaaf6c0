import math

import numpy as np
import pytest

import gpreg.num as gnp
from gpreg.core import MultivariateNormal
from gpreg.errors import InvalidDimensionError


def random_mvn(n):
    X = gnp.rand(n + 2, n)
    cov = gnp.matmul(X.T, X) / 5.0 + 0.5 * gnp.eye(n)
    return MultivariateNormal(gnp.randn(n), cov)


def test_standard_normal_density():
    mvn = MultivariateNormal([0.0], [[1.0]])
    assert mvn.pdf([0.0]) == pytest.approx(0.398942, abs=1e-6)
    assert mvn.pdf([1.0]) == pytest.approx(0.241971, abs=1e-6)
    assert mvn.density([1.0]) == mvn.pdf([1.0])


def test_logpdf_matches_scipy():
    mvn = random_mvn(4)
    x = gnp.randn(4)
    expected = gnp.multivariate_normal.logpdf(x, mvn.mean, mvn.cov)
    assert mvn.logpdf(x) == pytest.approx(expected, abs=1e-8)
    assert mvn.log_density(x) == mvn.logpdf(x)


def test_mahalanobis_distance():
    mvn = random_mvn(3)
    x = gnp.randn(3)
    d = x - mvn.mean
    expected = float(d @ np.linalg.inv(mvn.cov) @ d)
    assert mvn.mahalanobis_distance2(x) == pytest.approx(expected, rel=1e-8)


def test_density_rejects_wrong_length():
    mvn = random_mvn(3)
    with pytest.raises(InvalidDimensionError):
        mvn.logpdf([0.0, 1.0])


def test_constructor_checks():
    with pytest.raises(InvalidDimensionError):
        MultivariateNormal([0.0, 0.0], gnp.eye(3))
    with pytest.raises(InvalidDimensionError):
        MultivariateNormal([0.0, 0.0], gnp.ones((2, 3)))
    with pytest.raises(InvalidDimensionError):
        MultivariateNormal(gnp.zeros((2, 1)), gnp.eye(2))


def test_derived_quantities_are_cached():
    mvn = random_mvn(3)
    assert mvn.root is mvn.root
    assert mvn.cov_inverse is mvn.cov_inverse
    assert gnp.allclose(gnp.matmul(mvn.root, mvn.root.T), mvn.cov)
    assert gnp.allclose(gnp.matmul(mvn.cov_inverse, mvn.cov), gnp.eye(3))
    assert gnp.allclose(gnp.matmul(mvn.root_inverse, mvn.root), gnp.eye(3))
    assert mvn.log_det == pytest.approx(np.linalg.slogdet(mvn.cov)[1])
    assert mvn.log_norm_factor == pytest.approx(
        -0.5 * (mvn.log_det + 3 * math.log(2 * math.pi))
    )


def test_arrays_are_read_only_copies():
    mean = gnp.array([1.0, 2.0])
    cov = gnp.eye(2)
    mvn = MultivariateNormal(mean, cov)
    mean[0] = 10.0
    cov[0, 0] = 10.0
    assert mvn.mean[0] == 1.0
    assert mvn.cov[0, 0] == 1.0
    with pytest.raises(ValueError):
        mvn.mean[0] = 3.0


def test_equality():
    a = MultivariateNormal([0.0, 1.0], [[1.0, 0.2], [0.2, 1.0]])
    b = MultivariateNormal([0.0, 1.0], [[1.0, 0.2], [0.2, 1.0]])
    c = MultivariateNormal([0.0, 1.0], [[1.0, 0.3], [0.3, 1.0]])
    assert a == b
    assert a != c
    assert a != "not a distribution"


def test_sample_shapes():
    mvn = random_mvn(3)
    assert mvn.sample().shape == (3,)
    assert mvn.sample(5).shape == (5, 3)


def test_marginal():
    mvn = random_mvn(4)
    m = mvn.marginal([2, 0])
    assert m.dim == 2
    assert gnp.array_equal(m.mean, mvn.mean[[2, 0]])
    assert m.cov[0, 0] == mvn.cov[2, 2]
    assert m.cov[0, 1] == mvn.cov[2, 0]
    assert m.cov[1, 1] == mvn.cov[0, 0]
    with pytest.raises(IndexError):
        mvn.marginal([4])
    with pytest.raises(IndexError):
        mvn.marginal([-1])


def test_conditional_bivariate():
    mvn = MultivariateNormal([1.0, 2.0], [[1.0, 0.5], [0.5, 1.0]])
    cond = mvn.conditional([(1, 2.0)])
    assert cond.dim == 1
    assert cond.mean[0] == pytest.approx(1.0)
    assert cond.cov[0, 0] == pytest.approx(0.75)

    cond = mvn.conditional([(1, 3.0)])
    assert cond.mean[0] == pytest.approx(1.5)


def test_conditional_matches_explicit_inverse():
    mvn = random_mvn(4)
    obs = [(3, 0.7), (1, -0.2)]
    cond = mvn.conditional(obs)

    o = [3, 1]
    u = [0, 2]
    z = gnp.array([0.7, -0.2])
    C = mvn.cov
    Koo_inv = np.linalg.inv(C[np.ix_(o, o)])
    Kuo = C[np.ix_(u, o)]
    mean = mvn.mean[u] + Kuo @ Koo_inv @ (z - mvn.mean[o])
    cov = C[np.ix_(u, u)] - Kuo @ Koo_inv @ Kuo.T
    assert gnp.allclose(cond.mean, mean)
    assert gnp.allclose(cond.cov, cov)


def test_conditional_edge_cases():
    mvn = random_mvn(3)
    same = mvn.conditional([])
    assert same == mvn
    assert same is not mvn
    with pytest.raises(IndexError):
        mvn.conditional([(3, 0.0)])


def test_from_axis_variances():
    s = 1.0 / math.sqrt(2.0)
    mvn = MultivariateNormal.from_axis_variances(
        [0.0, 0.0], [([s, s], 2.0), ([s, -s], 1.0)]
    )
    assert gnp.allclose(mvn.cov, gnp.array([[1.5, 0.5], [0.5, 1.5]]))

    mvn = MultivariateNormal.from_axis_variances(
        [1.0, 2.0], [([1.0, 0.0], 4.0), ([0.0, 1.0], 9.0)]
    )
    assert gnp.allclose(mvn.cov, gnp.diag(gnp.array([4.0, 9.0])))

    with pytest.raises(InvalidDimensionError):
        MultivariateNormal.from_axis_variances([0.0, 0.0], [([1.0, 0.0], 1.0)])
    with pytest.raises(InvalidDimensionError):
        MultivariateNormal.from_axis_variances(
            [0.0, 0.0], [([1.0, 0.0, 0.0], 1.0), ([0.0, 1.0], 1.0)]
        )


def test_estimate_from_data():
    mvn = MultivariateNormal(
        [1.0, -2.0, 0.5],
        [[2.0, 0.3, 0.1], [0.3, 1.0, -0.2], [0.1, -0.2, 0.5]],
    )
    samples = mvn.sample(100000)
    est = MultivariateNormal.estimate_from_data(samples)
    assert float(gnp.sum(gnp.abs(est.mean - mvn.mean))) < 1.0
    assert float(gnp.sum(gnp.abs(est.cov - mvn.cov))) < 1.0
    assert gnp.allclose(est.mean, gnp.mean(samples, axis=0))
    assert gnp.allclose(est.cov, np.cov(samples.T))


def test_estimate_from_data_edge_cases():
    est = MultivariateNormal.estimate_from_data([[1.0, 2.0]])
    assert gnp.array_equal(est.mean, gnp.array([1.0, 2.0]))
    assert gnp.array_equal(est.cov, gnp.zeros((2, 2)))
    with pytest.raises(ValueError):
        MultivariateNormal.estimate_from_data([])
    with pytest.raises(InvalidDimensionError):
        MultivariateNormal.estimate_from_data([[1.0, 2.0], [1.0]])
