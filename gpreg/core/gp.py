# gpreg/core/gp.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian processes and Gaussian process regression.

Functions
---------
regression(gp, training_data)
    Condition a prior process on noisy observations; returns the
    posterior process and the log marginal likelihood of the data.
log_marginal_likelihood(gp, training_data)
    Log marginal likelihood only, without building the posterior.

Training data is a sequence of triplets ``(point, value, noise)`` where
``noise`` describes the observation error at that point. Noise is
independent from one point to another and only its variance enters the
computation: for a ``MultivariateNormal`` noise, its ``cov[0, 0]`` entry
is used and any other structure is ignored.
"""
import warnings
from numbers import Number

import gpreg.num as gnp
from gpreg.config import get_logger
from gpreg.errors import OutOfDomainError
from gpreg.geometry.domain import RealSpace, intersection
from gpreg.geometry.field import ScalarField, zero_field
from gpreg.geometry.point import as_point, as_points
from gpreg.kernel.base import Kernel
from gpreg.kernel.matrices import build_covariance_matrix, build_covariance_vector
from .distribution import MultivariateNormal
from .linalg import regularized_cholesky, forward_solve, back_solve, log_det_from_cholesky

_logger = get_logger()


class GaussianProcess:
    """Scalar Gaussian process GP(mean, covariance).

    Parameters
    ----------
    mean : ScalarField, callable or None
        Mean function. A plain callable is taken as defined everywhere;
        None gives the zero mean.
    covariance : gpreg.kernel.Kernel
        Covariance kernel.

    Examples
    --------
    >>> import gpreg as gr
    >>> k = gr.kernel.ExponentiatedQuadraticKernel(1.0, 0.5)
    >>> gp = gr.GaussianProcess.zero_mean(k)
    >>> data = [(0.0, 1.0, 0.01), (1.0, -0.5, 0.01)]
    >>> posterior, lml = gr.regression(gp, data)
    >>> zt_mean, zt_var = posterior.predict([0.25, 0.5, 0.75])
    """

    def __init__(self, mean, covariance):
        if mean is None:
            mean = zero_field()
        elif not isinstance(mean, ScalarField):
            mean = ScalarField(RealSpace(), mean)
        self.mean = mean
        self.covariance = covariance

    @classmethod
    def zero_mean(cls, covariance):
        return cls(None, covariance)

    @property
    def domain(self):
        return intersection(self.mean.domain, self.covariance.domain)

    def __repr__(self):
        return f"GaussianProcess(mean={self.mean!r}, covariance={self.covariance!r})"

    def _check_points(self, points):
        xs = as_points(points)
        domain = self.domain
        for x in xs:
            if not domain.is_defined_at(x):
                raise OutOfDomainError(x, "domain of the Gaussian process")
        return xs

    def marginal(self, points):
        """Joint distribution of the process at a sequence of points.

        Parameters
        ----------
        points : sequence of points or array_like, shape (n,) or (n, d)

        Returns
        -------
        MultivariateNormal
            Mean m(points[i]) and covariance k(points[i], points[j]), in
            the order of points.
        """
        xs = self._check_points(points)
        mean_vec = gnp.array([self.mean(x) for x in xs], dtype=gnp.float64)
        cov_mat = build_covariance_matrix(xs, self.covariance)
        return MultivariateNormal(mean_vec, cov_mat)

    def marginal_at(self, point):
        """Distribution of the process at one point (dimension 1)."""
        return self.marginal([as_point(point)])

    def sample(self, points, nb_paths=None):
        """Draw the process jointly at points.

        Returns
        -------
        gnp.array, shape (n,), or (nb_paths, n) if nb_paths is given
        """
        return self.marginal(points).sample(nb_paths)

    def sample_at(self, point):
        return self.marginal_at(point).sample()

    def predict(self, points, zero_neg_variances=True):
        """Pointwise mean and variance of the process.

        Parameters
        ----------
        points : sequence of points or array_like, shape (n,) or (n, d)
        zero_neg_variances : bool, optional
            Whether to replace negative variances (numerical errors in
            posterior kernels) with zeros, by default True.

        Returns
        -------
        zt_mean : gnp.array, shape (n,)
        zt_variance : gnp.array, shape (n,)
        """
        xs = self._check_points(points)
        zt_mean = gnp.array([self.mean(x) for x in xs], dtype=gnp.float64)
        zt_variance = gnp.array(
            [self.covariance(x, x) for x in xs], dtype=gnp.float64
        )
        if gnp.any(zt_variance < 0.0):
            warnings.warn(
                "Negative variances detected. Consider using jitter.",
                RuntimeWarning,
            )
        if zero_neg_variances:
            zt_variance = gnp.maximum(zt_variance, 0.0)
        return zt_mean, zt_variance


class PosteriorKernel(Kernel):
    """Covariance of a process conditioned on observations at xi.

    .. math::
        k_n(x, y) = k(x, y) - (L^{-1} k(X, x))^T (L^{-1} k(X, y))

    where L is the Cholesky factor of the noisy covariance at the
    training points X.
    """

    def __init__(self, prior_covariance, xi, L, domain):
        self.prior_covariance = prior_covariance
        self.xi = xi
        self.L = L
        self._domain = domain

    @property
    def domain(self):
        return self._domain

    def _k(self, x, y):
        v_x = forward_solve(self.L, build_covariance_vector(x, self.xi, self.prior_covariance).T)
        v_y = forward_solve(self.L, build_covariance_vector(y, self.xi, self.prior_covariance).T)
        return self.prior_covariance(x, y) - float(gnp.matmul(v_x.T, v_y)[0, 0])

    def __repr__(self):
        return f"PosteriorKernel({self.prior_covariance!r}, n={len(self.xi)})"


# --------------------------------------------------------------------------
# Regression
# --------------------------------------------------------------------------
def _noise_variance(noise):
    """Variance of an observation error (MultivariateNormal or number)."""
    if isinstance(noise, MultivariateNormal):
        return float(noise.cov[0, 0])
    if isinstance(noise, Number):
        if noise < 0.0:
            raise ValueError("noise variance must be nonnegative")
        return float(noise)
    raise TypeError(
        "noise must be a MultivariateNormal or a variance, "
        f"got {type(noise).__name__}"
    )


def _unpack_training_data(gp, training_data):
    training_data = list(training_data)
    if not training_data:
        raise ValueError("training data must contain at least one observation")
    xi = gp._check_points([x for x, _, _ in training_data])
    zi = gnp.array([float(z) for _, z, _ in training_data], dtype=gnp.float64)
    noise_variance = gnp.array(
        [_noise_variance(e) for _, _, e in training_data], dtype=gnp.float64
    )
    return xi, zi, noise_variance


def _factorize(gp, xi, zi, noise_variance):
    """Cholesky factor of K + diag(noise) and alpha = (K + diag(noise))^{-1} (z - m)."""
    K = build_covariance_matrix(xi, gp.covariance)
    K[gnp.arange(K.shape[0]), gnp.arange(K.shape[0])] += noise_variance
    L = regularized_cholesky(K)

    zi_prior_mean = gnp.array([gp.mean(x) for x in xi], dtype=gnp.float64)
    centered_zi = zi - zi_prior_mean
    alpha = back_solve(L.T, forward_solve(L, centered_zi))
    return L, alpha


def _log_marginal_likelihood(L, alpha):
    n = L.shape[0]
    norm2 = float(gnp.dot(alpha, alpha))
    ldetK = log_det_from_cholesky(L)
    return float(-0.5 * (norm2 + ldetK + n * gnp.log(2.0 * gnp.pi)))


def regression(gp, training_data):
    """Gaussian process regression with noisy observations.

    Parameters
    ----------
    gp : GaussianProcess
        Prior process.
    training_data : sequence of (point, float, noise)
        Observation points, observed values, and observation errors. Each
        error is a ``MultivariateNormal`` (only its ``cov[0, 0]`` variance
        is used) or a nonnegative variance.

    Returns
    -------
    posterior : GaussianProcess
        Process conditioned on the data. Its mean and covariance keep a
        reference to the Cholesky factor computed here; no matrix is
        rebuilt when they are evaluated.
    log_marginal_likelihood : float
        Model-comparison score of the data under the prior.

    Notes
    -----
    With K the covariance at the training points plus the noise
    variances on its diagonal, K = L Lᵀ, and α = K⁻¹ (z - m(X)):

    .. math::
        m_n(x) = k(x, X) \\alpha

        \\ell = -\\frac{1}{2} \\left( \\alpha^T \\alpha
                + \\log \\det K + n \\log 2\\pi \\right)

    The prior mean enters only through the centering of the observed
    values; it is not added back to the posterior mean. The quadratic
    term of the score is αᵀα, which differs from the Gaussian
    log-density (z - m(X))ᵀα unless K is the identity.
    """
    xi, zi, noise_variance = _unpack_training_data(gp, training_data)
    L, alpha = _factorize(gp, xi, zi, noise_variance)

    prior_covariance = gp.covariance

    def posterior_mean(x):
        kx = build_covariance_vector(x, xi, prior_covariance)
        return float(gnp.matmul(kx, alpha)[0])

    domain = gp.domain
    posterior = GaussianProcess(
        ScalarField(domain, posterior_mean),
        PosteriorKernel(prior_covariance, xi, L, domain),
    )
    lml = _log_marginal_likelihood(L, alpha)
    _logger.debug(
        "Regression on %d training points, log marginal likelihood %.6g",
        len(xi),
        lml,
    )
    return posterior, lml


def log_marginal_likelihood(gp, training_data):
    """Log marginal likelihood of training data under the prior gp.

    Same computation as the second output of :func:`regression`,
    without building the posterior process.
    """
    xi, zi, noise_variance = _unpack_training_data(gp, training_data)
    L, alpha = _factorize(gp, xi, zi, noise_variance)
    return _log_marginal_likelihood(L, alpha)
