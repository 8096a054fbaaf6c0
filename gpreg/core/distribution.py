# gpreg/core/distribution.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Multivariate normal distribution.

``MultivariateNormal`` is an immutable value holding a mean vector and a
covariance matrix. Quantities derived from the covariance (Cholesky root,
inverse root, inverse, log-determinant) are computed on first use and
cached on the instance.
"""
from functools import cached_property

import gpreg.num as gnp
from gpreg.errors import InvalidDimensionError
from .linalg import regularized_cholesky, forward_solve, back_solve, log_det_from_cholesky


class MultivariateNormal:
    """Multivariate normal distribution N(mean, cov).

    Parameters
    ----------
    mean : array_like, shape (n,)
        Mean vector.
    cov : array_like, shape (n, n)
        Covariance matrix, assumed symmetric positive semidefinite.

    Attributes
    ----------
    mean : gnp.array, shape (n,)
        Read-only copy of the mean.
    cov : gnp.array, shape (n, n)
        Read-only copy of the covariance.

    Raises
    ------
    InvalidDimensionError
        If cov is not square or its size differs from the length of mean.

    Examples
    --------
    >>> mvn = MultivariateNormal([1.0, 2.0], [[1.0, 0.5], [0.5, 1.0]])
    >>> cond = mvn.conditional([(1, 2.0)])
    >>> cond.mean, cond.cov
    (array([1.]), array([[0.75]]))
    """

    def __init__(self, mean, cov):
        mean = gnp.asdouble(mean)
        cov = gnp.asdouble(cov)
        if mean.ndim != 1:
            raise InvalidDimensionError(
                f"mean must be a 1-D vector, got shape {mean.shape}"
            )
        if cov.ndim != 2 or cov.shape[0] != cov.shape[1]:
            raise InvalidDimensionError(
                f"covariance must be a square matrix, got shape {cov.shape}"
            )
        if mean.shape[0] != cov.shape[0]:
            raise InvalidDimensionError(
                f"mean of length {mean.shape[0]} does not match a "
                f"{cov.shape[0]}x{cov.shape[1]} covariance"
            )
        self.mean = gnp.readonly(mean)
        self.cov = gnp.readonly(cov)

    @property
    def dim(self):
        return self.mean.shape[0]

    def __repr__(self):
        return f"MultivariateNormal(mean={self.mean!r}, cov={self.cov!r})"

    def __eq__(self, other):
        if not isinstance(other, MultivariateNormal):
            return NotImplemented
        return gnp.array_equal(self.mean, other.mean) and gnp.array_equal(
            self.cov, other.cov
        )

    __hash__ = None

    # ------------------------------------------------------------------
    # Derived quantities, computed once
    # ------------------------------------------------------------------
    @cached_property
    def root(self):
        """Lower Cholesky factor of cov (regularized)."""
        return regularized_cholesky(self.cov)

    @cached_property
    def root_inverse(self):
        return forward_solve(self.root, gnp.eye(self.dim))

    @cached_property
    def cov_inverse(self):
        return gnp.matmul(self.root_inverse.T, self.root_inverse)

    @cached_property
    def log_det(self):
        return log_det_from_cholesky(self.root)

    @cached_property
    def log_norm_factor(self):
        return -0.5 * (self.log_det + self.dim * gnp.log(2.0 * gnp.pi))

    # ------------------------------------------------------------------
    # Density
    # ------------------------------------------------------------------
    def _check_vector(self, x):
        x = gnp.asdouble(x).reshape(-1)
        if x.shape[0] != self.dim:
            raise InvalidDimensionError(
                f"Invalid vector dimensionality (provided {x.shape[0]} "
                f"should be {self.dim})"
            )
        return x

    def mahalanobis_distance2(self, x):
        """Squared Mahalanobis distance between x and the mean."""
        x = self._check_vector(x)
        alpha = gnp.matmul(self.root_inverse, x - self.mean)
        return float(gnp.dot(alpha, alpha))

    def logpdf(self, x):
        x = self._check_vector(x)
        return self.log_norm_factor - 0.5 * self.mahalanobis_distance2(x)

    def pdf(self, x):
        return float(gnp.exp(self.logpdf(x)))

    log_density = logpdf
    density = pdf

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------
    def sample(self, nb_samples=None):
        """Draw from the distribution as mean + root @ u, u ~ N(0, I).

        Parameters
        ----------
        nb_samples : int, optional
            If None (default), one draw of shape (dim,) is returned.
            Otherwise an array of shape (nb_samples, dim).
        """
        if nb_samples is None:
            u = gnp.randn(self.dim)
            return self.mean + gnp.matmul(self.root, u)
        u = gnp.randn(self.dim, nb_samples)
        return (self.mean.reshape(-1, 1) + gnp.matmul(self.root, u)).T

    # ------------------------------------------------------------------
    # Marginals and conditionals
    # ------------------------------------------------------------------
    def _check_indices(self, indices):
        idx = [int(i) for i in indices]
        for i in idx:
            if not 0 <= i < self.dim:
                raise IndexError(
                    f"index {i} out of range for a {self.dim}-dimensional distribution"
                )
        return idx

    def marginal(self, indices):
        """Distribution of the components listed in indices, in that order."""
        idx = self._check_indices(indices)
        sub_mean = self.mean[idx]
        sub_cov = self.cov[gnp.ix_(idx, idx)]
        return MultivariateNormal(sub_mean, sub_cov)

    def conditional(self, observations):
        """Distribution of the unobserved components given observed values.

        Parameters
        ----------
        observations : sequence of (int, float)
            Pairs (index, observed value), in any order.

        Returns
        -------
        MultivariateNormal
            Distribution over the remaining indices, in ascending order.

        Notes
        -----
        With o the observed and u the unobserved indices,

        .. math::
            m_{u|o} = m_u + K_{uo} K_{oo}^{-1} (z_o - m_o), \\quad
            K_{u|o} = K_{uu} - K_{uo} K_{oo}^{-1} K_{ou}.

        K_oo is factored with a regularized Cholesky and the products with
        its inverse are obtained by triangular solves.
        """
        observations = list(observations)
        if not observations:
            return MultivariateNormal(self.mean, self.cov)
        obs_idx = self._check_indices([i for i, _ in observations])
        obs_vals = gnp.asdouble([v for _, v in observations])
        observed = set(obs_idx)
        un_idx = [i for i in range(self.dim) if i not in observed]

        mean_un = self.mean[un_idx]
        mean_obs = self.mean[obs_idx]
        cov_unun = self.cov[gnp.ix_(un_idx, un_idx)]
        cov_obsun = self.cov[gnp.ix_(obs_idx, un_idx)]
        cov_obsobs = self.cov[gnp.ix_(obs_idx, obs_idx)]

        L_obs = regularized_cholesky(cov_obsobs)
        w = forward_solve(L_obs, obs_vals - mean_obs)
        V = forward_solve(L_obs, cov_obsun)

        new_mean = mean_un + gnp.matmul(V.T, w)
        new_cov = cov_unun - gnp.matmul(V.T, V)
        return MultivariateNormal(new_mean, new_cov)

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------
    @classmethod
    def from_axis_variances(cls, mean, axes):
        """Distribution with variance sigma2_i along direction phi_i.

        Parameters
        ----------
        mean : array_like, shape (n,)
        axes : sequence of (array_like shape (n,), float)
            Exactly n pairs (phi_i, sigma2_i).

        Returns
        -------
        MultivariateNormal
            Covariance Phi diag(sigma2) Phiᵀ, Phi having columns phi_i.
        """
        mean = gnp.asdouble(mean).reshape(-1)
        dim = mean.shape[0]
        axes = list(axes)
        if len(axes) != dim:
            raise InvalidDimensionError(
                f"{len(axes)} axes given for a {dim}-dimensional distribution"
            )
        Phi = gnp.zeros((dim, dim))
        sigma2 = gnp.zeros(dim)
        for i, (phi, s2) in enumerate(axes):
            phi = gnp.asdouble(phi).reshape(-1)
            if phi.shape[0] != dim:
                raise InvalidDimensionError(
                    f"axis {i} has length {phi.shape[0]}, expected {dim}"
                )
            Phi[:, i] = phi
            sigma2[i] = s2
        cov = gnp.matmul(Phi * sigma2, Phi.T)
        return cls(mean, cov)

    @classmethod
    def estimate_from_data(cls, samples):
        """Sample mean and covariance of a collection of vectors.

        The mean is accumulated with a running (Welford) update and the
        covariance is the sum of the outer products of the centered
        samples divided by n - 1 (by 1 when n == 1).

        Parameters
        ----------
        samples : sequence of array_like, shape (d,), or array (n, d)

        Returns
        -------
        MultivariateNormal
        """
        vectors = [gnp.asdouble(s).reshape(-1) for s in samples]
        n = len(vectors)
        if n == 0:
            raise ValueError("at least one sample is required")
        d = vectors[0].shape[0]
        for s in vectors:
            if s.shape[0] != d:
                raise InvalidDimensionError(
                    f"samples must share one dimensionality (found {s.shape[0]} and {d})"
                )

        sample_mean = gnp.zeros(d)
        for k, s in enumerate(vectors, start=1):
            sample_mean += (s - sample_mean) / k

        centered = gnp.stack(vectors) - sample_mean
        ddof = 1 if n == 1 else n - 1
        sample_cov = gnp.matmul(centered.T, centered) / ddof
        return cls(sample_mean, sample_cov)
