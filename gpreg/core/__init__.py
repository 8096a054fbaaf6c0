# gpreg/core/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Core components of the gpreg package.

This subpackage contains the numerical routines for Gaussian process
regression: regularized Cholesky factorization and triangular solves,
the multivariate normal distribution, and the Gaussian process itself.

Public API
----------
MultivariateNormal : class
    Multivariate normal distribution with cached factorization.
GaussianProcess : class
    Scalar Gaussian process over points of a domain.
regression : function
    Posterior process and log marginal likelihood from noisy data.
log_marginal_likelihood : function
    Log marginal likelihood of noisy data under a prior process.
"""

from . import linalg
from .distribution import MultivariateNormal
from .gp import GaussianProcess, PosteriorKernel, regression, log_marginal_likelihood

__all__ = [
    "linalg",
    "MultivariateNormal",
    "GaussianProcess",
    "PosteriorKernel",
    "regression",
    "log_marginal_likelihood",
]
