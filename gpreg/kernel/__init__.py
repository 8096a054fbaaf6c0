# gpreg/kernel/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Positive-definite kernels and covariance matrices.

Modules
-------
base
    Kernel base class and algebra (sum, product, scaling, composition).
stationary
    Base class for isotropic stationary kernels.
gaussian
    Gaussian and exponentiated quadratic kernels.
exponential
    Exponential kernel.
matern
    Matérn family of kernels with half-integer regularity.
matrices
    Covariance matrices, cross-covariance matrices and covariance vectors.
"""

from .base import (
    Kernel,
    SumKernel,
    ProductKernel,
    ScaledKernel,
    ComposedKernel,
    ZeroKernel,
)
from .stationary import StationaryKernel
from .gaussian import (
    GaussianKernel,
    ExponentiatedQuadraticKernel,
    gaussian_kernel,
    exponentiated_quadratic_kernel,
)
from .exponential import exponential_kernel, ExponentialKernel
from .matern import matern32_kernel, maternp_kernel, MaternKernel
from .matrices import (
    build_covariance_matrix,
    build_cross_covariance_matrix,
    build_covariance_vector,
)

__all__ = [
    # Kernel algebra
    "Kernel",
    "SumKernel",
    "ProductKernel",
    "ScaledKernel",
    "ComposedKernel",
    "ZeroKernel",
    # Standard kernels
    "StationaryKernel",
    "GaussianKernel",
    "ExponentiatedQuadraticKernel",
    "gaussian_kernel",
    "exponentiated_quadratic_kernel",
    "exponential_kernel",
    "ExponentialKernel",
    "matern32_kernel",
    "maternp_kernel",
    "MaternKernel",
    # Matrices
    "build_covariance_matrix",
    "build_cross_covariance_matrix",
    "build_covariance_vector",
]
