# gpreg/num/numpy_backend.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""NumPy numerical backend for GPreg.

This module defines the NumPy implementation of the gpreg.num API.
"""

from typing import Any, Optional
from gpreg.config import get_config, init_backend, get_logger

ArrayLike = Any

_gpreg_backend_: str = init_backend()
_config = get_config()
_logger = get_logger()
_logger.info("Using backend: %s", _gpreg_backend_)


# -----------------------------------------------------
#
#                      NUMPY
#
# -----------------------------------------------------

import numpy

_np_dtype = numpy.float64
_config.dtype_resolved = _np_dtype

from numpy import (
    array_equal,
    where,
    any,
    isfinite,
    allclose,
    stack,
    concatenate,
    diag,
    tril,
    triu,
    arange,
    abs,
    sqrt,
    sin,
    exp,
    log,
    sum,
    mean,
    var,
    prod,
    max,
    maximum,
    matmul,
    dot,
    all,
    ix_,
)
from numpy.linalg import norm, cholesky, LinAlgError
from numpy import pi
from numpy import finfo, float64
from scipy.special import gammaln
from scipy.linalg import solve_triangular
from scipy.stats import norm as normal
from scipy.stats import multivariate_normal as scipy_mvnormal

# ..................................................

fmax = finfo(_np_dtype).max

# ..................................................

def array(x, dtype=None):
    if dtype is not None:
        return numpy.array(x, dtype=dtype)
    out = numpy.array(x)
    if numpy.issubdtype(out.dtype, numpy.floating):
        return out.astype(_np_dtype, copy=False)
    return out

def asarray(x, dtype=None):
    if dtype is not None:
        return numpy.asarray(x, dtype=dtype)
    if isinstance(x, numpy.ndarray):
        if numpy.issubdtype(x.dtype, numpy.floating):
            return x.astype(_np_dtype, copy=False)
        return x
    elif isinstance(x, (int, float)):
        dt = _np_dtype if isinstance(x, float) else None
        return numpy.array([x], dtype=dt)
    else:
        out = numpy.asarray(x)
        if numpy.issubdtype(out.dtype, numpy.floating):
            return out.astype(_np_dtype, copy=False)
        return out

def asdouble(x):
    return numpy.asarray(x).astype(float64, copy=False)

def zeros(shape, dtype=None):
    return numpy.zeros(shape, dtype=_np_dtype if dtype is None else dtype)

def ones(shape, dtype=None):
    return numpy.ones(shape, dtype=_np_dtype if dtype is None else dtype)

def full(shape, fill_value, dtype=None):
    return numpy.full(
        shape, fill_value, dtype=_np_dtype if dtype is None else dtype
    )

def eye(n, m=None, k=0, dtype=None):
    return numpy.eye(n, M=m, k=k, dtype=_np_dtype if dtype is None else dtype)

def linspace(start, stop, num=50, endpoint=True, dtype=None):
    return numpy.linspace(
        start,
        stop,
        num=num,
        endpoint=endpoint,
        dtype=_np_dtype if dtype is None else dtype,
    )

def isarray(x):
    return isinstance(x, numpy.ndarray)

def readonly(x):
    """Return an independent copy of x that cannot be written to."""
    out = numpy.array(x, dtype=_np_dtype, copy=True)
    out.setflags(write=False)
    return out

def inftobigf(a, bigf=fmax / 1000.0):
    a = where(numpy.isinf(a), numpy.full_like(a, bigf), a)
    return a

# ..................................................

# Build one global RNG (or let the user set the seed somewhere):
_np_rng = numpy.random.default_rng(seed=_config.seed)

def set_seed(seed: int) -> None:
    """Set the global NumPy generator seed."""
    global _np_rng
    _config.seed = seed
    _np_rng = numpy.random.default_rng(seed=seed)

def rand(*shape: int) -> ArrayLike:
    return _np_rng.random(shape, dtype=_np_dtype)

def randn(*shape: int) -> ArrayLike:
    return _np_rng.normal(loc=0, scale=1, size=shape).astype(_np_dtype, copy=False)

def uniform(low, high, size: Optional[int] = None) -> ArrayLike:
    return _np_rng.uniform(low=low, high=high, size=size).astype(
        _np_dtype, copy=False
    )

class multivariate_normal:
    @staticmethod
    def _mean_array(mean, d: int):
        m = numpy.asarray(mean)
        if m.ndim == 0:
            return numpy.full((d,), float(m), dtype=_np_dtype)
        m = m.astype(_np_dtype, copy=False).reshape(-1)
        if m.size != d:
            raise ValueError("mean has incompatible length.")
        return m

    @staticmethod
    def logpdf(x, mean=0.0, cov=1.0):
        # Check if cov is a scalar or 1x1 array, and use norm if so
        if numpy.isscalar(cov) or (
            isinstance(cov, numpy.ndarray) and cov.size == 1
        ):
            return normal.logpdf(x, mean, numpy.sqrt(cov))

        # For dxd covariance matrix, use multivariate_normal
        x = numpy.asarray(x)
        cov = numpy.asarray(cov)
        if cov.ndim != 2 or cov.shape[0] != cov.shape[1]:
            raise ValueError("cov must be a scalar or a square 2D matrix.")
        d = cov.shape[0]
        if x.ndim == 1:
            if x.shape[0] != d:
                raise ValueError("x has incompatible length.")
        else:
            if x.shape[-1] != d:
                raise ValueError("x has incompatible last dimension.")
        mean_array = multivariate_normal._mean_array(mean, d)
        return scipy_mvnormal.logpdf(x, mean=mean_array, cov=cov)
