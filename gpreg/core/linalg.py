# gpreg/core/linalg.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Linear-algebra utilities shared across gpreg.core modules.

Covariance matrices built from kernel evaluations are often numerically
singular. They are factored with :func:`regularized_cholesky`, which adds
a small jitter to the diagonal and doubles it until LAPACK accepts the
matrix, and then used through triangular solves.
"""
import gpreg.num as gnp
from gpreg.config import get_config, get_logger
from gpreg.errors import InvalidDimensionError, NotPositiveSemidefiniteError

_logger = get_logger()


def _check_square(M, name="matrix"):
    if M.ndim != 2 or M.shape[0] != M.shape[1]:
        raise InvalidDimensionError(f"{name} must be square, got shape {M.shape}")


def cholesky_with_jitter(M, jitter=0.0):
    """Cholesky factor of M + jitter * I.

    Only the lower triangle of M is read, symmetry is not checked.

    Parameters
    ----------
    M : array_like, shape (n, n)
    jitter : float, optional
        Value added to the diagonal (default 0.0, no regularization).

    Returns
    -------
    L : gnp.array, shape (n, n)
        Lower-triangular factor.

    Raises
    ------
    numpy.linalg.LinAlgError
        If the factorization fails.
    """
    A = gnp.asdouble(M)
    _check_square(A)
    A = gnp.tril(A)
    if jitter != 0.0:
        A = A + jitter * gnp.eye(A.shape[0])
    # numpy.linalg.cholesky reads the lower triangle only
    L = gnp.cholesky(A)
    if not gnp.all(gnp.isfinite(L)):
        raise gnp.LinAlgError("Cholesky factorization produced non-finite values")
    return L


def regularized_cholesky(M, seed_weight=None, max_attempts=None):
    """Cholesky factor of M + w I for the smallest w found by doubling.

    Starting from ``w = seed_weight``, the factorization of ``M + w I`` is
    attempted and ``w`` is doubled after each failure.

    Parameters
    ----------
    M : array_like, shape (n, n)
        Symmetric matrix (only its lower triangle is read).
    seed_weight : float, optional
        First jitter tried. Defaults to ``config.cholesky_jitter_seed``
        (1e-10).
    max_attempts : int, optional
        Number of factorizations tried before giving up. Defaults to
        ``config.cholesky_max_attempts`` (64, which takes the jitter from
        1e-10 up to about 1e9).

    Returns
    -------
    L : gnp.array, shape (n, n)
        Lower-triangular factor, L Lᵀ ≈ M + w I.

    Raises
    ------
    NotPositiveSemidefiniteError
        If every attempt failed.
    """
    config = get_config()
    w = config.cholesky_jitter_seed if seed_weight is None else float(seed_weight)
    n_max = config.cholesky_max_attempts if max_attempts is None else int(max_attempts)
    if w <= 0.0:
        raise ValueError("seed_weight must be positive")
    if n_max < 1:
        raise ValueError("max_attempts must be at least 1")

    M = gnp.asdouble(M)
    _check_square(M)

    last_w = w
    for attempt in range(1, n_max + 1):
        try:
            L = cholesky_with_jitter(M, w)
        except gnp.LinAlgError:
            _logger.debug("Cholesky failed with jitter %.3e (attempt %d)", w, attempt)
            last_w = w
            w *= 2.0
            continue
        if attempt > 1:
            _logger.debug(
                "Cholesky succeeded with jitter %.3e after %d attempts", w, attempt
            )
        return L

    _logger.warning(
        "Cholesky factorization failed %d times, last jitter %.3e", n_max, last_w
    )
    raise NotPositiveSemidefiniteError(n_max, last_w)


def _check_rhs(A, b):
    _check_square(A, "triangular matrix")
    if b.ndim not in (1, 2) or b.shape[0] != A.shape[0]:
        raise InvalidDimensionError(
            f"right-hand side of shape {b.shape} does not match a "
            f"{A.shape[0]}x{A.shape[1]} system"
        )


def forward_solve(L, b):
    """Solve L x = b with L lower-triangular.

    Parameters
    ----------
    L : array_like, shape (n, n)
        Lower-triangular matrix (not checked).
    b : array_like, shape (n,) or (n, k)
        One or several right-hand sides, as columns.

    Returns
    -------
    x : gnp.array, same shape as b
    """
    L = gnp.asdouble(L)
    b = gnp.asdouble(b)
    _check_rhs(L, b)
    return gnp.solve_triangular(L, b, lower=True)


def back_solve(U, b):
    """Solve U x = b with U upper-triangular (typically Lᵀ).

    Parameters
    ----------
    U : array_like, shape (n, n)
        Upper-triangular matrix (not checked).
    b : array_like, shape (n,) or (n, k)

    Returns
    -------
    x : gnp.array, same shape as b
    """
    U = gnp.asdouble(U)
    b = gnp.asdouble(b)
    _check_rhs(U, b)
    return gnp.solve_triangular(U, b, lower=False)


def log_det_from_cholesky(L):
    """log det(L Lᵀ) = 2 Σ log L[i, i]."""
    return 2.0 * float(gnp.sum(gnp.log(gnp.diag(L))))
