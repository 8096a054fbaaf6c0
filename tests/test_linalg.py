import logging

import numpy as np
import pytest

import gpreg.num as gnp
from gpreg.core.linalg import (
    cholesky_with_jitter,
    regularized_cholesky,
    forward_solve,
    back_solve,
    log_det_from_cholesky,
)
from gpreg.errors import InvalidDimensionError, NotPositiveSemidefiniteError


def random_spd(n):
    X = gnp.rand(n, n)
    return gnp.matmul(X.T, X)


def test_regularized_cholesky_reconstructs_matrix():
    C = random_spd(5)
    L = regularized_cholesky(C)
    assert gnp.sum(gnp.abs(gnp.matmul(L, L.T) - C)) < 1e-4
    assert gnp.allclose(L, gnp.tril(L))


def test_regularized_cholesky_matches_plain_cholesky():
    C = random_spd(5) + gnp.eye(5)
    L0 = cholesky_with_jitter(C, 0.0)
    L = regularized_cholesky(C)
    assert gnp.sum(gnp.abs(L - L0)) < 1e-4


def test_only_lower_triangle_is_read():
    C = random_spd(4) + gnp.eye(4)
    garbage = C + gnp.triu(gnp.full((4, 4), 100.0), k=1)
    assert gnp.allclose(regularized_cholesky(garbage), regularized_cholesky(C))


def test_jitter_rescues_singular_matrix():
    M = gnp.ones((3, 3))
    with pytest.raises(np.linalg.LinAlgError):
        cholesky_with_jitter(M, 0.0)
    L = regularized_cholesky(M)
    assert gnp.sum(gnp.abs(gnp.matmul(L, L.T) - M)) < 1e-4


def test_attempts_are_bounded():
    M = -gnp.eye(3)
    with pytest.raises(NotPositiveSemidefiniteError) as excinfo:
        regularized_cholesky(M, max_attempts=5)
    assert excinfo.value.attempts == 5
    assert excinfo.value.last_jitter == pytest.approx(1e-10 * 2 ** 4)
    # NotPositiveSemidefiniteError is a LinAlgError
    with pytest.raises(np.linalg.LinAlgError):
        regularized_cholesky(-1e12 * gnp.eye(3))


def test_regularized_cholesky_arguments():
    with pytest.raises(ValueError):
        regularized_cholesky(gnp.eye(2), seed_weight=0.0)
    with pytest.raises(ValueError):
        regularized_cholesky(gnp.eye(2), max_attempts=0)
    with pytest.raises(InvalidDimensionError):
        regularized_cholesky(gnp.ones((2, 3)))


def test_forward_solve_single_rhs():
    A = gnp.tril(gnp.rand(5, 5)) + gnp.eye(5)
    x = gnp.rand(5)
    b = gnp.matmul(A, x)
    assert gnp.allclose(forward_solve(A, b), x)


def test_forward_solve_multiple_rhs():
    A = gnp.tril(gnp.rand(5, 5)) + gnp.eye(5)
    X = gnp.rand(5, 3)
    B = gnp.matmul(A, X)
    assert gnp.sum(gnp.abs(forward_solve(A, B) - X)) < 1e-4


def test_back_solve_single_rhs():
    A = gnp.triu(gnp.rand(5, 5)) + gnp.eye(5)
    x = gnp.rand(5)
    b = gnp.matmul(A, x)
    assert gnp.allclose(back_solve(A, b), x)


def test_back_solve_multiple_rhs():
    A = gnp.triu(gnp.rand(5, 5)) + gnp.eye(5)
    X = gnp.rand(5, 3)
    B = gnp.matmul(A, X)
    assert gnp.sum(gnp.abs(back_solve(A, B) - X)) < 1e-4


def test_solves_reject_mismatched_rhs():
    A = gnp.eye(3)
    with pytest.raises(InvalidDimensionError):
        forward_solve(A, gnp.ones(4))
    with pytest.raises(InvalidDimensionError):
        back_solve(A, gnp.ones((2, 2)))
    with pytest.raises(InvalidDimensionError):
        forward_solve(gnp.ones((3, 2)), gnp.ones(3))


def test_log_det_from_cholesky():
    C = random_spd(4) + gnp.eye(4)
    L = regularized_cholesky(C)
    sign, logabsdet = np.linalg.slogdet(C)
    assert sign > 0
    assert log_det_from_cholesky(L) == pytest.approx(logabsdet, abs=1e-8)


def test_jitter_escalation_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="gpreg"):
        # eigenvalues -1e-6 need about 14 doublings of the jitter
        regularized_cholesky(gnp.ones((3, 3)) - 1e-6 * gnp.eye(3))
    assert any(
        r.levelno == logging.DEBUG and "Cholesky failed with jitter" in r.getMessage()
        for r in caplog.records
    )
    assert any("succeeded" in r.getMessage() for r in caplog.records)
    assert not any(r.levelno >= logging.WARNING for r in caplog.records)

    caplog.clear()
    with caplog.at_level(logging.DEBUG, logger="gpreg"):
        with pytest.raises(NotPositiveSemidefiniteError):
            regularized_cholesky(-gnp.eye(3), max_attempts=3)
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "failed 3 times" in warnings[0].getMessage()
    debug = [r for r in caplog.records if r.levelno == logging.DEBUG]
    assert len(debug) == 3
