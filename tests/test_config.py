import logging

import pytest

import gpreg.num as gnp
from gpreg import config
from gpreg.core.linalg import regularized_cholesky
from gpreg.errors import NotPositiveSemidefiniteError


def test_defaults():
    cfg = config.get_config()
    assert config.get_backend() == "numpy"
    assert cfg.cholesky_jitter_seed == 1e-10
    assert cfg.cholesky_max_attempts == 64
    assert config.get_logger().name == "gpreg"


def test_set_cholesky_jitter():
    config.set_cholesky_jitter(max_attempts=3)
    with pytest.raises(NotPositiveSemidefiniteError) as excinfo:
        regularized_cholesky(-gnp.eye(2))
    assert excinfo.value.attempts == 3

    config.set_cholesky_jitter(seed=2.0)
    L = regularized_cholesky(-gnp.eye(2))
    # -1 + 2 = 1 succeeds at the first attempt
    assert gnp.allclose(L, gnp.eye(2))

    with pytest.raises(ValueError):
        config.set_cholesky_jitter(seed=0.0)
    with pytest.raises(ValueError):
        config.set_cholesky_jitter(max_attempts=0)


def test_exhausted_jitter_is_logged(caplog):
    config.set_cholesky_jitter(max_attempts=2)
    with caplog.at_level(logging.WARNING, logger="gpreg"):
        with pytest.raises(NotPositiveSemidefiniteError):
            regularized_cholesky(-gnp.eye(2))
    assert "failed 2 times" in caplog.text


def test_seed_is_reproducible():
    gnp.set_seed(42)
    a = gnp.randn(5)
    gnp.set_seed(42)
    b = gnp.randn(5)
    assert gnp.array_equal(a, b)
    assert config.get_config().seed == 42


def test_gammaln_cache():
    config.clear_caches()
    table = gnp.compute_gammaln(2)
    assert table.shape == (6,)
    assert "gammaln" in config.get_config().caches
    assert gnp.compute_gammaln(1).shape == (4,)


def test_dtype():
    assert gnp.get_dtype() == gnp.float64
    assert gnp.zeros(2).dtype == gnp.float64
