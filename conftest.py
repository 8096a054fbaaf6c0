# conftest.py
import pytest
import gpreg.num as gnp
from gpreg.config import get_config


@pytest.fixture(autouse=True)
def reset_random_seed():
    """Every test starts from the same generator state."""
    gnp.set_seed(1234)


@pytest.fixture(autouse=True)
def restore_cholesky_jitter():
    config = get_config()
    saved = (config.cholesky_jitter_seed, config.cholesky_max_attempts)
    yield
    config.cholesky_jitter_seed, config.cholesky_max_attempts = saved
