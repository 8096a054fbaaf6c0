# gpreg/__init__.py

from . import config
from . import num
from . import errors
from . import geometry
from . import kernel
from . import core
from .core import (
    MultivariateNormal,
    GaussianProcess,
    regression,
    log_marginal_likelihood,
)
from .errors import OutOfDomainError, InvalidDimensionError, NotPositiveSemidefiniteError
import os

__all__ = [
    "num",
    "geometry",
    "kernel",
    "core",
    "MultivariateNormal",
    "GaussianProcess",
    "regression",
    "log_marginal_likelihood",
    "OutOfDomainError",
    "InvalidDimensionError",
    "NotPositiveSemidefiniteError",
    "__version__",
]

# Read version from VERSION file at project root
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(_version_file, "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"
