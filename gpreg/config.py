# gpreg/config.py
import os
import logging

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(os.path.abspath(_version_file), "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"


class _GPREGConfig:
    def __init__(self):
        self.version = __version__
        self.backend = None
        # set by the numerical backend at import
        self.dtype_resolved = None
        self.seed = 1234
        self.caches = {}
        # jitter search used by gpreg.core.linalg.regularized_cholesky
        self.cholesky_jitter_seed = 1e-10
        self.cholesky_max_attempts = 64
        # logger lives in config
        self.logger = logging.getLogger("gpreg")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(logging.INFO)

    def __str__(self):
        return (
            f"GPREGConfig("
            f"version={self.version}, "
            f"backend={self.backend}, "
            f"dtype={self.dtype_resolved}, "
            f"seed={self.seed}, "
            f"cholesky_jitter_seed={self.cholesky_jitter_seed}, "
            f"cholesky_max_attempts={self.cholesky_max_attempts}, "
            f"caches={list(self.caches.keys())})"
        )

    def __repr__(self):
        return (
            f"<GPREGConfig "
            f"version={self.version!r}, "
            f"backend={self.backend!r}, "
            f"dtype={self.dtype_resolved!r}, "
            f"seed={self.seed!r}, "
            f"caches={list(self.caches.keys())}>"
        )

    def clear_caches(self, name=None):
        if name is None:
            self.caches.clear()
        else:
            self.caches.pop(name, None)

_config = _GPREGConfig()

def get_config():
    return _config

def init_backend():
    """Idempotent. Read GPREG_BACKEND (default 'numpy') and store it."""
    if _config.backend is None:
        backend = os.environ.get("GPREG_BACKEND", "numpy")
        _config.backend = backend
        os.environ["GPREG_BACKEND"] = backend
    return _config.backend

def get_backend():
    """Return current backend; triggers detection if not set."""
    return _config.backend or init_backend()

def set_cholesky_jitter(seed=None, max_attempts=None):
    """Change the starting jitter and/or the attempt budget of the
    regularized Cholesky factorization."""
    if seed is not None:
        if seed <= 0.0:
            raise ValueError("jitter seed must be positive")
        _config.cholesky_jitter_seed = float(seed)
    if max_attempts is not None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        _config.cholesky_max_attempts = int(max_attempts)

def clear_caches(name=None):
    _config.clear_caches(name)

def get_logger():
    return _config.logger

def set_log_level(level):
    _config.logger.setLevel(level)
