# gpreg/errors.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Exceptions raised by gpreg.

Out-of-range indices raise the builtin ``IndexError``; the classes below
cover the remaining failure modes.
"""
from numpy.linalg import LinAlgError


class OutOfDomainError(ValueError):
    """A point lies outside the domain of a kernel, a field or a process."""

    def __init__(self, point, what="domain"):
        self.point = point
        super().__init__(f"{point!r} is outside of the {what}")


class InvalidDimensionError(ValueError):
    """Sizes of vectors, matrices or points do not agree."""


class NotPositiveSemidefiniteError(LinAlgError):
    """The regularized Cholesky factorization ran out of attempts."""

    def __init__(self, attempts, last_jitter):
        self.attempts = attempts
        self.last_jitter = last_jitter
        super().__init__(
            f"matrix is not positive semidefinite: Cholesky factorization "
            f"failed {attempts} times (last jitter {last_jitter:.3e})"
        )
