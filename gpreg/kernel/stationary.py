# gpreg/kernel/stationary.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Stationary kernels on the whole space.

A stationary kernel is written k(x, y) = variance * profile(h) with
h = ||x - y|| / lengthscale.
"""
import gpreg.num as gnp
from .base import Kernel


class StationaryKernel(Kernel):
    """Base class for isotropic stationary kernels.

    Parameters
    ----------
    variance : float
        Value of k(x, x).
    lengthscale : float
        Distances are divided by this value before applying the profile.
    """

    def __init__(self, variance=1.0, lengthscale=1.0):
        if lengthscale <= 0.0:
            raise ValueError("lengthscale must be positive")
        if variance < 0.0:
            raise ValueError("variance must be nonnegative")
        self.variance = float(variance)
        self.lengthscale = float(lengthscale)

    def profile(self, h):
        raise NotImplementedError

    def _k(self, x, y):
        h = gnp.norm(x - y) / self.lengthscale
        return self.variance * self.profile(h)

    def __repr__(self):
        return (
            f"{type(self).__name__}(variance={self.variance!r}, "
            f"lengthscale={self.lengthscale!r})"
        )
