# gpreg/kernel/exponential.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import gpreg.num as gnp
from .stationary import StationaryKernel


def exponential_kernel(h):
    """Exponential kernel profile.

    .. math::
        k(h) = \\exp(-h)

    Parameters
    ----------
    h : float or gnp.array
        Scaled distances.

    Returns
    -------
    float or gnp.array
        Kernel values.
    """
    return gnp.exp(-h)


class ExponentialKernel(StationaryKernel):
    """Exponential kernel :math:`\\sigma^2 \\exp(-\\|x - y\\| / \\ell)`."""

    def __init__(self, sigma, lengthscale):
        super().__init__(variance=sigma * sigma, lengthscale=lengthscale)
        self.sigma = float(sigma)

    def profile(self, h):
        return exponential_kernel(h)
