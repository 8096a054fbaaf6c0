# gpreg/kernel/gaussian.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import gpreg.num as gnp
from .stationary import StationaryKernel


class GaussianKernel(StationaryKernel):
    """Gaussian kernel.

    .. math::
        k(x, y) = \\exp(-\\|x - y\\|^2 / \\sigma^2)
    """

    def __init__(self, sigma):
        super().__init__(variance=1.0, lengthscale=sigma)
        self.sigma = float(sigma)

    def profile(self, h):
        return gnp.exp(-(h ** 2))

    def __repr__(self):
        return f"GaussianKernel(sigma={self.sigma!r})"


class ExponentiatedQuadraticKernel(StationaryKernel):
    """Exponentiated quadratic (squared exponential) kernel.

    .. math::
        k(x, y) = \\sigma^2 \\exp(-\\|x - y\\|^2 / (2 \\ell^2))

    Parameters
    ----------
    sigma : float
        Standard deviation, k(x, x) = sigma^2.
    lengthscale : float
        Length scale :math:`\\ell`.
    """

    def __init__(self, sigma, lengthscale):
        super().__init__(variance=sigma * sigma, lengthscale=lengthscale)
        self.sigma = float(sigma)

    def profile(self, h):
        return gnp.exp(-0.5 * h ** 2)

    def __repr__(self):
        return (
            f"ExponentiatedQuadraticKernel(sigma={self.sigma!r}, "
            f"lengthscale={self.lengthscale!r})"
        )


def gaussian_kernel(sigma):
    return GaussianKernel(sigma)


def exponentiated_quadratic_kernel(sigma, lengthscale):
    return ExponentiatedQuadraticKernel(sigma, lengthscale)
