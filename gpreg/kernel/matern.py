# gpreg/kernel/matern.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
from math import sqrt
import gpreg.num as gnp
from .stationary import StationaryKernel


def matern32_kernel(h):
    """Matérn 3/2 kernel profile.

    .. math::
        K(h) = (1 + 2\\sqrt{3/2}\\,h) \\exp(-2\\sqrt{3/2}\\,h)

    Parameters
    ----------
    h : float or gnp.array
        Scaled distances.

    Returns
    -------
    float or gnp.array
        Kernel values.
    """
    nu = 3.0 / 2.0
    c = 2.0 * sqrt(nu)
    t = c * h
    return (1.0 + t) * gnp.exp(-t)


def maternp_kernel(p: int, h):
    """Matérn kernel profile with half-integer regularity :math:`\\nu = p + 1/2`.

    Using the half-integer simplification (Watson 1922; Abramowitz & Stegun):

    .. math::
        K(h) = \\exp(-2\\sqrt{\\nu}\\,h)\\,
               \\frac{\\Gamma(p+1)}{\\Gamma(2p+1)}
               \\sum_{i=0}^{p} \\frac{(p+i)!}{i!(p-i)!}\\,(4\\sqrt{\\nu}h)^{\\,p-i}

    Parameters
    ----------
    p : int
        Nonnegative integer with :math:`\\nu = p+1/2`.
    h : float or gnp.array
        Scaled distances.

    Returns
    -------
    gnp.array
        Kernel values, same shape as h.
    """
    gln = gnp.compute_gammaln(p)
    h = gnp.inftobigf(gnp.asdouble(h))
    c = 2.0 * sqrt(p + 0.5)
    twoch = 2.0 * c * h
    polynomial = gnp.ones(h.shape)
    for i in range(p):
        exp_log_combination = gnp.exp(
            gln[p + 1] - gln[2 * p + 1] + gln[p + i + 1] - gln[i + 1] - gln[p - i + 1]
        )
        polynomial += exp_log_combination * (twoch ** (p - i))
    return gnp.exp(-c * h) * polynomial


class MaternKernel(StationaryKernel):
    """Matérn kernel :math:`\\sigma^2 K_p(\\|x - y\\| / \\ell)`, :math:`\\nu = p + 1/2`.

    p = 0 gives the exponential kernel with rate 2 sqrt(1/2), p = 1 the
    Matérn 3/2 kernel.
    """

    def __init__(self, p, sigma, lengthscale):
        if int(p) != p or p < 0:
            raise ValueError("p must be a nonnegative integer")
        super().__init__(variance=sigma * sigma, lengthscale=lengthscale)
        self.p = int(p)
        self.sigma = float(sigma)

    def profile(self, h):
        return float(maternp_kernel(self.p, h))

    def __repr__(self):
        return (
            f"MaternKernel(p={self.p!r}, sigma={self.sigma!r}, "
            f"lengthscale={self.lengthscale!r})"
        )
