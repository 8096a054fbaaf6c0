# gpreg/kernel/base.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Positive-definite kernels and kernel algebra.

A kernel is a symmetric function k(x, y) of two points restricted to a
domain. Evaluating a kernel through ``evaluate`` (or calling it) checks
both points against the domain; subclasses only implement ``_k`` on
points already known to be valid.

Combinators build new kernels lazily from existing ones:

- ``SumKernel``     k1(x, y) + k2(x, y), on the intersection of domains
- ``ProductKernel`` k1(x, y) * k2(x, y), on the intersection of domains
- ``ScaledKernel``  s * k(x, y), on the domain of k
- ``ComposedKernel`` k(phi(x), phi(y)), on the domain of k
"""
from numbers import Number

from gpreg.errors import OutOfDomainError
from gpreg.geometry.domain import RealSpace, intersection
from gpreg.geometry.point import as_point


class Kernel:
    """Base class for positive-definite kernels."""

    @property
    def domain(self):
        return RealSpace()

    def _k(self, x, y):
        raise NotImplementedError

    def evaluate(self, x, y):
        """Return k(x, y).

        Raises
        ------
        OutOfDomainError
            If x (checked first) or y is outside ``self.domain``.
        """
        x = as_point(x)
        y = as_point(y)
        domain = self.domain
        if not domain.is_defined_at(x):
            raise OutOfDomainError(x, "domain of the kernel")
        if not domain.is_defined_at(y):
            raise OutOfDomainError(y, "domain of the kernel")
        return float(self._k(x, y))

    def __call__(self, x, y):
        return self.evaluate(x, y)

    def add(self, other):
        return SumKernel(self, other)

    def multiply(self, other):
        return ProductKernel(self, other)

    def scale(self, s):
        return ScaledKernel(self, s)

    def compose_with(self, phi):
        return ComposedKernel(self, phi)

    def __add__(self, other):
        if not isinstance(other, Kernel):
            return NotImplemented
        return self.add(other)

    def __mul__(self, other):
        if isinstance(other, Kernel):
            return self.multiply(other)
        if isinstance(other, Number):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Number):
            return self.scale(other)
        return NotImplemented


class SumKernel(Kernel):
    def __init__(self, k1, k2):
        self.k1 = k1
        self.k2 = k2

    @property
    def domain(self):
        return intersection(self.k1.domain, self.k2.domain)

    def _k(self, x, y):
        return self.k1._k(x, y) + self.k2._k(x, y)

    def __repr__(self):
        return f"({self.k1!r} + {self.k2!r})"


class ProductKernel(Kernel):
    def __init__(self, k1, k2):
        self.k1 = k1
        self.k2 = k2

    @property
    def domain(self):
        return intersection(self.k1.domain, self.k2.domain)

    def _k(self, x, y):
        return self.k1._k(x, y) * self.k2._k(x, y)

    def __repr__(self):
        return f"({self.k1!r} * {self.k2!r})"


class ScaledKernel(Kernel):
    def __init__(self, kernel, s):
        self.kernel = kernel
        self.s = float(s)

    @property
    def domain(self):
        return self.kernel.domain

    def _k(self, x, y):
        return self.kernel._k(x, y) * self.s

    def __repr__(self):
        return f"({self.s!r} * {self.kernel!r})"


class ComposedKernel(Kernel):
    """k(phi(x), phi(y)) for a point transform phi.

    The domain is the domain of k and is checked on x and y only; phi(x)
    and phi(y) are passed to k without a membership check.
    """

    def __init__(self, kernel, phi):
        self.kernel = kernel
        self.phi = phi

    @property
    def domain(self):
        return self.kernel.domain

    def _k(self, x, y):
        return self.kernel._k(as_point(self.phi(x)), as_point(self.phi(y)))


class ZeroKernel(Kernel):
    def _k(self, x, y):
        return 0.0

    def __repr__(self):
        return "ZeroKernel()"
