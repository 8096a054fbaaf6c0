# gpreg/geometry/field.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Scalar fields: real-valued functions attached to a domain.

A ``ScalarField`` is the mean function of a Gaussian process. Calling
it outside its domain raises ``OutOfDomainError``.
"""
from numbers import Number

from gpreg.errors import OutOfDomainError
from .domain import RealSpace, PredicateDomain, intersection
from .point import as_point


class ScalarField:
    """Function ``f`` restricted to ``domain``.

    Parameters
    ----------
    domain : gpreg.geometry.Domain
    f : callable
        Maps a point (1-D array) to a float.
    """

    def __init__(self, domain, f):
        self.domain = domain
        self.f = f

    def __call__(self, x):
        p = as_point(x)
        if not self.is_defined_at(p):
            raise OutOfDomainError(p, "domain of the field")
        return float(self.f(p))

    def __repr__(self):
        try:
            name = self.f.__name__
        except AttributeError:
            name = str(self.f)
        return f"ScalarField({self.domain!r}, {name})"

    def is_defined_at(self, x):
        return self.domain.is_defined_at(x)

    def add(self, other):
        f, g = self.f, other.f
        return ScalarField(intersection(self.domain, other.domain), lambda x: f(x) + g(x))

    def subtract(self, other):
        f, g = self.f, other.f
        return ScalarField(intersection(self.domain, other.domain), lambda x: f(x) - g(x))

    def multiply(self, other):
        """Pointwise product."""
        f, g = self.f, other.f
        return ScalarField(intersection(self.domain, other.domain), lambda x: f(x) * g(x))

    def scale(self, s):
        f = self.f
        return ScalarField(self.domain, lambda x: f(x) * s)

    def compose_with(self, t):
        """Return x -> f(t(x)), defined where t(x) falls in the domain."""
        f, domain = self.f, self.domain
        return ScalarField(
            PredicateDomain(lambda x: domain.is_defined_at(as_point(t(x)))),
            lambda x: f(as_point(t(x))),
        )

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __mul__(self, other):
        if isinstance(other, Number):
            return self.scale(other)
        return self.multiply(other)

    __rmul__ = __mul__


def zero_field():
    return ScalarField(RealSpace(), lambda x: 0.0)
