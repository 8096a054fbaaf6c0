# gpreg/geometry/domain.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Domains: membership predicates over points.

Classes
-------
Domain
    Base class; subclasses implement ``is_defined_at``.
RealSpace
    The whole space.
BoxDomain
    Closed axis-aligned box.
PredicateDomain
    Domain defined by a boolean function.
IntersectionDomain, UnionDomain
    Combinations of two domains.
"""
import gpreg.num as gnp
from gpreg.errors import InvalidDimensionError
from .point import as_point


class Domain:
    """Set of points answering membership queries."""

    def is_defined_at(self, x):
        raise NotImplementedError

    def __contains__(self, x):
        return self.is_defined_at(x)

    def intersection(self, other):
        return IntersectionDomain(self, other)

    def union(self, other):
        return UnionDomain(self, other)


class RealSpace(Domain):
    def is_defined_at(self, x):
        return True

    def __repr__(self):
        return "RealSpace()"


class PredicateDomain(Domain):
    def __init__(self, chi):
        self.chi = chi

    def is_defined_at(self, x):
        return bool(self.chi(as_point(x)))


class IntersectionDomain(Domain):
    def __init__(self, first, second):
        self.first = first
        self.second = second

    def is_defined_at(self, x):
        return self.first.is_defined_at(x) and self.second.is_defined_at(x)


class UnionDomain(Domain):
    def __init__(self, first, second):
        self.first = first
        self.second = second

    def is_defined_at(self, x):
        return self.first.is_defined_at(x) or self.second.is_defined_at(x)


class BoxDomain(Domain):
    """Closed box [origin, opposite_corner] in D dimensions.

    Parameters
    ----------
    origin : float or array_like, shape (d,)
        Lower corner.
    opposite_corner : float or array_like, shape (d,)
        Upper corner; must be componentwise >= origin.
    """

    def __init__(self, origin, opposite_corner):
        self.origin = as_point(origin)
        self.opposite_corner = as_point(opposite_corner, dim=self.origin.shape[0])
        if gnp.any(self.origin > self.opposite_corner):
            raise ValueError("Origin must be the lower left corner")

    @property
    def dim(self):
        return self.origin.shape[0]

    @property
    def extent(self):
        return self.opposite_corner - self.origin

    @property
    def volume(self):
        return float(gnp.prod(self.extent))

    def is_defined_at(self, x):
        p = as_point(x)
        if p.shape[0] != self.dim:
            raise InvalidDimensionError(
                f"{p.shape[0]}-D point queried in a {self.dim}-D box"
            )
        return bool(gnp.all(p >= self.origin) and gnp.all(p <= self.opposite_corner))

    def __repr__(self):
        return f"BoxDomain({self.origin.tolist()}, {self.opposite_corner.tolist()})"


def from_predicate(chi):
    """Domain of the points x such that chi(x) is true."""
    return PredicateDomain(chi)


def intersection(first, second):
    return IntersectionDomain(first, second)


def union(first, second):
    return UnionDomain(first, second)
