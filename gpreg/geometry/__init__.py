# gpreg/geometry/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Points, domains, scalar fields and samplers.

These are the collaborators consumed by kernels and Gaussian processes:
a point is a fixed-length real vector, a domain answers membership
queries, and a scalar field maps a point of its domain to a real number.
"""

from .point import as_point, as_points, dimensionality, component
from .domain import (
    Domain,
    RealSpace,
    BoxDomain,
    PredicateDomain,
    IntersectionDomain,
    UnionDomain,
    from_predicate,
    intersection,
    union,
)
from .field import ScalarField, zero_field
from .sampler import UniformBoxDomainSampler, FixedPointsUniformBoxDomainSampler

__all__ = [
    "as_point",
    "as_points",
    "dimensionality",
    "component",
    "Domain",
    "RealSpace",
    "BoxDomain",
    "PredicateDomain",
    "IntersectionDomain",
    "UnionDomain",
    "from_predicate",
    "intersection",
    "union",
    "ScalarField",
    "zero_field",
    "UniformBoxDomainSampler",
    "FixedPointsUniformBoxDomainSampler",
]
