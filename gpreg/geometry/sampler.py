# gpreg/geometry/sampler.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Uniform samplers over box domains, used to generate training locations.
"""
import gpreg.num as gnp
from .point import as_point


class UniformBoxDomainSampler:
    """Draw ``n`` points uniformly in a ``BoxDomain`` on every call.

    ``sample()`` returns a list of ``(point, density)`` pairs where
    density is ``1 / domain.volume``.
    """

    def __init__(self, domain, n):
        if n < 0:
            raise ValueError("number of points must be nonnegative")
        self.domain = domain
        self.number_of_points = int(n)
        self.volume_of_sample_region = domain.volume

    def sample(self):
        p = 1.0 / self.volume_of_sample_region
        u = gnp.uniform(
            self.domain.origin,
            self.domain.opposite_corner,
            size=(self.number_of_points, self.domain.dim),
        )
        return [(as_point(u[i]), p) for i in range(self.number_of_points)]


class FixedPointsUniformBoxDomainSampler(UniformBoxDomainSampler):
    """Uniform sampler that draws once and then returns the same points."""

    def __init__(self, domain, n):
        super().__init__(domain, n)
        self._samples = super().sample()

    def sample(self):
        return list(self._samples)
