# gpreg/geometry/point.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Points of a D-dimensional real space.

A point is a read-only 1-D float array. Scalars are promoted to 1-D
points, so ``[2.0, 4.0, 10.0]`` is understood as three points on the
real line by :func:`as_points`.
"""
import gpreg.num as gnp
from gpreg.errors import InvalidDimensionError


def as_point(x, dim=None):
    """Convert x to a point.

    Parameters
    ----------
    x : float or array_like, shape (d,)
    dim : int, optional
        Expected dimensionality.

    Returns
    -------
    gnp.array, shape (d,)
        Read-only copy of x.
    """
    if gnp.isarray(x) and x.ndim == 1 and not x.flags.writeable:
        p = x
    else:
        p = gnp.asdouble(x)
        if p.ndim == 0:
            p = p.reshape(1)
        if p.ndim != 1:
            raise InvalidDimensionError(
                f"a point must be a scalar or a 1-D array, got shape {p.shape}"
            )
        p = gnp.readonly(p)
    if dim is not None and p.shape[0] != dim:
        raise InvalidDimensionError(
            f"Invalid point dimensionality (provided {p.shape[0]} should be {dim})"
        )
    return p


def as_points(xs):
    """Convert a collection of points to a list of points.

    Parameters
    ----------
    xs : sequence of points, array_like shape (n,) or (n, d)
        A 1-D array is read as n points of dimension 1.

    Returns
    -------
    list of gnp.array, shape (d,)
    """
    if gnp.isarray(xs):
        if xs.ndim == 0:
            raise InvalidDimensionError("expected a collection of points")
        if xs.ndim > 2:
            raise InvalidDimensionError(
                f"points must be given as an (n, d) array, got shape {xs.shape}"
            )
    points = [as_point(x) for x in xs]
    if points:
        d = points[0].shape[0]
        for p in points:
            if p.shape[0] != d:
                raise InvalidDimensionError(
                    "all points must share one dimensionality "
                    f"(found {p.shape[0]} and {d})"
                )
    return points


def dimensionality(x):
    return as_point(x).shape[0]


def component(x, i):
    """Return the i-th coordinate of x."""
    p = as_point(x)
    if not 0 <= i < p.shape[0]:
        raise IndexError(f"component {i} out of range for a {p.shape[0]}-D point")
    return float(p[i])
