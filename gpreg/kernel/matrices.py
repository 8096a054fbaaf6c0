# gpreg/kernel/matrices.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Covariance matrices and vectors from a kernel and sequences of points.

Row and column order always follows the order of the input points.

Functions
---------
build_covariance_matrix(points, kernel)
    Symmetric (n, n) matrix K[i, j] = k(points[i], points[j]).
build_cross_covariance_matrix(xs, ys, kernel)
    (nx, ny) matrix K[i, j] = k(xs[i], ys[j]).
build_covariance_vector(x, points, kernel)
    (1, n) matrix K[0, i] = k(x, points[i]).
"""
import gpreg.num as gnp
from gpreg.geometry.point import as_point, as_points


def build_covariance_matrix(points, kernel):
    """Covariance matrix of a kernel over a sequence of points.

    Only the lower triangle (j <= i) is evaluated; the result is then
    symmetrized as K + Kᵀ - diag(diag(K)), so it is exactly symmetric
    and each diagonal entry is evaluated once.

    Parameters
    ----------
    points : sequence of points or array_like, shape (n,) or (n, d)
    kernel : gpreg.kernel.Kernel

    Returns
    -------
    K : gnp.array, shape (n, n)
    """
    xs = as_points(points)
    n = len(xs)
    K = gnp.zeros((n, n))
    for i in range(n):
        for j in range(i + 1):
            K[i, j] = kernel(xs[i], xs[j])
    return K + K.T - gnp.diag(gnp.diag(K))


def build_cross_covariance_matrix(xs, ys, kernel):
    """Cross-covariance matrix, no symmetry assumed.

    Parameters
    ----------
    xs : sequence of points, length nx
    ys : sequence of points, length ny
    kernel : gpreg.kernel.Kernel

    Returns
    -------
    K : gnp.array, shape (nx, ny)
    """
    xs = as_points(xs)
    ys = as_points(ys)
    K = gnp.zeros((len(xs), len(ys)))
    for i, x in enumerate(xs):
        for j, y in enumerate(ys):
            K[i, j] = kernel(x, y)
    return K


def build_covariance_vector(x, points, kernel):
    """Covariances between one point and a sequence of points.

    Returns
    -------
    K : gnp.array, shape (1, n)
    """
    x = as_point(x)
    xs = as_points(points)
    K = gnp.zeros((1, len(xs)))
    for i, xi in enumerate(xs):
        K[0, i] = kernel(x, xi)
    return K
