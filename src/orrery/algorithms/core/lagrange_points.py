"""
Computation of Lagrange (libration) points for a primary/secondary pair.

This module provides functions for calculating the positions of the five
Lagrange points of two bodies in the display frame, given their masses and
current absolute positions.

The positions use the classical first-order approximations in the mass ratio
``q = m2 / m1``. They are not solutions of the restricted three-body problem
and are only meaningful when the secondary is much lighter than the primary
(``q << 1``, e.g. Sun-Earth); a warning is emitted above
:data:`orrery.config.LAGRANGE_MASS_RATIO_LIMIT`.
"""

import logging
import warnings

import numba
import numpy as np

from orrery.config import FASTMATH, LAGRANGE_MASS_RATIO_LIMIT, NUMBA_CACHE
from orrery.exceptions import InvalidOrbitalElements
from orrery.models.lagrange_point import create_lagrange_point
from orrery.utils.constants import DEG_TO_RAD

logger = logging.getLogger(__name__)

#: Rotation of the secondary about the primary giving L4 (degrees)
TRIANGULAR_ANGLE = 60.0


def lagrange_points(primary, secondary, primary_position, secondary_position):
    """
    Compute all five Lagrange points of a primary/secondary pair.

    Parameters
    ----------
    primary : CelestialBody
        The more massive body
    secondary : CelestialBody
        The body orbiting ``primary``
    primary_position : Point
        Absolute position of the primary (display units)
    secondary_position : Point
        Absolute position of the secondary (display units)

    Returns
    -------
    tuple
        L1, L2, L3, L4 and L5 as LagrangePoint objects, in absolute display
        coordinates

    Raises
    ------
    InvalidOrbitalElements
        If both bodies are at the same position

    Notes
    -----
    With ``p`` the secondary position relative to the primary and ``d = |p|``:

    - L1, L2 lie on the primary-secondary line at ``d - r`` and ``d + r``
      from the primary, with ``r = d cbrt(m2 / (3 m1))`` (Hill radius).
    - L3 lies on the opposite side of the primary at ``d - r`` with
      ``r = d 7 m2 / (12 m1)``.
    - L4, L5 are ``p`` rotated about the primary by +60 and -60 degrees in
      the direction of increasing true anomaly, forming equilateral
      triangles with the two bodies.
    """
    offsets = _lagrange_offsets(primary, secondary, primary_position, secondary_position)
    return tuple(
        create_lagrange_point(primary_position.x + dx, primary_position.y + dy, index + 1)
        for index, (dx, dy) in enumerate(offsets)
    )


def get_lagrange_point(primary, secondary, primary_position, secondary_position, point_index):
    """
    Get the position of a specific Lagrange point.

    Parameters
    ----------
    primary, secondary : CelestialBody
        The pair of bodies
    primary_position, secondary_position : Point
        Their absolute positions (display units)
    point_index : int
        Lagrange point index (1-5)

    Returns
    -------
    LagrangePoint
        The requested point
    """
    if point_index not in (1, 2, 3, 4, 5):
        raise ValueError("Invalid Lagrange point index. Must be 1-5.")
    return lagrange_points(primary, secondary, primary_position, secondary_position)[point_index - 1]


def _lagrange_offsets(primary, secondary, primary_position, secondary_position):
    """
    Offsets of L1..L5 from the primary, as a (5, 2) array.
    """
    mass_ratio = secondary.mass / primary.mass
    if mass_ratio > LAGRANGE_MASS_RATIO_LIMIT:
        warnings.warn(
            f"Lagrange points of {primary.id}-{secondary.id} use a first-order approximation "
            f"that is inaccurate for m2/m1 > {LAGRANGE_MASS_RATIO_LIMIT} (current m2/m1 = {mass_ratio:.4g})",
            stacklevel=3)

    px = float(secondary_position.x - primary_position.x)
    py = float(secondary_position.y - primary_position.y)
    if px == 0.0 and py == 0.0:
        raise InvalidOrbitalElements(
            f"{secondary.id} and {primary.id} are at the same position; Lagrange points are undefined")

    logger.debug("Computing Lagrange points of %s-%s (m2/m1 = %.3e)", primary.id, secondary.id, mass_ratio)
    offsets = np.empty((5, 2), dtype=np.float64)
    offsets[:3] = _collinear_points(px, py, float(mass_ratio))
    offsets[3:] = _equilateral_points(px, py)
    return offsets


@numba.njit(fastmath=FASTMATH, cache=NUMBA_CACHE)
def _collinear_points(px, py, mass_ratio):
    """
    Compute the collinear points (L1, L2, L3) relative to the primary.

    Parameters
    ----------
    px, py : float
        Secondary position relative to the primary
    mass_ratio : float
        m2 / m1

    Returns
    -------
    ndarray
        (3, 2) array with the offsets of L1, L2 and L3
    """
    d = np.sqrt(px ** 2 + py ** 2)
    out = np.empty((3, 2), dtype=np.float64)

    # L1 and L2 sit one Hill radius inside and outside the secondary's orbit
    r = d * (mass_ratio / 3.0) ** (1.0 / 3.0)
    out[0, 0] = px * (d - r) / d
    out[0, 1] = py * (d - r) / d
    out[1, 0] = px * (d + r) / d
    out[1, 1] = py * (d + r) / d

    r = d * 7.0 * mass_ratio / 12.0
    out[2, 0] = -px * (d - r) / d
    out[2, 1] = -py * (d - r) / d
    return out


@numba.njit(fastmath=FASTMATH, cache=NUMBA_CACHE)
def _equilateral_points(px, py):
    """
    Compute the equilateral points (L4, L5) relative to the primary.

    The display y-axis points down, so a rotation by +angle in the direction
    of increasing true anomaly is ``(x cos + y sin, -x sin + y cos)``.

    Returns
    -------
    ndarray
        (2, 2) array with the offsets of L4 and L5
    """
    theta = TRIANGULAR_ANGLE * DEG_TO_RAD
    c = np.cos(theta)
    s = np.sin(theta)

    out = np.empty((2, 2), dtype=np.float64)
    out[0, 0] = px * c + py * s
    out[0, 1] = -px * s + py * c
    # L5: same rotation with the angle negated
    out[1, 0] = px * c - py * s
    out[1, 1] = px * s + py * c
    return out
