"""
Planar Keplerian orbit geometry.

This module maps a body's fixed orbital elements and a true anomaly to
positions, display ellipses and sampled orbit paths. Every orbit is a closed
ellipse (0 <= e < 1) lying in the display plane with its major axis on the
x-axis and its periapsis towards +x: the argument of periapsis is always 0 and
ellipses are never rotated. Supporting other orientations would require an
extra rotation of every offset computed here.

Conventions:
- Distances returned in km are measured from the orbited body (the focus).
- Positions are absolute, in display units (km / KM_TO_PX), relative to the
  primary body at (0, 0).
- The y-axis points down (top-left origin), so y offsets are negated.
- True anomalies are in degrees and may lie outside [0, 360).

The numerical kernels are compiled with Numba; the public functions are thin
wrappers taking model objects.
"""

import math
from typing import Mapping, Tuple

import numba
import numpy as np

from orrery.config import FASTMATH, KM_TO_PX, NUMBA_CACHE, ORBIT_SAMPLES
from orrery.exceptions import InvalidOrbitalElements, UnresolvedDependency
from orrery.models.body import CelestialBody
from orrery.models.geometry import Ellipse, OrbitPoint, Point
from orrery.utils.constants import DEG_TO_RAD, G, KM_TO_M, SECONDS_PER_HOUR


def distance_to_focus(body: CelestialBody, true_anomaly: float) -> float:
    """
    Distance between a body and the body it orbits at a given true anomaly.

    Uses the polar equation of a conic with the focus at the orbited body,
    ``r = a (1 - e^2) / (1 + e cos(nu))``.

    Parameters
    ----------
    body : CelestialBody
        Orbiting body
    true_anomaly : float
        True anomaly in degrees

    Returns
    -------
    float
        Distance to the focus in km. ``a (1 - e)`` at 0 degrees (periapsis)
        and ``a (1 + e)`` at 180 degrees (apoapsis).
    """
    _require_orbit(body)
    return float(_focal_distance(float(body.semi_major_axis), float(body.eccentricity), float(true_anomaly)))


def position_for_true_anomaly(body: CelestialBody, true_anomaly: float,
                              positions: Mapping[str, Point]) -> Point:
    """
    Absolute position of a body at a given true anomaly.

    Parameters
    ----------
    body : CelestialBody
        Orbiting body
    true_anomaly : float
        True anomaly in degrees
    positions : Mapping[str, Point]
        Already computed absolute positions, which must contain the orbited
        body

    Returns
    -------
    Point
        Absolute position in display units

    Raises
    ------
    UnresolvedDependency
        If the orbited body has no position in ``positions`` yet
    InvalidOrbitalElements
        If ``body`` is the primary body

    Notes
    -----
    No caching is done; callers needing the same angle repeatedly should
    memoize the result.
    """
    origin = _orbited_position(body, positions)
    x_km, y_km = _focal_offset(float(body.semi_major_axis), float(body.eccentricity), float(true_anomaly))
    return Point(x_km / KM_TO_PX + origin.x, y_km / KM_TO_PX + origin.y)


def orbit_ellipse(body: CelestialBody, positions: Mapping[str, Point]) -> Ellipse:
    """
    Display ellipse of a body's orbit.

    Parameters
    ----------
    body : CelestialBody
        Orbiting body
    positions : Mapping[str, Point]
        Absolute positions containing the orbited body

    Returns
    -------
    Ellipse
        Semi-axes ``a`` and ``b = a sqrt(1 - e^2)``, centred a linear
        eccentricity ``c = a e`` away from the orbited body on the side of
        the apoapsis, so that the orbited body lies on the focus.
    """
    origin = _orbited_position(body, positions)
    a = body.semi_major_axis
    c = body.eccentricity * a
    return Ellipse(
        cx=origin.x - c / KM_TO_PX,
        cy=origin.y,
        rx=a / KM_TO_PX,
        ry=body.semi_minor_axis / KM_TO_PX,
    )


def orbit_path_array(body: CelestialBody, true_anomaly: float, positions: Mapping[str, Point],
                     sample_count: int = ORBIT_SAMPLES) -> np.ndarray:
    """
    Sampled orbit path as an array.

    Parameters
    ----------
    body : CelestialBody
        Orbiting body
    true_anomaly : float
        Current true anomaly of the body (degrees)
    positions : Mapping[str, Point]
        Absolute positions containing the orbited body. A stored position of
        the body itself is ignored; the current-anomaly sample is always
        placed at ``true_anomaly``.
    sample_count : int, optional
        Number of evenly spaced anomalies on [0, 360). Default is 360.

    Returns
    -------
    ndarray
        Array of shape ``(sample_count + 1, 3)`` with columns
        ``[true_anomaly, x, y]``, sorted by anomaly. The extra row holds the
        body's current anomaly (reduced to [0, 360)) and position, so the
        path always passes exactly through the body.
    """
    if isinstance(sample_count, bool) or not isinstance(sample_count, (int, np.integer)) or sample_count < 1:
        raise ValueError(f"sample_count must be a positive integer, got {sample_count!r}")

    origin = _orbited_position(body, positions)
    anomalies = np.arange(sample_count, dtype=np.float64) * (360.0 / sample_count)
    samples = _sample_orbit(float(body.semi_major_axis), float(body.eccentricity), anomalies,
                            float(origin.x), float(origin.y), float(KM_TO_PX))

    current = position_for_true_anomaly(body, true_anomaly, positions)
    extra = np.array([[float(true_anomaly) % 360.0, current.x, current.y]], dtype=np.float64)

    path = np.vstack((samples, extra))
    order = np.argsort(path[:, 0], kind="stable")
    return path[order]


def orbit_path(body: CelestialBody, true_anomaly: float, positions: Mapping[str, Point],
               sample_count: int = ORBIT_SAMPLES) -> Tuple[OrbitPoint, ...]:
    """
    Closed-loop approximation of an orbit as OrbitPoint samples.

    See :func:`orbit_path_array` for the sampling rules. The returned tuple
    has exactly ``sample_count + 1`` points in ascending anomaly order.
    """
    path = orbit_path_array(body, true_anomaly, positions, sample_count)
    return tuple(OrbitPoint(float(nu), float(x), float(y)) for nu, x, y in path)


def orbital_period(body: CelestialBody, orbited: CelestialBody) -> float:
    """
    Orbital period from Kepler's third law, ``T = 2 pi sqrt(a^3 / (G M))``.

    The mass of the orbiting body is neglected.

    Parameters
    ----------
    body : CelestialBody
        Orbiting body
    orbited : CelestialBody
        Body it orbits

    Returns
    -------
    float
        Period in hours, 0.0 for the primary body
    """
    if body.is_primary:
        return 0.0
    a_m = body.semi_major_axis * KM_TO_M
    return float(2.0 * math.pi * math.sqrt(a_m ** 3 / (G * orbited.mass)) / SECONDS_PER_HOUR)


def _require_orbit(body):
    if body.is_primary:
        raise InvalidOrbitalElements(f"{body.id} is the primary body and has no orbit")


def _orbited_position(body, positions):
    _require_orbit(body)
    try:
        return positions[body.orbit_body]
    except KeyError:
        raise UnresolvedDependency(
            f"Position of {body.orbit_body!r} must be computed before {body.id!r}") from None


@numba.njit(fastmath=FASTMATH, cache=NUMBA_CACHE)
def _focal_distance(a, e, nu):
    """
    Focal distance r = a (1 - e^2) / (1 + e cos(nu)) with nu in degrees.
    """
    return a * (1.0 - e ** 2) / (1.0 + e * np.cos(nu * DEG_TO_RAD))


@numba.njit(fastmath=FASTMATH, cache=NUMBA_CACHE)
def _focal_offset(a, e, nu):
    """
    Offset (x, y) in km from the focus, y pointing down.
    """
    r = _focal_distance(a, e, nu)
    theta = nu * DEG_TO_RAD
    return r * np.cos(theta), -r * np.sin(theta)


@numba.njit(fastmath=FASTMATH, cache=NUMBA_CACHE)
def _sample_orbit(a, e, anomalies, origin_x, origin_y, scale):
    """
    Absolute positions for an array of true anomalies.

    Returns
    -------
    ndarray
        Array of shape (n, 3) with columns [anomaly, x, y]
    """
    n = anomalies.shape[0]
    out = np.empty((n, 3), dtype=np.float64)
    for i in range(n):
        x_km, y_km = _focal_offset(a, e, anomalies[i])
        out[i, 0] = anomalies[i]
        out[i, 1] = x_km / scale + origin_x
        out[i, 2] = y_km / scale + origin_y
    return out
