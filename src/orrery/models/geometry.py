"""
Planar geometry value types shared by the geometry engine and its consumers.

All coordinates are in display units: kilometres divided by
:data:`orrery.config.KM_TO_PX`, with the origin at the primary body and the
y-axis pointing down (top-left origin, as in SVG).
"""

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Point:
    """Absolute 2-D position in display units."""
    x: float
    y: float

    def to_array(self) -> np.ndarray:
        """Return the point as a ``(2,)`` float64 array."""
        return np.array([self.x, self.y], dtype=np.float64)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to ``other`` in display units."""
        return math.hypot(self.x - other.x, self.y - other.y)


#: Origin of the display frame, where the primary body sits.
ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class Ellipse:
    """
    Display ellipse traced by an orbit.

    Attributes
    ----------
    cx, cy : float
        Geometric centre of the ellipse. It is offset from the orbited body
        so that the orbited body lies on a focus.
    rx, ry : float
        Semi-axes along x (semi-major) and y (semi-minor).
    """
    cx: float
    cy: float
    rx: float
    ry: float


@dataclass(frozen=True)
class OrbitPoint:
    """One sample of an orbit path."""
    true_anomaly: float
    x: float
    y: float

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)
