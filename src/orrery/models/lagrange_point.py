"""
Lagrange point model.

This module defines the value types describing the five Lagrange (libration)
points of a primary/secondary pair in the display frame:

- LagrangePointType: the L1..L5 tag
- LagrangePoint: a tagged position
- LagrangeSystem: the ordered L1..L5 points attached to one secondary body

Collinear points (L1, L2, L3) lie on the line through the primary and the
secondary; triangular points (L4, L5) form equilateral triangles with them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from orrery.models.geometry import Point


class LagrangePointType(Enum):
    L1 = 1
    L2 = 2
    L3 = 3
    L4 = 4
    L5 = 5

    @property
    def is_collinear(self) -> bool:
        return self in (LagrangePointType.L1, LagrangePointType.L2, LagrangePointType.L3)

    @property
    def is_triangular(self) -> bool:
        return self in (LagrangePointType.L4, LagrangePointType.L5)


@dataclass(frozen=True)
class LagrangePoint:
    """
    Position of one Lagrange point.

    Attributes
    ----------
    x, y : float
        Absolute position in display units
    type : LagrangePointType
        Which of the five points this is
    """
    x: float
    y: float
    type: LagrangePointType

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)

    @property
    def is_collinear(self) -> bool:
        return self.type.is_collinear

    @property
    def is_triangular(self) -> bool:
        return self.type.is_triangular


LagrangePoints = Tuple[LagrangePoint, LagrangePoint, LagrangePoint, LagrangePoint, LagrangePoint]


@dataclass(frozen=True)
class LagrangeSystem:
    """
    The five Lagrange points of a designated primary/secondary pair.

    Attributes
    ----------
    primary_id : str
        Identifier of the primary (more massive) body
    secondary_id : str
        Identifier of the secondary body
    points : tuple of LagrangePoint
        L1, L2, L3, L4, L5 in that order
    """
    primary_id: str
    secondary_id: str
    points: LagrangePoints

    def __getitem__(self, point_type: LagrangePointType) -> LagrangePoint:
        return self.points[point_type.value - 1]


def create_lagrange_point(x, y, point_index):
    """
    Create a Lagrange point from its coordinates and index.

    Parameters
    ----------
    x, y : float
        Position in display units
    point_index : int
        The Lagrange point index (1-5)

    Returns
    -------
    LagrangePoint
        The tagged point

    Raises
    ------
    ValueError
        If an invalid point index is provided
    """
    try:
        point_type = LagrangePointType(point_index)
    except ValueError:
        raise ValueError(f"Invalid Lagrange point index: {point_index}. Must be 1-5.") from None
    return LagrangePoint(float(x), float(y), point_type)
