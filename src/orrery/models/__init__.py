from .geometry import ORIGIN, Ellipse, OrbitPoint, Point
from .body import BodyType, CelestialBody
from .catalog import Catalog
from .lagrange_point import (
    LagrangePoint,
    LagrangePoints,
    LagrangePointType,
    LagrangeSystem,
    create_lagrange_point,
)
from .scene import Scene

# Export all model classes
__all__ = [
    'ORIGIN',
    'Point',
    'Ellipse',
    'OrbitPoint',
    'BodyType',
    'CelestialBody',
    'Catalog',
    'LagrangePoint',
    'LagrangePoints',
    'LagrangePointType',
    'LagrangeSystem',
    'create_lagrange_point',
    'Scene',
]
