"""
Planar Keplerian orbit geometry and Lagrange points for rendering.

The orrery positions the bodies of a hierarchical catalog (a star, its
planets and their moons) on planar elliptical orbits, in a display unit of
kilometres divided by :data:`orrery.config.KM_TO_PX`, and computes the five
Lagrange points of designated primary/secondary pairs.

Typical use:

    ```python
    from orrery import initialize_scene, orbit_path
    from orrery.utils.solar_system import solar_system_catalog

    scene = initialize_scene(solar_system_catalog())
    earth = scene.catalog["earth"]
    path = orbit_path(earth, scene.true_anomaly("earth"), scene.positions)
    l1, l2, l3, l4, l5 = scene.lagrange_points("earth")
    ```
"""

from .algorithms import (
    advance_scene,
    distance_to_focus,
    get_lagrange_point,
    initialize_scene,
    lagrange_points,
    orbit_ellipse,
    orbit_path,
    orbit_path_array,
    orbital_period,
    position_for_true_anomaly,
)
from .exceptions import InvalidOrbitalElements, OrreryError, UnresolvedDependency
from .models import (
    BodyType,
    Catalog,
    CelestialBody,
    Ellipse,
    LagrangePoint,
    LagrangePointType,
    LagrangeSystem,
    OrbitPoint,
    Point,
    Scene,
)

__version__ = "0.1.0"

__all__ = [
    'advance_scene',
    'distance_to_focus',
    'get_lagrange_point',
    'initialize_scene',
    'lagrange_points',
    'orbit_ellipse',
    'orbit_path',
    'orbit_path_array',
    'orbital_period',
    'position_for_true_anomaly',
    'InvalidOrbitalElements',
    'OrreryError',
    'UnresolvedDependency',
    'BodyType',
    'Catalog',
    'CelestialBody',
    'Ellipse',
    'LagrangePoint',
    'LagrangePointType',
    'LagrangeSystem',
    'OrbitPoint',
    'Point',
    'Scene',
]
