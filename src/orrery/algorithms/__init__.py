"""
Orbit geometry algorithms.

This package provides tools for positioning bodies of a catalog on their
orbits, organized into:

- core:        Orbit geometry engine and Lagrange point solver
- initializer: Primary-first pass building a Scene from a Catalog
"""

from .core import (
    distance_to_focus,
    get_lagrange_point,
    lagrange_points,
    orbit_ellipse,
    orbit_path,
    orbit_path_array,
    orbital_period,
    position_for_true_anomaly,
)
from .initializer import advance_scene, initialize_scene

__all__ = [
    # Geometry
    'distance_to_focus',
    'position_for_true_anomaly',
    'orbit_ellipse',
    'orbit_path',
    'orbit_path_array',
    'orbital_period',

    # Libration points
    'lagrange_points',
    'get_lagrange_point',

    # Scene construction
    'initialize_scene',
    'advance_scene',
]
