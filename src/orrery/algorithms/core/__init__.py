"""
Core geometry for planar Keplerian orbits.

This package contains the pure numerical functions of the orrery: orbit
geometry (focal distance, positions, ellipses, sampled paths) and the
first-order Lagrange point solver.
"""

from .geometry import (
    distance_to_focus,
    orbit_ellipse,
    orbit_path,
    orbit_path_array,
    orbital_period,
    position_for_true_anomaly,
)
from .lagrange_points import get_lagrange_point, lagrange_points

__all__ = [
    'distance_to_focus',
    'position_for_true_anomaly',
    'orbit_ellipse',
    'orbit_path',
    'orbit_path_array',
    'orbital_period',
    'lagrange_points',
    'get_lagrange_point',
]
