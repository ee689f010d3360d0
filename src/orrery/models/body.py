"""
Celestial body model for planar orbit geometry.

This module defines the CelestialBody class, which holds the fixed orbital
elements of a star, planet, dwarf planet or satellite. Bodies are immutable:
derived quantities such as the true anomaly and the absolute position are
computed once per scene and stored in :class:`orrery.models.scene.Scene`,
never on the body itself.

The CelestialBody class stores:
1. Mass
2. Semi-major axis and eccentricity of its orbit
3. Mean anomaly (catalog orbital phase)
4. A handle to the body it orbits (hierarchical relationship)

The orbited body is referenced by its identifier rather than by an object
reference, so a catalog is an arena of bodies indexed by id and the
orbit-reference graph can be validated as a rooted tree.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from orrery.exceptions import InvalidOrbitalElements


class BodyType(Enum):
    STAR = "star"
    PLANET = "planet"
    DWARF_PLANET = "dwarf_planet"
    SATELLITE = "satellite"


@dataclass(frozen=True)
class CelestialBody:
    """
    Fixed orbital elements of a celestial body.

    Parameters
    ----------
    id : str
        Identifier of the body, unique within a catalog
    mass : float
        Mass of the body (kg)
    semi_major_axis : float, optional
        Semi-major axis of the orbit (km). ``None`` for the primary body.
    eccentricity : float, optional
        Orbit eccentricity in ``[0, 1)``. Default is 0.
    mean_anomaly : float, optional
        Orbital phase given by the catalog (degrees). Default is 0.
    orbit_body : str, optional
        Identifier of the orbited body. ``None`` only for the primary.
    body_type : BodyType, optional
        Kind of body. Default is ``BodyType.PLANET``.

    Raises
    ------
    InvalidOrbitalElements
        If the mass is not positive, if an orbiting body has a non-positive
        semi-major axis or an eccentricity outside ``[0, 1)``, or if the body
        orbits itself.

    Notes
    -----
    Only closed elliptical orbits are supported. The argument of periapsis
    is implicitly 0: every orbit has its periapsis on the +x axis of the
    display frame.
    """
    id: str
    mass: float
    semi_major_axis: Optional[float] = None
    eccentricity: float = 0.0
    mean_anomaly: float = 0.0
    orbit_body: Optional[str] = None
    body_type: BodyType = BodyType.PLANET

    def __post_init__(self):
        if not (self.mass > 0 and math.isfinite(self.mass)):
            raise InvalidOrbitalElements(f"{self.id}: mass must be positive, got {self.mass}")

        if self.orbit_body is None:
            return

        if self.orbit_body == self.id:
            raise InvalidOrbitalElements(f"{self.id}: a body cannot orbit itself")
        if self.semi_major_axis is None or not (self.semi_major_axis > 0 and math.isfinite(self.semi_major_axis)):
            raise InvalidOrbitalElements(
                f"{self.id}: semi-major axis must be positive, got {self.semi_major_axis}")
        if not 0.0 <= self.eccentricity < 1.0:
            raise InvalidOrbitalElements(
                f"{self.id}: eccentricity must be in [0, 1), got {self.eccentricity}")
        if not math.isfinite(self.mean_anomaly):
            raise InvalidOrbitalElements(f"{self.id}: mean anomaly must be finite, got {self.mean_anomaly}")

    @property
    def is_primary(self) -> bool:
        """True for the root body of the hierarchy, which has no orbit."""
        return self.orbit_body is None

    @property
    def semi_minor_axis(self) -> float:
        """Semi-minor axis b = a sqrt(1 - e^2) (km)."""
        if self.is_primary:
            raise InvalidOrbitalElements(f"{self.id} is the primary body and has no orbit")
        return self.semi_major_axis * math.sqrt(1.0 - self.eccentricity ** 2)

    def __str__(self) -> str:
        orbit_desc = f"orbiting {self.orbit_body}" if not self.is_primary else "(Primary)"
        return f"{self.id} {orbit_desc}"
