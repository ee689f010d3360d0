"""
Scene: derived state of a catalog at one orbital phase.

A Scene is produced by :func:`orrery.algorithms.initializer.initialize_scene`
in a single primary-first pass. It pairs the immutable catalog with the
quantities derived from it (true anomalies, absolute positions and Lagrange
systems). Nothing in a scene is mutated after construction; advancing the
orbital phase produces a new scene.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from orrery.exceptions import UnresolvedDependency
from orrery.models.catalog import Catalog
from orrery.models.geometry import Point
from orrery.models.lagrange_point import LagrangePoints, LagrangeSystem


@dataclass(frozen=True)
class Scene:
    """
    Positions and Lagrange systems of every body in a catalog.

    Attributes
    ----------
    catalog : Catalog
        The bodies and their fixed orbital elements
    true_anomalies : Mapping[str, float]
        True anomaly (degrees) of every orbiting body
    positions : Mapping[str, Point]
        Absolute position of every body; the primary is at the origin
    lagrange_systems : Mapping[str, LagrangeSystem]
        Lagrange systems keyed by secondary body id
    """
    catalog: Catalog
    true_anomalies: Mapping[str, float]
    positions: Mapping[str, Point]
    lagrange_systems: Mapping[str, LagrangeSystem] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "true_anomalies", MappingProxyType(dict(self.true_anomalies)))
        object.__setattr__(self, "positions", MappingProxyType(dict(self.positions)))
        object.__setattr__(self, "lagrange_systems", MappingProxyType(dict(self.lagrange_systems)))

    def position(self, body_id: str) -> Point:
        try:
            return self.positions[body_id]
        except KeyError:
            raise UnresolvedDependency(f"No position computed for {body_id!r}") from None

    def true_anomaly(self, body_id: str) -> float:
        return self.true_anomalies[body_id]

    def lagrange_points(self, body_id: str) -> Optional[LagrangePoints]:
        """L1..L5 for ``body_id`` if it is the secondary of a Lagrange system, else None."""
        system = self.lagrange_systems.get(body_id)
        return system.points if system is not None else None
