"""
Scene initialization from a body catalog.

A scene is built in two phases: the Catalog holds the immutable orbital
elements, then a single breadth-first pass from the primary assigns every
orbiting body its true anomaly and absolute position. Because a position is
an offset from the orbited body's position, bodies must be visited after the
body they orbit; :meth:`Catalog.topological_order` guarantees it.

The true anomaly is taken equal to the catalog mean anomaly. Kepler's
equation is not solved, so positions are exact only for circular orbits and
drift from the true ephemeris as the eccentricity grows.
"""

import logging
import math
from typing import Iterable, Mapping, Optional, Tuple

from orrery.algorithms.core.geometry import position_for_true_anomaly
from orrery.algorithms.core.lagrange_points import lagrange_points
from orrery.config import DEFAULT_LAGRANGE_PAIRS
from orrery.exceptions import InvalidOrbitalElements
from orrery.models.catalog import Catalog
from orrery.models.geometry import ORIGIN
from orrery.models.lagrange_point import LagrangeSystem
from orrery.models.scene import Scene

logger = logging.getLogger(__name__)


def initialize_scene(catalog: Catalog,
                     lagrange_pairs: Optional[Iterable[Tuple[str, str]]] = None,
                     true_anomalies: Optional[Mapping[str, float]] = None) -> Scene:
    """
    Compute the positions of every body in a catalog.

    Parameters
    ----------
    catalog : Catalog
        Validated bodies
    lagrange_pairs : iterable of (str, str), optional
        ``(primary_id, secondary_id)`` pairs whose Lagrange points are
        computed. Every id must be in the catalog. If None, the pairs of
        :data:`orrery.config.DEFAULT_LAGRANGE_PAIRS` present in the catalog
        are used.
    true_anomalies : Mapping[str, float], optional
        True anomalies (degrees) overriding the catalog mean anomaly of some
        bodies

    Returns
    -------
    Scene
        True anomalies, positions (primary at the origin) and Lagrange
        systems of the catalog

    Raises
    ------
    KeyError
        If an override or a Lagrange pair names an unknown body
    ValueError
        If a Lagrange pair uses the same body twice or two pairs share a secondary
    InvalidOrbitalElements
        If an override is not a finite number
    """
    overrides = dict(true_anomalies or {})
    unknown = [body_id for body_id in overrides if body_id not in catalog]
    if unknown:
        raise KeyError(f"True anomaly given for unknown bodies: {unknown}")
    for body_id, anomaly in overrides.items():
        if not math.isfinite(anomaly):
            raise InvalidOrbitalElements(f"True anomaly of {body_id} must be finite, got {anomaly}")

    anomalies = {}
    positions = {catalog.primary.id: ORIGIN}
    for body in catalog.topological_order():
        if body.is_primary:
            continue
        # no Kepler solve: the mean anomaly stands in for the true anomaly
        anomaly = overrides.get(body.id, body.mean_anomaly)
        anomalies[body.id] = anomaly
        positions[body.id] = position_for_true_anomaly(body, anomaly, positions)

    if lagrange_pairs is None:
        pairs = [pair for pair in DEFAULT_LAGRANGE_PAIRS if pair[0] in catalog and pair[1] in catalog]
    else:
        pairs = list(lagrange_pairs)

    systems = {}
    for primary_id, secondary_id in pairs:
        if primary_id == secondary_id:
            raise ValueError(f"Lagrange pair needs two distinct bodies, got {primary_id!r} twice")
        if secondary_id in systems:
            raise ValueError(f"{secondary_id!r} is the secondary of more than one Lagrange pair")
        primary = catalog[primary_id]
        secondary = catalog[secondary_id]
        points = lagrange_points(primary, secondary, positions[primary_id], positions[secondary_id])
        systems[secondary_id] = LagrangeSystem(primary_id, secondary_id, points)

    logger.info("Initialized scene: %d bodies positioned, %d Lagrange systems",
                len(positions), len(systems))
    return Scene(catalog, anomalies, positions, systems)


def advance_scene(scene: Scene, true_anomalies: Mapping[str, float]) -> Scene:
    """
    Recompute a scene with new true anomalies for some bodies.

    Bodies not named in ``true_anomalies`` keep their current anomaly, and
    the same Lagrange pairs are recomputed. The input scene is unchanged.

    Parameters
    ----------
    scene : Scene
        Current scene
    true_anomalies : Mapping[str, float]
        New true anomalies in degrees

    Returns
    -------
    Scene
        A new scene
    """
    anomalies = dict(scene.true_anomalies)
    anomalies.update(true_anomalies)
    pairs = [(system.primary_id, system.secondary_id) for system in scene.lagrange_systems.values()]
    return initialize_scene(scene.catalog, pairs, anomalies)
