"""
Catalog of celestial bodies.

A Catalog is an ordered, immutable arena of :class:`CelestialBody` records
with an id to index lookup. Each body's ``orbit_body`` handle points into the
same arena. The orbit-reference graph is validated once, at construction, to
be a single rooted tree: one primary with no orbited body, every handle
resolving to a known id, and no cycles.
"""

import logging
from collections import deque
from typing import Dict, Iterable, Iterator, List, Tuple

from orrery.exceptions import InvalidOrbitalElements
from orrery.models.body import CelestialBody

logger = logging.getLogger(__name__)


class Catalog:
    """
    Validated collection of bodies forming a rooted orbit tree.

    Parameters
    ----------
    bodies : iterable of CelestialBody
        Bodies in catalog order. Order is preserved for iteration and
        breaks ties between siblings in :meth:`topological_order`.

    Raises
    ------
    InvalidOrbitalElements
        On duplicate ids, zero or several primaries, a dangling
        ``orbit_body`` handle, or a cycle in the orbit-reference graph.
    """

    def __init__(self, bodies: Iterable[CelestialBody]):
        self._bodies: Tuple[CelestialBody, ...] = tuple(bodies)
        self._index: Dict[str, int] = {}

        for i, body in enumerate(self._bodies):
            if body.id in self._index:
                raise InvalidOrbitalElements(f"Duplicate body id: {body.id!r}")
            self._index[body.id] = i

        primaries = [body.id for body in self._bodies if body.is_primary]
        if len(primaries) != 1:
            raise InvalidOrbitalElements(
                f"Catalog must have exactly one primary body, found {len(primaries)}: {primaries}")
        self._primary_index = self._index[primaries[0]]

        self._children: Dict[str, List[str]] = {body.id: [] for body in self._bodies}
        for body in self._bodies:
            if body.is_primary:
                continue
            if body.orbit_body not in self._index:
                raise InvalidOrbitalElements(
                    f"{body.id}: orbited body {body.orbit_body!r} is not in the catalog")
            self._children[body.orbit_body].append(body.id)

        self._order = self._breadth_first()
        if len(self._order) != len(self._bodies):
            unreachable = sorted(set(self._index) - set(self._order))
            raise InvalidOrbitalElements(
                f"Orbit references form a cycle not connected to the primary: {unreachable}")

        logger.debug("Catalog built with %d bodies, primary %r", len(self._bodies), self.primary.id)

    def _breadth_first(self) -> Tuple[str, ...]:
        order = []
        queue = deque([self._bodies[self._primary_index].id])
        while queue:
            body_id = queue.popleft()
            order.append(body_id)
            queue.extend(self._children[body_id])
        return tuple(order)

    @property
    def primary(self) -> CelestialBody:
        """The root body, which orbits nothing."""
        return self._bodies[self._primary_index]

    def index_of(self, body_id: str) -> int:
        return self._index[body_id]

    def __getitem__(self, body_id: str) -> CelestialBody:
        return self._bodies[self._index[body_id]]

    def __contains__(self, body_id) -> bool:
        return body_id in self._index

    def __iter__(self) -> Iterator[CelestialBody]:
        return iter(self._bodies)

    def __len__(self) -> int:
        return len(self._bodies)

    def orbited_body(self, body: CelestialBody) -> CelestialBody:
        """Return the body that ``body`` orbits."""
        if body.is_primary:
            raise InvalidOrbitalElements(f"{body.id} is the primary body and has no orbit")
        return self[body.orbit_body]

    def satellites_of(self, body_id: str) -> Tuple[CelestialBody, ...]:
        """Bodies directly orbiting ``body_id``, in catalog order."""
        return tuple(self[child] for child in self._children[body_id])

    def topological_order(self) -> Tuple[CelestialBody, ...]:
        """
        Bodies in breadth-first order from the primary.

        Every body appears after the body it orbits, so positions can be
        computed in a single pass over the returned sequence.
        """
        return tuple(self[body_id] for body_id in self._order)

    def search(self, text: str) -> Tuple[CelestialBody, ...]:
        """
        Case-insensitive substring search on body ids.

        An empty or blank query matches nothing.
        """
        needle = text.strip().lower()
        if not needle:
            return ()
        return tuple(body for body in self._bodies if needle in body.id.lower())

    def __repr__(self) -> str:
        return f"Catalog(primary={self.primary.id!r}, bodies={len(self)})"
