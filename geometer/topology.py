"""Vertex records and the arena that links them into a polygon boundary.

A :class:`VertexTopology` stores vertices in a dense list indexed by their
id. Each vertex names its predecessor and successor by id, so the circular
doubly-linked boundary never holds object references to itself. Removing a
vertex rewrites its two neighbours and frees its slot.

Ids are issued by a counter owned by each topology, starting at 0 in input
order. Copies made with :meth:`VertexTopology.copy` share the same ids, which
is what lets a triangulation run on a private copy and still report ids that
are meaningful for the input polygon.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from .core.errors import DegenerateInputError, ForeignIdError, TopologyError
from .point import Point

VertexId = int


@dataclass(frozen=True)
class Vertex:
    """A boundary vertex: coordinates plus the ids of its two neighbours."""
    id: VertexId
    coords: Point
    prev: VertexId
    next: VertexId

    @property
    def x(self):
        return self.coords.x

    @property
    def y(self):
        return self.coords.y


class VertexTopology:
    """Owning container for the vertices of one polygon boundary.

    Invariant: for every live vertex ``v``,
    ``get(v.next).prev == v.id`` and ``get(v.prev).next == v.id``, and the
    links form exactly one cycle through all live vertices.
    """

    def __init__(self, slots: List[Optional[Vertex]], size: int):
        self._slots = slots
        self._size = size

    @classmethod
    def build(cls, points: Iterable[Union[Point, Tuple]]) -> "VertexTopology":
        """Create a topology from an ordered point sequence.

        Args:
            points: Boundary points in traversal order (either winding)

        Returns:
            New topology with ids ``0..n-1`` wired in input order

        Raises:
            DegenerateInputError: If fewer than 3 points are given
        """
        coords = [Point.coerce(p) for p in points]
        n = len(coords)
        if n < 3:
            raise DegenerateInputError(
                f"a polygon needs at least 3 points, got {n}", num_points=n
            )

        slots: List[Optional[Vertex]] = [
            Vertex(id=i, coords=p, prev=(i - 1) % n, next=(i + 1) % n)
            for i, p in enumerate(coords)
        ]
        return cls(slots, n)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self._size

    def __contains__(self, vertex_id: object) -> bool:
        return (
            isinstance(vertex_id, int)
            and not isinstance(vertex_id, bool)
            and 0 <= vertex_id < len(self._slots)
            and self._slots[vertex_id] is not None
        )

    def __iter__(self) -> Iterator[Vertex]:
        """Live vertices in id order."""
        return (v for v in self._slots if v is not None)

    def ids(self) -> List[VertexId]:
        return [v.id for v in self]

    def get(self, vertex_id: VertexId) -> Vertex:
        """Return the vertex with ``vertex_id``.

        Raises:
            ForeignIdError: If the id was never issued here or has been removed
        """
        if vertex_id not in self:
            raise ForeignIdError(vertex_id)
        return self._slots[vertex_id]

    def anchor(self) -> Vertex:
        """Fixed starting vertex for boundary walks (lowest live id)."""
        for v in self._slots:
            if v is not None:
                return v
        raise TopologyError("topology has no vertices")

    def walk(self, start: Optional[VertexId] = None) -> Iterator[Vertex]:
        """Yield each vertex once in boundary order, beginning at ``start``."""
        first = self.anchor() if start is None else self.get(start)
        current = first
        while True:
            yield current
            current = self.get(current.next)
            if current.id == first.id:
                return

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def remove(self, vertex_id: VertexId) -> Vertex:
        """Unlink a vertex, bridging its neighbours, and free its slot.

        Raises:
            ForeignIdError: If the id is not live
            DegenerateInputError: If only 3 vertices remain
        """
        v = self.get(vertex_id)
        if self._size <= 3:
            raise DegenerateInputError(
                "cannot remove a vertex from a topology with 3 vertices",
                num_points=self._size,
            )
        self._slots[v.prev] = replace(self._slots[v.prev], next=v.next)
        self._slots[v.next] = replace(self._slots[v.next], prev=v.prev)
        self._slots[vertex_id] = None
        self._size -= 1
        return v

    def copy(self) -> "VertexTopology":
        return VertexTopology(list(self._slots), self._size)

    def reversed(self) -> "VertexTopology":
        """Copy with every prev/next pair swapped (opposite winding, same ids)."""
        slots = [
            None if v is None else replace(v, prev=v.next, next=v.prev)
            for v in self._slots
        ]
        return VertexTopology(slots, self._size)

    def check_invariant(self) -> None:
        """Verify the links form one consistent cycle.

        Raises:
            TopologyError: On a dangling link, a mismatched back-link or a sub-cycle
        """
        for v in self:
            if v.next not in self or v.prev not in self:
                raise TopologyError(f"vertex {v.id} links to a removed vertex")
            if self._slots[v.next].prev != v.id:
                raise TopologyError(f"next({v.id}).prev != {v.id}")
            if self._slots[v.prev].next != v.id:
                raise TopologyError(f"prev({v.id}).next != {v.id}")

        seen = 0
        for _ in self.walk():
            seen += 1
            if seen > self._size:
                break
        if seen != self._size:
            raise TopologyError(
                f"boundary cycle visits {seen} of {self._size} vertices"
            )

    def __repr__(self) -> str:
        return f"VertexTopology({self._size} vertices)"


__all__ = [
    'Vertex',
    'VertexId',
    'VertexTopology',
]
