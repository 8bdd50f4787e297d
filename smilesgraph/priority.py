"""
Neighbour priority ranking.

Orders the neighbours of an atom by atomic number and reports ties, which
canonical ordering and stereo-priority decisions have to break by some
other rule.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Mapping, Sequence, Union

from smilesgraph.elements import get_atomic_number
from smilesgraph.exceptions import UnknownElementWarning

if TYPE_CHECKING:
    from smilesgraph.atom import Atom


@dataclass(slots=True)
class Vertex:
    """A graph node holding an atom.

    Attributes:
        id: Id of the vertex in its graph.
        value: The atom stored at this vertex.
    """

    id: int
    value: "Atom"


@dataclass(frozen=True, slots=True)
class RankedNeighbour:
    """A neighbour with its atomic number (None if the element is unknown)."""

    atomic_number: int | None
    vertex_id: int


Vertices = Union[Sequence[Vertex], Mapping[int, Vertex]]


def _priority_key(ranked: RankedNeighbour) -> int:
    # Unknown elements rank below every known element
    return -1 if ranked.atomic_number is None else ranked.atomic_number


def sort_by_atomic_number(
    neighbour_ids: Iterable[int],
    vertices: Vertices,
) -> list[RankedNeighbour]:
    """Rank neighbouring vertices by descending atomic number.

    The sort is stable: neighbours with equal atomic numbers keep the
    order in which they were given.

    Args:
        neighbour_ids: Ids of the neighbouring vertices.
        vertices: The vertices of the molecule, indexable by id.

    Returns:
        Ranked neighbours, highest atomic number first.
    """
    ranked: list[RankedNeighbour] = []

    for vertex_id in neighbour_ids:
        vertex = vertices[vertex_id]
        element = vertex.value.element
        atomic_number = get_atomic_number(element)

        if atomic_number is None:
            warnings.warn(
                f"No atomic number for element {element!r} of vertex {vertex.id}",
                UnknownElementWarning,
                stacklevel=2,
            )

        ranked.append(RankedNeighbour(atomic_number, vertex.id))

    return sorted(ranked, key=_priority_key, reverse=True)


def has_duplicate_atomic_numbers(ranked: Sequence[RankedNeighbour]) -> bool:
    """Check whether two ranked neighbours share an atomic number."""
    found: set[int | None] = set()

    for neighbour in ranked:
        if neighbour.atomic_number in found:
            return True
        found.add(neighbour.atomic_number)

    return False


def get_duplicate_atomic_numbers(ranked: Sequence[RankedNeighbour]) -> list[list[int]]:
    """Group the positions of ranked neighbours that share an atomic number.

    Args:
        ranked: Ranked neighbours, e.g. from :func:`sort_by_atomic_number`.

    Returns:
        One list of positions into ``ranked`` per atomic number occurring
        more than once, in order of first occurrence. Positions, not
        vertex ids, are returned.
    """
    positions: dict[int | None, list[int]] = {}

    for i, neighbour in enumerate(ranked):
        positions.setdefault(neighbour.atomic_number, []).append(i)

    return [group for group in positions.values() if len(group) > 1]


class PriorityRanking:
    """Namespace for the neighbour ranking functions."""

    sort_by_atomic_number = staticmethod(sort_by_atomic_number)
    has_duplicate_atomic_numbers = staticmethod(has_duplicate_atomic_numbers)
    get_duplicate_atomic_numbers = staticmethod(get_duplicate_atomic_numbers)
