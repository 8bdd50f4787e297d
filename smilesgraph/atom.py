"""
Atom nodes of the molecular graph.

An :class:`Atom` is created by the SMILES parser and is then annotated in
place, first by ring detection and later by the layout stage. Identity is
owned by the graph vertex that holds the atom, so the atom itself carries
no index.

    >>> atom = Atom("c")
    >>> atom.element, atom.is_part_of_aromatic_ring
    ('C', True)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable

from smilesgraph.elements import (
    DEFAULT_BOND_TYPE,
    get_atomic_number,
    get_mass,
    get_max_bonds,
)
from smilesgraph.exceptions import RingError


@dataclass(slots=True)
class RingBond:
    """An unresolved ring-closure marker as written in the SMILES.

    Two atoms carrying a marker with the same id are the two ends of one
    ring-closing bond.
    """

    id: int
    bond_type: str | None = None


@dataclass(slots=True)
class PseudoElement:
    """Terminal atoms condensed into the label of their parent atom.

    Attributes:
        element: Element symbol of the condensed atoms.
        count: Number of condensed atoms matching the key.
        hydrogen_count: Hydrogens attached to each condensed atom.
        previous_element: Element of the chain atom the group was
            condensed from.
    """

    element: str
    count: int
    hydrogen_count: int
    previous_element: str | None


@dataclass(slots=True)
class Bracket:
    """Bracket atom information, e.g. ``[13CH3+:1]``."""

    hcount: int = 0
    charge: int = 0
    isotope: int | None = None
    atom_class: int | None = None


@dataclass(slots=True)
class Atom:
    """Represents an atom in a molecular graph.

    Attributes:
        element: Element symbol. Single-letter symbols are always stored
            uppercase, longer symbols as given.
        bond_type: Bond symbol to the parent atom in the spanning tree.
        is_drawn: Whether the atom (and its bond) is drawn at all.
        draw_explicit: Whether the label is drawn even where it would
            normally be omitted (e.g. carbon).
        ringbonds: Ring-closure markers attached to this atom.
        rings: Ids of the rings containing this atom.
        original_rings: Backup of ``rings`` taken by :meth:`backup_rings`.
        bridged_ring: Id of the bridged ring replacing the original rings.
        is_bridge: Atom lies on a bridge of a bridged ring.
        is_bridge_node: Atom is a member of the largest ring of a bridged
            ring and is connected to a bridge atom.
        anchored_rings: Ring ids whose centers move with this atom.
        bracket: Bracket information, if the atom was a bracket atom.
        chiral: Chirality marker.
        order: Traversal position keyed by the id of a reference atom.
        attached_pseudo_elements: Condensed terminal groups by key.
        has_attached_pseudo_elements: Set once the first group attaches.
        is_connected_to_ring: Directly bonded to, but not member of, a ring.
        neighbouring_elements: Element symbols of the adjacent atoms.
        is_part_of_aromatic_ring: The atom was written as a lowercase
            aromatic symbol (e.g. ``c1ccccc1``).
        bond_count: Number of bonds this atom participates in.
    """

    element: str
    bond_type: str = DEFAULT_BOND_TYPE
    is_drawn: bool = field(default=True, init=False)
    draw_explicit: bool = field(default=False, init=False)
    ringbonds: list[RingBond] = field(default_factory=list, init=False)
    rings: list[int] = field(default_factory=list, init=False)
    original_rings: list[int] = field(default_factory=list, init=False)
    bridged_ring: int | None = field(default=None, init=False)
    is_bridge: bool = field(default=False, init=False)
    is_bridge_node: bool = field(default=False, init=False)
    anchored_rings: list[int] = field(default_factory=list, init=False)
    bracket: Bracket | None = field(default=None, init=False)
    chiral: int = field(default=0, init=False)
    order: dict[Hashable, int] = field(default_factory=dict, init=False)
    attached_pseudo_elements: dict[str, PseudoElement] = field(
        default_factory=dict, init=False
    )
    has_attached_pseudo_elements: bool = field(default=False, init=False)
    is_connected_to_ring: bool = field(default=False, init=False)
    neighbouring_elements: list[str] = field(default_factory=list, init=False)
    is_part_of_aromatic_ring: bool = field(default=False, init=False)
    bond_count: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        given = self.element
        if len(given) == 1:
            self.element = given.upper()
        self.is_part_of_aromatic_ring = given != self.element

    # ------------------------------------------------------------------
    # Chemistry
    # ------------------------------------------------------------------

    def add_neighbouring_element(self, element: str) -> None:
        """Record the element of an adjacent atom."""
        self.neighbouring_elements.append(element)

    def neighbouring_elements_equal(self, elements: list[str]) -> bool:
        """Check whether the neighbouring elements match ``elements``.

        Both lists are compared as multisets. Note that on equal length
        this sorts ``elements`` and :attr:`neighbouring_elements` in place.

        Args:
            elements: Element symbols, e.g. ``["C", "O", "O", "N"]``.

        Returns:
            True if the neighbours match the supplied elements.
        """
        if len(elements) != len(self.neighbouring_elements):
            return False

        elements.sort()
        self.neighbouring_elements.sort()

        return elements == self.neighbouring_elements

    def get_atomic_number(self) -> int | None:
        """Get the atomic number, or None for an unknown element."""
        return get_atomic_number(self.element)

    def get_mass(self) -> int | None:
        """Get the relative mass, or None for an unknown element."""
        return get_mass(self.element)

    def get_max_bonds(self) -> int | None:
        """Get the maximum bond count, or None if the element is not tabulated."""
        return get_max_bonds(self.element)

    def can_rotate(self) -> bool:
        """An atom is rotatable if it has a single incoming bond and is in no ring."""
        return self.bond_type == DEFAULT_BOND_TYPE and len(self.rings) == 0

    # ------------------------------------------------------------------
    # Ringbonds and rings
    # ------------------------------------------------------------------

    def add_ringbond(self, ringbond_id: int, bond_type: str | None = None) -> RingBond:
        """Add a ring-closure marker to this atom.

        The same id may appear twice when a ring closes and a new ring with
        the reused number opens at this atom (e.g. ``C1CCC11CCC1``).

        Args:
            ringbond_id: Ring-closure number from the SMILES (positive).
            bond_type: Bond symbol written with the marker, if any.

        Returns:
            The new marker.

        Raises:
            RingError: If the id is not positive.
        """
        if ringbond_id <= 0:
            raise RingError(f"Invalid ring closure number {ringbond_id}", ringbond_id)

        ringbond = RingBond(ringbond_id, bond_type)
        self.ringbonds.append(ringbond)
        return ringbond

    def get_ringbond_count(self) -> int:
        return len(self.ringbonds)

    def has_ringbonds(self) -> bool:
        return len(self.ringbonds) > 0

    def get_max_ringbond(self) -> int:
        """Get the highest ringbond id on this atom, or 0 if there is none."""
        return max((rb.id for rb in self.ringbonds), default=0)

    def is_in_ring(self) -> bool:
        return len(self.rings) > 0

    def has_ring(self, ring_id: int) -> bool:
        return ring_id in self.rings

    def backup_rings(self) -> None:
        """Back up the current rings, replacing any earlier backup."""
        self.original_rings = list(self.rings)

    def restore_rings(self) -> None:
        """Restore the rings from the last backup.

        Without a prior backup this clears the rings.
        """
        self.rings = list(self.original_rings)

    def add_anchored_ring(self, ring_id: int) -> None:
        """Anchor a ring to this atom.

        When the atom is repositioned, the centers of its anchored rings
        are moved with it.
        """
        if ring_id not in self.anchored_rings:
            self.anchored_rings.append(ring_id)

    # ------------------------------------------------------------------
    # Pseudo elements
    # ------------------------------------------------------------------

    def attach_pseudo_element(
        self,
        element: str,
        previous_element: str | None,
        hydrogen_count: int = 0,
    ) -> None:
        """Condense a terminal atom into this atom's label.

        Groups are keyed by hydrogen count and element, so ``"1C"`` and
        ``"2C"`` are counted separately.

        Args:
            element: Element symbol of the condensed atom (e.g. "Br").
            previous_element: Element of the main-chain atom the terminal
                was condensed from.
            hydrogen_count: Hydrogens attached to the condensed atom.
        """
        key = f"{hydrogen_count}{element}"

        pseudo = self.attached_pseudo_elements.get(key)
        if pseudo is not None:
            pseudo.count += 1
            pseudo.previous_element = previous_element
        else:
            self.attached_pseudo_elements[key] = PseudoElement(
                element=element,
                count=1,
                hydrogen_count=hydrogen_count,
                previous_element=previous_element,
            )

        self.has_attached_pseudo_elements = True

    def get_attached_pseudo_elements(self) -> dict[str, PseudoElement]:
        """Get the attached pseudo elements ordered by key.

        The order is lexicographic on the key string, so ``"10C"`` comes
        before ``"2C"``.
        """
        return {
            key: self.attached_pseudo_elements[key]
            for key in sorted(self.attached_pseudo_elements)
        }

    def get_attached_pseudo_elements_count(self) -> int:
        """Number of distinct pseudo element keys (not condensed atoms)."""
        return len(self.attached_pseudo_elements)

    # ------------------------------------------------------------------
    # Order
    # ------------------------------------------------------------------

    def get_order(self, center: Hashable) -> int | None:
        """Get the order of this atom relative to ``center``."""
        return self.order.get(center)

    def set_order(self, center: Hashable, order: int) -> None:
        # An atom connected through ringbonds can have an order under
        # several centers at once.
        self.order[center] = order


def have_common_ringbond(atom_a: Atom, atom_b: Atom) -> bool:
    """Check whether two atoms share a ringbond id."""
    return any(
        rb_a.id == rb_b.id
        for rb_a in atom_a.ringbonds
        for rb_b in atom_b.ringbonds
    )


def max_common_ringbond(atom_a: Atom, atom_b: Atom) -> int:
    """Get the highest ringbond id shared by two atoms, or 0 if none is shared."""
    common = {rb.id for rb in atom_a.ringbonds} & {rb.id for rb in atom_b.ringbonds}
    return max(common, default=0)
