"""
smilesgraph - atom nodes for SMILES molecular graphs.

Bookkeeping for the atoms of a parsed SMILES graph: ring closures, ring
membership with backup and restore, condensed pseudo elements, per-center
traversal order and neighbour priority ranking.

    >>> from smilesgraph import Atom
    >>> atom = Atom("Br")
    >>> atom.get_atomic_number()
    35

Submodules:
    smilesgraph.elements - Atomic number, mass and maximum bond tables
    smilesgraph.atom     - Atom nodes and ringbond helpers
    smilesgraph.priority - Neighbour ranking by atomic number
"""

__version__ = "0.1.0"

# Core types
from smilesgraph.atom import (
    Atom,
    Bracket,
    PseudoElement,
    RingBond,
    have_common_ringbond,
    max_common_ringbond,
)

# Ranking
from smilesgraph.priority import (
    PriorityRanking,
    RankedNeighbour,
    Vertex,
    sort_by_atomic_number,
    has_duplicate_atomic_numbers,
    get_duplicate_atomic_numbers,
)

# Exceptions
from smilesgraph.exceptions import ChemError, RingError, UnknownElementWarning

# Element data
from smilesgraph.elements import (
    ATOMIC_NUMBERS,
    MASSES,
    MAX_BONDS,
    BondType,
    Element,
)

__all__ = [
    # Types
    "Atom", "Bracket", "PseudoElement", "RingBond",
    "have_common_ringbond", "max_common_ringbond",
    # Ranking
    "PriorityRanking", "RankedNeighbour", "Vertex",
    "sort_by_atomic_number", "has_duplicate_atomic_numbers",
    "get_duplicate_atomic_numbers",
    # Exceptions
    "ChemError", "RingError", "UnknownElementWarning",
    # Elements
    "ATOMIC_NUMBERS", "MASSES", "MAX_BONDS", "BondType", "Element",
]
