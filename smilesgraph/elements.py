"""
Chemical elements and constants.

This module provides the read-only reference tables used by atom nodes:
element symbol to atomic number, relative mass and maximum bond count,
together with the SMILES bond symbols.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final, FrozenSet, Mapping


class BondType(str, Enum):
    """SMILES bond symbols."""

    SINGLE = "-"
    DOUBLE = "="
    TRIPLE = "#"
    QUADRUPLE = "$"
    AROMATIC = ":"
    UP = "/"
    DOWN = "\\"
    NONE = "."

    def __str__(self) -> str:
        return self.value


DEFAULT_BOND_TYPE: Final[str] = BondType.SINGLE.value


@dataclass(frozen=True, slots=True)
class Element:
    """Immutable element data.

    Attributes:
        atomic_number: Atomic number (proton count).
        symbol: Element symbol (e.g., "C", "Cl").
        mass: Relative mass used for layout weighting.
        max_bonds: Maximum number of bonds, or None if not tabulated.
    """

    atomic_number: int
    symbol: str
    mass: int
    max_bonds: int | None = None

    @classmethod
    def from_symbol(cls, symbol: str) -> "Element | None":
        """Look up element by symbol.

        Lookup is exact apart from the lowercase aromatic symbols
        (b, c, n, o, p, s), which resolve to their element.
        """
        if symbol in AROMATIC_SUBSET:
            symbol = symbol.upper()
        return _BY_SYMBOL.get(symbol)

    @classmethod
    def from_atomic_number(cls, num: int) -> "Element | None":
        """Look up element by atomic number."""
        return _BY_NUMBER.get(num)


# Daylight aromatic symbols that have an entry of their own in the tables
AROMATIC_SUBSET: Final[FrozenSet[str]] = frozenset({
    "b", "c", "n", "o", "p", "s",
})

_MAX_BONDS_DATA: Final[dict[str, int]] = {
    "C": 4, "N": 3, "O": 2, "P": 3, "S": 2,
    "B": 3, "F": 1, "I": 1, "Cl": 1, "Br": 1,
}

# Symbols in order of atomic number; 113-118 keep the systematic
# placeholder names as written in SMILES input
_SYMBOLS: Final[tuple[str, ...]] = (
    "H", "He",
    "Li", "Be", "B", "C", "N", "O", "F", "Ne",
    "Na", "Mg", "Al", "Si", "P", "S", "Cl", "Ar",
    "K", "Ca", "Sc", "Ti", "V", "Cr", "Mn", "Fe", "Co",
    "Ni", "Cu", "Zn", "Ga", "Ge", "As", "Se", "Br", "Kr",
    "Rb", "Sr", "Y", "Zr", "Nb", "Mo", "Tc", "Ru", "Rh",
    "Pd", "Ag", "Cd", "In", "Sn", "Sb", "Te", "I", "Xe",
    "Cs", "Ba", "La", "Ce", "Pr", "Nd", "Pm", "Sm", "Eu",
    "Gd", "Tb", "Dy", "Ho", "Er", "Tm", "Yb", "Lu", "Hf",
    "Ta", "W", "Re", "Os", "Ir", "Pt", "Au", "Hg", "Tl",
    "Pb", "Bi", "Po", "At", "Rn",
    "Fr", "Ra", "Ac", "Th", "Pa", "U", "Np", "Pu", "Am",
    "Cm", "Bk", "Cf", "Es", "Fm", "Md", "No", "Lr", "Rf",
    "Db", "Sg", "Bh", "Hs", "Mt", "Ds", "Rg", "Cn",
    "Uut", "Uuq", "Uup", "Uuh", "Uus", "Uuo",
)

# Relative masses are the integer atomic numbers
ELEMENTS: Final[tuple[Element, ...]] = tuple(
    Element(num, sym, num, _MAX_BONDS_DATA.get(sym))
    for num, sym in enumerate(_SYMBOLS, start=1)
)

_BY_SYMBOL: Final[Mapping[str, Element]] = MappingProxyType(
    {elem.symbol: elem for elem in ELEMENTS}
)
_BY_NUMBER: Final[Mapping[int, Element]] = MappingProxyType(
    {elem.atomic_number: elem for elem in ELEMENTS}
)


def _with_aromatic_aliases(values: dict[str, int]) -> Mapping[str, int]:
    for sym in AROMATIC_SUBSET:
        values[sym] = values[sym.upper()]
    return MappingProxyType(values)


ATOMIC_NUMBERS: Final[Mapping[str, int]] = _with_aromatic_aliases(
    {elem.symbol: elem.atomic_number for elem in ELEMENTS}
)

MASSES: Final[Mapping[str, int]] = _with_aromatic_aliases(
    {elem.symbol: elem.mass for elem in ELEMENTS}
)

MAX_BONDS: Final[Mapping[str, int]] = MappingProxyType(dict(_MAX_BONDS_DATA))


def get_atomic_number(symbol: str) -> int | None:
    """Get atomic number for an element symbol.

    Args:
        symbol: Element symbol (e.g., "C", "c", "Cl").

    Returns:
        Atomic number, or None if the symbol is unknown. An unknown
        element is never reported as 0.
    """
    return ATOMIC_NUMBERS.get(symbol)


def get_mass(symbol: str) -> int | None:
    """Get the relative mass for an element symbol, or None if unknown."""
    return MASSES.get(symbol)


def get_max_bonds(symbol: str) -> int | None:
    """Get the maximum bond count for an element symbol.

    Only the organic subset is tabulated; anything else gives None.
    """
    return MAX_BONDS.get(symbol)


def is_aromatic_symbol(symbol: str) -> bool:
    """Check if symbol is a lowercase aromatic symbol."""
    return symbol in AROMATIC_SUBSET
