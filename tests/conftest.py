"""Test configuration and fixtures for smilesgraph tests."""

from typing import Callable

import pytest

# RDKit is used as reference for element data and neighbour lists
from rdkit import Chem

from smilesgraph import Atom, Vertex


def rdkit_vertices(smiles: str) -> tuple[list[Vertex], Chem.Mol]:
    """Build smilesgraph vertices from an RDKit-parsed molecule.

    Args:
        smiles: Input SMILES string.

    Returns:
        The vertices (indexed like the RDKit atoms) and the RDKit molecule.
    """
    mol = Chem.MolFromSmiles(smiles)
    if mol is None:
        raise ValueError(f"RDKit could not parse: {smiles}")

    vertices = []
    for rd_atom in mol.GetAtoms():
        atom = Atom(rd_atom.GetSymbol())
        for nbr in rd_atom.GetNeighbors():
            atom.add_neighbouring_element(nbr.GetSymbol())
        atom.bond_count = rd_atom.GetDegree()
        vertices.append(Vertex(rd_atom.GetIdx(), atom))
    return vertices, mol


@pytest.fixture
def rdkit_graph() -> Callable[[str], tuple[list[Vertex], Chem.Mol]]:
    """Factory turning a SMILES string into vertices plus the RDKit molecule."""
    return rdkit_vertices


@pytest.fixture
def ring_atom() -> Atom:
    """A carbon that belongs to rings 1 and 2 and closes ringbond 1."""
    atom = Atom("C")
    atom.add_ringbond(1)
    atom.rings.extend([1, 2])
    return atom


@pytest.fixture
def aromatic_symbols() -> list[str]:
    """Lowercase aromatic symbols with their own table entries."""
    return ["b", "c", "n", "o", "p", "s"]


@pytest.fixture
def ranking_smiles() -> list[str]:
    """Molecules with a branched center atom at index 1."""
    return [
        "CC(O)(O)N",
        "OC(N)=O",
        "FC(Cl)(Br)I",
        "CC(C)(C)C",
        "NC(C)S",
    ]
