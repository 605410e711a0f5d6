import numpy as np
import pytest

from surface_patch import exception
from surface_patch.resspec import parse_resspec
from conftest import atom_record, parse_records


@pytest.fixture
def structure():
    return parse_records([
        atom_record(1, "N", 1, 0.0, 0.0, 0.0),
        atom_record(2, "CA", 1, 1.0, 0.0, 0.0),
        atom_record(3, "CB", 1, 2.0, 0.0, 0.0),
        atom_record(4, "N", 2, 3.0, 0.0, 0.0),
        atom_record(5, "CA", 2, 4.0, 0.0, 0.0),
        atom_record(6, "N", 2, 5.0, 0.0, 0.0, insert="A"),
        atom_record(7, "CB", 2, 6.0, 0.0, 0.0, insert="A"),
        atom_record(8, "CA", 1, 7.0, 0.0, 0.0, chain="B"),
    ])


class TestResidueIndex:
    """Residues are runs of atoms sharing chain, number and insert."""

    def test_starts(self, structure):
        assert list(structure.residue_starts) == [0, 3, 5, 7]
        assert list(structure.residue_ids) == [0, 0, 0, 1, 1, 2, 2, 3]
        assert structure.num_residues == 4

    def test_bounds(self, structure):
        assert structure.residue_bounds(0) == (0, 3)
        assert structure.residue_bounds(3) == (7, 8)

    def test_representatives(self, structure):
        assert list(structure.representatives) == [1, 4, 7]
        # 2A has no C-alpha.
        assert list(structure.residue_representatives) == [0, 1, -1, 2]


class TestSeedResolver:
    """Finding the seed residue and atom."""

    def test_find_atom(self, structure):
        assert structure.find_atom(parse_resspec("A1"), "CB") == 2
        assert structure.find_atom(parse_resspec("A2A"), "CB") == 6
        assert structure.find_atom(parse_resspec("B.1"), " CA ") == 7

    def test_atom_search_stays_in_residue(self, structure):
        # The CB following residue 1 belongs to 2A, not 2.
        with pytest.raises(exception.AtomNotFound) as error:
            structure.find_atom(parse_resspec("A2"), "CB")
        assert "A2" in str(error.value)

    def test_residue_not_found(self, structure):
        with pytest.raises(exception.ResidueNotFound, match="C9"):
            structure.find_atom(parse_resspec("C9"), "CA")

    def test_lookup_errors(self, structure):
        with pytest.raises(LookupError):
            structure.find_atom(parse_resspec("A3"), "CA")

    def test_find_representative(self, structure):
        assert structure.find_representative(parse_resspec("A2")) == 1
        with pytest.raises(exception.RepresentativeNotFound):
            structure.find_representative(parse_resspec("A2A"))


def test_separate_phase_fields(structure):
    assert structure.patch_flags.shape == (8,)
    assert not structure.patch_flags.any()
    assert structure.solvent_flags.shape == (3,)
    assert structure.membership is None
    assert structure.output_radii is None
    np.testing.assert_allclose(structure.radii, 1.8)
