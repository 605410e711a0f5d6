import io

import numpy as np
import pytest

from surface_patch import exception
from surface_patch import parser
from conftest import atom_record, pdb_text


RECORDS = [
    atom_record(1, "N", 1, 1.0, 2.0, 3.0, radius=1.65, access=5.5),
    atom_record(2, "CA", 1, 2.0, 2.0, 3.0, radius=1.87, access=12.25),
    atom_record(3, "CA", 2, 5.0, 2.0, 3.0, chain="B", insert="A"),
]


class TestParsePdb:
    """Reading coordinate records into a Structure."""

    def test_fields(self):
        structure = parser.parse_pdb(io.StringIO(pdb_text(RECORDS)))
        assert len(structure) == 3
        np.testing.assert_allclose(structure.coords[1], [2.0, 2.0, 3.0])
        np.testing.assert_allclose(structure.radii[:2], [1.65, 1.87])
        np.testing.assert_allclose(structure.accessibility[:2], [5.5, 12.25])
        assert list(structure.names) == ["N   ", "CA  ", "CA  "]
        assert structure.residue_key(2) == ("B", 2, "A")
        assert structure.records[0] == RECORDS[0]

    def test_skips_non_coordinate_records(self):
        text = pdb_text(RECORDS[:1] + ["TER", "CONECT    1    2"] + RECORDS[1:])
        structure = parser.parse_pdb(io.StringIO(text))
        assert len(structure) == 3

    def test_reads_first_model_only(self):
        text = "\n".join(["MODEL        1"] + RECORDS[:2] + ["ENDMDL",
                          "MODEL        2"] + RECORDS + ["ENDMDL", "END"])
        structure = parser.parse_pdb(io.StringIO(text))
        assert len(structure) == 2

    def test_blank_occupancy_and_bvalue(self):
        record = atom_record(1, "CA", 1, 1.0, 1.0, 1.0)[:54]
        structure = parser.parse_pdb(io.StringIO(record + "\n"))
        assert structure.radii[0] == 0.0
        assert structure.accessibility[0] == 0.0

    def test_hetatm(self):
        record = atom_record(1, "O", 301, 1.0, 1.0, 1.0, resname="HOH",
                             record="HETATM")
        structure = parser.parse_pdb(io.StringIO(record + "\n"))
        assert structure.residue_key(0) == ("A", 301, " ")

    def test_no_atoms(self):
        with pytest.raises(exception.NoAtomsRead):
            parser.parse_pdb(io.StringIO("HEADER    NOTHING\nEND\n"))

    def test_bad_coordinates(self):
        record = atom_record(1, "CA", 1, 1.0, 1.0, 1.0)
        record = record[:30] + "   abcde" + record[38:]
        with pytest.raises(ValueError, match="coordinate"):
            parser.parse_pdb(io.StringIO(record + "\n"))


def test_coordinate_records_preserve_order():
    text = pdb_text(RECORDS[:1] + ["TER"] + RECORDS[1:])
    assert list(parser.coordinate_records(io.StringIO(text))) == RECORDS
