"""
Helpers for writing small PDB structures in tests.
"""
import io

import pytest

from surface_patch import parser


def atom_record(serial, name, resnum, x, y, z, radius=1.8, access=20.0,
                chain="A", insert=" ", resname="ALA", record="ATOM"):
    """
    Format a fixed column coordinate record. Radius goes into the occupancy
    column and accessibility into the B-value column.
    """
    name_field = name if len(name) == 4 else f" {name:<3}"
    return (f"{record:<6}{serial:>5} {name_field} {resname:>3} {chain:1}"
            f"{resnum:>4}{insert:1}   {x:8.3f}{y:8.3f}{z:8.3f}"
            f"{radius:6.2f}{access:6.2f}           {name.strip()[0]:>1}")


def pdb_text(records, header=True):
    """
    Join records into a PDB file body.
    """
    lines = []
    if header:
        lines.append("HEADER    TEST STRUCTURE")
        lines.append("REMARK   1 WRITTEN FOR TESTS")
    lines.extend(records)
    lines.append("END")
    return "\n".join(lines) + "\n"


def parse_records(records):
    """
    Build a Structure from a list of records.
    """
    return parser.parse_pdb(io.StringIO(pdb_text(records)))


def line_of_residues(count, spacing=3.5, origin=(10.0, 10.0, 10.0),
                     **kwargs):
    """
    Records for count single C-alpha residues evenly spaced along x. Kept
    off the origin so every solvent vector points roughly the same way.
    """
    return [
        atom_record(i + 1, "CA", i + 1, origin[0] + spacing * i, origin[1],
                    origin[2], **kwargs)
        for i in range(count)
    ]


@pytest.fixture
def write_pdb(tmp_path):
    """
    Write records to a PDB file in tmp_path and return its path.
    """
    def _write(records, name="in.pdb"):
        path = tmp_path / name
        path.write_text(pdb_text(records), encoding='utf-8')
        return path
    return _write
