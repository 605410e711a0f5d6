"""
Fixed column PDB reading. The occupancy column is expected to hold the
contact radius of each atom and the B-value column its accessibility.
"""
from surface_patch import atoms
from surface_patch import exception


allowed_records = {
    "ATOM",
    "HETATM",
}

# Records marking the end of the first model.
end_records = {
    "ENDMDL",
    "END",
}


def coordinate_records(handle):
    """
    Yield the ATOM and HETATM records of the first model in order, dropping
    everything else.
    """
    for line in handle:
        record_type = line[0:6].strip()
        if record_type in end_records:
            break
        if record_type in allowed_records:
            yield line.rstrip('\r\n')


def _optional_float(field):
    """
    Occupancy and B-value may be left blank in which case they read as zero.
    """
    field = field.strip()
    return float(field) if field else 0.0


def parse_pdb(handle):
    """
    Read the first model of a PDB stream into a Structure. Raises NoAtomsRead
    if there are no coordinate records.
    """
    chains = []
    resnums = []
    inserts = []
    names = []
    coords = []
    radii = []
    accessibility = []
    records = []
    for i, record in enumerate(coordinate_records(handle)):
        # Pad short records so every fixed column can be sliced.
        line = record.ljust(80)
        try:
            resnum = int(line[22:26])
        except ValueError as value_error:
            raise ValueError(
                f"Invalid or missing residue number in atom record {i + 1}."
            ) from value_error
        try:
            x_coord = float(line[30:38])
            y_coord = float(line[38:46])
            z_coord = float(line[46:54])
            occupancy = _optional_float(line[54:60])
            bvalue = _optional_float(line[60:66])
        except ValueError as value_error:
            raise ValueError(
                f"Invalid or missing coordinate(s) in atom record {i + 1}."
            ) from value_error

        names.append(line[12:16])
        chains.append(line[21])
        resnums.append(resnum)
        inserts.append(line[26])
        coords.append((x_coord, y_coord, z_coord))
        radii.append(occupancy)
        accessibility.append(bvalue)
        records.append(record)

    if not records:
        raise exception.NoAtomsRead

    return atoms.Structure(coords, chains, resnums, inserts, names, radii,
                           accessibility, records=records)
