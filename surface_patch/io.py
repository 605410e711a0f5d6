"""
Standard stream handling and PDB writing.
"""
import contextlib
import io
import sys


# Headers and remarks may hold any byte, latin-1 decodes every one of them
# and writes them back unchanged.
ENCODING = 'latin-1'


@contextlib.contextmanager
def open_input(path=None):
    """
    Open path for reading, or hand back stdin if no path (or "-") is given.
    """
    if not path or path == '-':
        buffer = getattr(sys.stdin, 'buffer', None)
        if buffer is None:
            # Already a text stream (e.g. replaced by a StringIO).
            yield sys.stdin
            return
        handle = io.TextIOWrapper(buffer, encoding=ENCODING)
        try:
            yield handle
        finally:
            # Hand the buffer back so stdin isn't closed with the wrapper.
            handle.detach()
    else:
        with open(path, 'r', encoding=ENCODING) as handle:
            yield handle


@contextlib.contextmanager
def open_output(path=None):
    """
    Open path for writing, or hand back stdout if no path (or "-") is given.
    """
    if not path or path == '-':
        yield sys.stdout
    else:
        with open(path, 'w', encoding=ENCODING) as handle:
            yield handle


def patch_record(record, occupancy, bvalue):
    """
    Rewrite the occupancy and B-value columns of a coordinate record.
    """
    return (f"{record[:54].ljust(54)}{occupancy:6.2f}{bvalue:6.2f}"
            f"{record[66:]}").rstrip()


def write_pdb(handle, structure):
    """
    Write the structure back out with the output occupancy and membership
    columns. A TER record closes every chain and END closes the file.
    """
    num_atoms = len(structure)
    for i in range(num_atoms):
        handle.write(patch_record(structure.records[i],
                                  structure.output_radii[i],
                                  structure.membership[i]) + "\n")
        if i + 1 == num_atoms or \
                structure.chains[i + 1] != structure.chains[i]:
            handle.write("TER\n")
    handle.write("END\n")


def write_records(handle, records):
    """
    Write records unchanged, one per line.
    """
    for record in records:
        handle.write(record + "\n")
