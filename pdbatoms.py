#!/usr/bin/env python
"""
Extract only the coordinate records (ATOM and HETATM) from a PDB file,
discarding all header and footer information.
"""
import argparse
import logging
import sys
from surface_patch import io
from surface_patch import parser
from surface_patch import exception
from surface_patch import utils


logger = logging.getLogger("pdbatoms")


def parse_args(argv=None):
    """
    Parse args
    """
    arg_parser = utils.UsageParser(
        prog="pdbatoms",
        description="Extracts only the coordinate records from a PDB file "
        "(i.e. the ATOM and HETATM\nrecords), discarding all header and "
        "footer information.\nI/O is to stdin/stdout if not specified.",
        formatter_class=argparse.RawTextHelpFormatter)
    arg_parser.add_argument(
        'infile', nargs='?', default=None,
        help="Input PDB file (default: stdin).")
    arg_parser.add_argument(
        'outfile', nargs='?', default=None,
        help="Output PDB file (default: stdout).")
    return arg_parser.parse_args(argv)


def main(argv=None):
    """
    Main function to use the cli. Returns the exit status.
    """
    args = parse_args(argv)
    logging.basicConfig(format="pdbatoms: (%(levelname)s) %(message)s",
                        stream=sys.stderr)

    with io.open_input(args.infile) as handle:
        records = list(parser.coordinate_records(handle))
    if not records:
        logger.error("%s", exception.NoAtomsRead())
        return 1

    with io.open_output(args.outfile) as handle:
        io.write_records(handle, records)
    return 0


if __name__ == '__main__':
    sys.exit(main())
