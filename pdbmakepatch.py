#!/usr/bin/env python
"""
Build a surface patch around a seed atom.

Takes a PDB file where the B-values have been replaced by accessibility and
the occupancy by contact radii (e.g. as2bval run on a NACCESS .asa file),
grows a patch from the seed atom and writes the structure back out with the
occupancy set to 1.00 and the B-value set to 1.00 for patch atoms, 0.00 for
the rest.
"""
import argparse
import logging
import sys
from surface_patch import exception
from surface_patch import io
from surface_patch import parser
from surface_patch import patch
from surface_patch import resspec as resspec_module
from surface_patch import utils
from surface_patch import visualization


logger = logging.getLogger("pdbmakepatch")

LOG_FORMAT = "pdbmakepatch: (%(levelname)s) %(message)s"

RESSPEC_HELP = """
Residues are specified as [c[.]]num[i] where [c] is an optional chain
specification, num is the residue number and [i] an optional insertion code.
The chain is separated from the number by a "." which may be left out if the
chain is a single letter. No chain means a blank chain. For example A.24B,
L24 or 24.

Chain names and insertion codes are case sensitive. PDB files carry a single
character chain name, so a multi-character chain (e.g. HA.-3) never matches.
"""


def parse_args(argv=None):
    """
    Parse args
    """
    arg_parser = utils.UsageParser(
        prog="pdbmakepatch",
        description="Grow a patch of surface atoms within a radius of a "
        "seed atom,\nconsidering atoms touching the seed and, in turn, "
        "atoms already in the patch.",
        epilog=RESSPEC_HELP,
        formatter_class=argparse.RawTextHelpFormatter)
    arg_parser.add_argument(
        '-r', dest='radius', default=patch.DEF_RADIUS, type=float,
        help="Radius around the seed atom for considering atoms "
        "(default: %(default)s).")
    arg_parser.add_argument(
        '-t', dest='tolerance', default=None, type=float,
        help="Tolerance on atom radii to consider them as touching "
        f"(default: {patch.DEF_TOLERANCE}, {patch.DEF_RING_TOLERANCE} "
        "with -c).")
    arg_parser.add_argument(
        '-c', dest='ring_only', default=False, action='store_true',
        help="Only the ring of residues contacting the seed residue.")
    arg_parser.add_argument(
        '-m', dest='min_access', default=patch.DEF_MINACCESS, type=float,
        help="Minimum accessibility for an atom to be on the surface "
        "(default: %(default)s).")
    arg_parser.add_argument(
        '-s', dest='summary', default=False, action='store_true',
        help="Print a summary of all residues in the patch.")
    arg_parser.add_argument(
        '-V', dest='visualize', action='store_const', const='scatter',
        help="Show a scatter plot of the patch (needs matplotlib).")
    arg_parser.add_argument(
        '-d', dest='debug', default=False, action='store_true',
        help="Print debugging diagnostics to stderr.")
    arg_parser.add_argument(
        'resspec', help="Residue at the centre of the patch.")
    arg_parser.add_argument(
        'atomname', help="Atom of that residue to grow the patch from.")
    arg_parser.add_argument(
        'infile', nargs='?', default=None,
        help="Input PDB file (default: stdin).")
    arg_parser.add_argument(
        'outfile', nargs='?', default=None,
        help="Output PDB file (default: stdout).")
    args = arg_parser.parse_args(argv)

    # Ring only mode has a looser default tolerance.
    if args.tolerance is None:
        args.tolerance = patch.default_tolerance(args.ring_only)
    return args


def main(argv=None):
    """
    Main function to use the cli. Returns the exit status.
    """
    args = parse_args(argv)
    level = logging.DEBUG if args.debug else logging.WARNING
    logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr, level=level)
    # basicConfig leaves an already configured root logger alone.
    logging.getLogger().setLevel(level)

    try:
        resspec = resspec_module.parse_resspec(args.resspec)
        with io.open_input(args.infile) as handle:
            structure = parser.parse_pdb(handle)
        # Everything that can fail happens before the output is opened so a
        # failed run never leaves a partial output file behind.
        patch.make_patch(
            structure, resspec, args.atomname, radius=args.radius,
            tolerance=args.tolerance, ring_only=args.ring_only,
            min_access=args.min_access)
    except exception.NoAtomsRead as no_atoms:
        logger.error("%s", no_atoms)
        return 1
    except (LookupError, exception.InvalidResidueSpec) as lookup_error:
        logger.error("%s", lookup_error)
        return 1

    with io.open_output(args.outfile) as handle:
        io.write_pdb(handle, structure)

    if args.summary:
        print(patch.summary(structure, resspec))

    if args.visualize:
        visualization.patch(structure, plot_type=args.visualize)
    return 0


if __name__ == '__main__':
    sys.exit(main())
