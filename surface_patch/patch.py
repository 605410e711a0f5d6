"""
Grow a patch of surface atoms outwards from a seed atom.

The patch starts as the seed atom alone. Every pass over the structure adds
any surface atom that is within the growth radius of the seed, touches an
atom already in the patch and belongs to a residue whose solvent vector
points the same way as the seed residue's. Passes repeat until nothing
changes, then partially flagged residues are completed.
"""
import logging
import numpy as np
from numba import njit
from surface_patch import resspec as resspec_module
from surface_patch import solvent
from surface_patch import utils


logger = logging.getLogger(__name__)

DEF_RADIUS = 18.0
DEF_TOLERANCE = 0.2
# Tolerance used in ring only mode unless one is given explicitly.
DEF_RING_TOLERANCE = 1.0
DEF_MINACCESS = 0.0
# Occupancy written for every atom once the patch is done.
NEUTRAL_RADIUS = 1.0


def default_tolerance(ring_only):
    """
    Contact tolerance to use when the user didn't give one.
    """
    return DEF_RING_TOLERANCE if ring_only else DEF_TOLERANCE


def candidate_atoms(structure, seed, radius, min_access):
    """
    Atoms that could join the patch whichever patch atom they touch: on the
    surface, within radius of the seed atom and in a residue that passed the
    solvent vector filter.
    """
    surface = structure.accessibility > min_access
    in_range = utils.distances_sq(structure.coords[seed],
                                  structure.coords) < radius * radius

    # Map each atom to its residue's C-alpha, -1 means it has none and can
    # never pass.
    positions = structure.residue_representatives[structure.residue_ids]
    solvent_ok = np.zeros(len(structure), dtype=bool)
    has_representative = positions >= 0
    solvent_ok[has_representative] = \
        structure.solvent_flags[positions[has_representative]]
    return surface & in_range & solvent_ok


@njit(nogil=True, cache=True)
def grow(coords, radii, candidates, residue_ids, flags, seed_residue,
         tolerance, ring_only, order):
    """
    Keep passing over every flagged/unflagged atom pair in scan order, adding
    candidates in contact with a flagged atom, until a pass adds nothing.
    Flags are updated in place. Returns the number of passes.
    """
    num_atoms = order.shape[0]
    passes = 0
    changed = True
    while changed:
        changed = False
        passes += 1
        for i in range(num_atoms):
            p = order[i]
            if not flags[p]:
                continue
            for j in range(num_atoms):
                q = order[j]
                if p == q or flags[q] or not candidates[q]:
                    continue
                # Touching test using the contact radii.
                contact = radii[p] + radii[q] + tolerance
                dist_sq = 0.0
                for k in range(3):
                    delta = coords[p, k] - coords[q, k]
                    dist_sq += delta * delta
                if dist_sq >= contact * contact:
                    continue
                # Ring only mode allows growth within a residue or from the
                # seed residue only.
                if ring_only and residue_ids[q] != residue_ids[p] \
                        and residue_ids[p] != seed_residue:
                    continue
                flags[q] = True
                changed = True
    return passes


def grow_patch(structure, seed, radius=DEF_RADIUS, tolerance=DEF_TOLERANCE,
               ring_only=False, min_access=DEF_MINACCESS, order=None):
    """
    Flood fill structure.patch_flags from the seed atom. The solvent flags
    must already be set. Order is an optional permutation of atom indices to
    scan in, the final patch doesn't depend on it.
    """
    if order is None:
        order = np.arange(len(structure), dtype=np.int64)
    else:
        order = np.asarray(order, dtype=np.int64)

    flags = np.zeros(len(structure), dtype=bool)
    flags[seed] = True
    candidates = candidate_atoms(structure, seed, radius, min_access)
    passes = grow(structure.coords, structure.radii, candidates,
                  structure.residue_ids, flags,
                  structure.residue_ids[seed], float(tolerance),
                  bool(ring_only), order)
    structure.patch_flags = flags
    logger.debug("Patch grew to %d atoms in %d passes", flags.sum(), passes)
    return flags


def flag_whole_residues(structure):
    """
    Extend flagged atoms to include the whole residue.
    """
    starts = structure.residue_starts
    if starts.shape[0] == 0:
        return structure.patch_flags
    residue_flags = np.logical_or.reduceat(structure.patch_flags, starts)
    structure.patch_flags = residue_flags[structure.residue_ids]
    return structure.patch_flags


def clean_up(structure):
    """
    Fill in the output columns. Occupancy goes back to a neutral radius and
    the B-value becomes 1.0 for patch atoms and 0.0 for everything else. The
    patch flags are cleared afterwards.
    """
    structure.output_radii = np.full(len(structure), NEUTRAL_RADIUS)
    structure.membership = structure.patch_flags.astype(np.float64)
    structure.patch_flags = np.zeros(len(structure), dtype=bool)


def summary(structure, resspec):
    """
    Summary line naming the patch and every residue in it (the seed residue
    included) in file order.
    """
    tokens = [f"<patch {resspec}>"]
    for start, code in zip(structure.residue_starts,
                           structure.membership_of_residues()):
        if code == 1.0:
            tokens.append(resspec_module.format_residue(
                *structure.residue_key(start)))
    return " ".join(tokens)


def make_patch(structure, resspec, atom_name, radius=DEF_RADIUS,
               tolerance=DEF_TOLERANCE, ring_only=False,
               min_access=DEF_MINACCESS):
    """
    Run the whole calculation on a structure: find the seed, filter residues
    by solvent vector, grow the patch, complete residues and fill in the
    output columns. Lookup failures propagate before anything is changed in
    the output columns. Returns the seed atom index.
    """
    seed = structure.find_atom(resspec, atom_name)
    solvent.flag_solvent_vectors(structure, resspec)
    grow_patch(structure, seed, radius=radius, tolerance=tolerance,
               ring_only=ring_only, min_access=min_access)
    flag_whole_residues(structure)
    clean_up(structure)
    return seed
