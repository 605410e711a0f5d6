"""
Solvent vector filter.

Each residue, represented by its C-alpha, gets an approximate solvent vector
pointing from the C-alpha to the mass centre of its NCLOSE nearest C-alphas
on the same chain. Residues whose vector is within 120 degrees of the seed
residue's vector are allowed into the patch.
"""
import logging
import numpy as np
from surface_patch import utils


logger = logging.getLogger(__name__)

# Number of neighbouring C-alphas making up a mass centre. Also the divisor,
# even when fewer neighbours exist.
NCLOSE = 10
# Scratch distance given to C-alphas on another chain than the reference.
OTHER_CHAIN_DISTANCE = 999.99
# Vectors must be within 120 degrees, i.e. cos(angle) > -0.5.
MIN_COS_ANGLE = -0.5


def representative_mass_centre(coords, chains, reference, nclose=NCLOSE):
    """
    Mass centre of the C-alphas nearest to the reference C-alpha. The scratch
    distances only live for the duration of this call.
    """
    scratch = utils.chain_distances(coords, chains, reference,
                                    OTHER_CHAIN_DISTANCE)
    return utils.mass_centre(coords, scratch, nclose)


def solvent_vector(coords, chains, reference, nclose=NCLOSE):
    """
    Vector from the reference C-alpha to its mass centre.
    """
    centre = representative_mass_centre(coords, chains, reference, nclose)
    return centre - coords[reference]


def solvent_vector_angles(coords, chains, seed, nclose=NCLOSE):
    """
    Cosine of the angle between every C-alpha's solvent vector and the
    solvent vector of the seed C-alpha.
    """
    seed_vector = solvent_vector(coords, chains, seed, nclose)
    cosines = np.empty(coords.shape[0])
    for current in range(coords.shape[0]):
        cosines[current] = utils.cos_angle(
            seed_vector, solvent_vector(coords, chains, current, nclose))
    return cosines


def flag_solvent_vectors(structure, resspec, nclose=NCLOSE):
    """
    Set structure.solvent_flags for every C-alpha whose solvent vector points
    the same general way as the seed residue's. Raises RepresentativeNotFound
    if the seed residue has no C-alpha.
    """
    representatives = structure.representatives
    seed = structure.find_representative(resspec)
    coords = structure.coords[representatives]
    chains = structure.chains[representatives]

    cosines = solvent_vector_angles(coords, chains, seed, nclose)
    # nan (zero length vectors) never passes.
    flags = cosines > MIN_COS_ANGLE
    structure.solvent_flags = flags

    if logger.isEnabledFor(logging.DEBUG):
        for position in np.flatnonzero(~flags):
            chain, resnum, insert = structure.residue_key(
                representatives[position])
            logger.debug("%s%d%s was eliminated by solvent vector angle",
                         chain, resnum, insert.strip())
    return flags
