"""
Small geometry helpers shared by the solvent vector filter and the patch
grower, plus the argument parser shared by the command line tools.
"""
import argparse
import sys
import numpy as np


# Anything closer than this to the reference is taken to be the reference
# itself when picking neighbours for the mass centre.
SELF_DISTANCE = 0.01


class UsageParser(argparse.ArgumentParser):
    """
    Argument parser reporting problems with the usage text on stderr and a
    zero exit status, which is what scripts driving these tools expect.
    """
    def print_help(self, file=None):
        super().print_help(file or sys.stderr)

    def error(self, message):
        self.print_help(sys.stderr)
        self.exit(0, f"\n{self.prog}: {message}\n")


def pad_atom_name(name):
    """
    Atom names are compared as four character tokens with leading blanks
    removed and trailing blanks added (e.g. "CA" -> "CA  ").
    """
    return name.lstrip()[:4].ljust(4)


def distances_sq(point, points):
    """
    Squared cartesian distances between point and every row of points.
    """
    deltas = points - point
    return np.einsum('ij,ij->i', deltas, deltas)


def chain_distances(coords, chains, reference, sentinel):
    """
    Distance from coords[reference] to every coordinate on the same chain.
    Coordinates on any other chain get the sentinel value so they rank
    after every same chain neighbour.
    """
    dist = np.sqrt(distances_sq(coords[reference], coords))
    return np.where(chains == chains[reference], dist, sentinel)


def mass_centre(coords, distances, nclose):
    """
    Centre of the nclose coordinates closest by distances, skipping anything
    sitting on the reference. The sum is always divided by nclose, so with
    fewer than nclose neighbours the centre is pulled towards the origin.
    """
    # Stable sort so equal distances keep file order.
    order = np.argsort(distances, kind='stable')
    ranked = distances[order]
    keep = ~((ranked > -SELF_DISTANCE) & (ranked < SELF_DISTANCE))
    nearest = order[keep][:nclose]
    return coords[nearest].sum(axis=0) / nclose


def cos_angle(first, second):
    """
    Cosine of the angle between two vectors. Returns nan when either vector
    has zero length.
    """
    lengths = np.linalg.norm(first) * np.linalg.norm(second)
    if lengths == 0:
        return np.nan
    return np.dot(first, second) / lengths
