"""
Per-atom arrays of a structure plus the residue bookkeeping derived from
them.
"""
import numpy as np
from surface_patch import exception
from surface_patch import utils


# Atom standing in for each residue when calculating solvent vectors.
REPRESENTATIVE_NAME = "CA  "


class Structure:
    """
    Holds every atom of one structure in file order. Each atom is a row
    across the arrays below. Residues are never stored, they are runs of
    consecutive atoms sharing chain, residue number and insertion code and
    are indexed once on first use.
    """
    _residue_starts = None
    _residue_ids = None
    _representatives = None
    _residue_representatives = None

    def __init__(self, coords, chains, resnums, inserts, names, radii,
                 accessibility, records=None):
        """
        Radii and accessibility are the input values read from the occupancy
        and B-value columns. They are never overwritten, the output columns
        live in output_radii and membership once the patch is cleaned up.
        """
        self.coords = np.asarray(coords, dtype=np.float64).reshape(-1, 3)
        self.chains = np.asarray(chains, dtype=str)
        self.resnums = np.asarray(resnums, dtype=np.int64)
        self.inserts = np.asarray(inserts, dtype=str)
        self.names = np.array([utils.pad_atom_name(name) for name in names],
                              dtype=str)
        self.radii = np.asarray(radii, dtype=np.float64)
        self.accessibility = np.asarray(accessibility, dtype=np.float64)
        # Raw coordinate records, needed to write the structure back out.
        self.records = list(records) if records is not None else None

        # Patch membership of every atom while the patch is being built.
        self.patch_flags = np.zeros(len(self), dtype=bool)
        # Solvent vector flag of every representative atom.
        self.solvent_flags = np.zeros(len(self.representatives), dtype=bool)
        # Output columns, filled in by patch.clean_up().
        self.output_radii = None
        self.membership = None

    def __len__(self):
        return self.coords.shape[0]

    def _index_residues(self):
        """
        Find where every residue starts and which residue each atom belongs
        to.
        """
        change = np.ones(len(self), dtype=bool)
        change[1:] = (
            (self.chains[1:] != self.chains[:-1])
            | (self.resnums[1:] != self.resnums[:-1])
            | (self.inserts[1:] != self.inserts[:-1])
        )
        self._residue_starts = np.flatnonzero(change)
        self._residue_ids = np.cumsum(change) - 1

    @property
    def residue_starts(self):
        """
        Convenience property to return the index of the first atom of every
        residue.
        """
        if self._residue_starts is None:
            self._index_residues()
        return self._residue_starts

    @property
    def residue_ids(self):
        """
        Convenience property to return the residue number (0 based, in file
        order) of every atom.
        """
        if self._residue_ids is None:
            self._index_residues()
        return self._residue_ids

    @property
    def num_residues(self):
        """
        Convenience property to return the number of residues.
        """
        return self.residue_starts.shape[0]

    def residue_bounds(self, residue):
        """
        Start and stop atom indices of a residue.
        """
        start = self.residue_starts[residue]
        if residue + 1 < self.num_residues:
            return start, self.residue_starts[residue + 1]
        return start, len(self)

    def residue_key(self, index):
        """
        The (chain, resnum, insert) tuple of the atom at index.
        """
        return (str(self.chains[index]), int(self.resnums[index]),
                str(self.inserts[index]))

    def matching(self, resspec):
        """
        Boolean array of atoms in the residue named by resspec.
        """
        return ((self.chains == resspec.chain)
                & (self.resnums == resspec.resnum)
                & (self.inserts == resspec.insert))

    def find_residue(self, resspec):
        """
        Index of the first atom of the residue named by resspec.
        """
        hits = np.flatnonzero(self.matching(resspec))
        if hits.shape[0] == 0:
            raise exception.ResidueNotFound(str(resspec))
        return hits[0]

    def find_atom(self, resspec, atom_name):
        """
        Find the seed atom. Scans forward from the first atom of the residue
        for as long as we are still inside that residue and returns the index
        of the first atom whose name matches.
        """
        start = self.find_residue(resspec)
        token = utils.pad_atom_name(atom_name)
        _, stop = self.residue_bounds(self.residue_ids[start])
        for index in range(start, stop):
            if self.names[index] == token:
                return index
        raise exception.AtomNotFound(str(resspec), token)

    @property
    def representatives(self):
        """
        Convenience property to return atom indices of every C-alpha in file
        order.
        """
        if self._representatives is None:
            self._representatives = np.flatnonzero(
                self.names == REPRESENTATIVE_NAME)
        return self._representatives

    @property
    def residue_representatives(self):
        """
        Convenience property to return, for every residue, the position in
        representatives of the first C-alpha carrying the same chain, number
        and insertion code. Residues without one get -1.
        """
        if self._residue_representatives is None:
            first = {}
            for position, index in enumerate(self.representatives):
                first.setdefault(self.residue_key(index), position)
            self._residue_representatives = np.array(
                [first.get(self.residue_key(start), -1)
                 for start in self.residue_starts],
                dtype=np.int64)
        return self._residue_representatives

    def find_representative(self, resspec):
        """
        Position in representatives of the C-alpha of the residue named by
        resspec.
        """
        hits = np.flatnonzero(self.matching(resspec)[self.representatives])
        if hits.shape[0] == 0:
            raise exception.RepresentativeNotFound(str(resspec))
        return hits[0]

    def membership_of_residues(self):
        """
        Membership code of the first atom of every residue. Only meaningful
        after the patch has been cleaned up.
        """
        return self.membership[self.residue_starts]
