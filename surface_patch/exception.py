"""
Errors raised while reading a structure or resolving the seed of a patch.
"""


class NoAtomsRead(Exception):
    """
    Error for when the input stream doesn't contain a single coordinate
    record.
    """
    def __init__(self):
        self.message = "No atoms read from PDB file"
        super().__init__(self.message)


class SeedLookupError(LookupError):
    """
    Base class for everything that can go wrong while locating the seed of a
    patch. The driver treats all of them as fatal for the run.
    """


class ResidueNotFound(SeedLookupError):
    """
    Error for when no atom in the structure matches the residue specifier.
    """
    def __init__(self, resspec):
        self.resspec = resspec
        self.message = f"Couldn't find Residue {resspec}"
        super().__init__(self.message)


class AtomNotFound(SeedLookupError):
    """
    Error for when the seed residue exists but has no atom with the requested
    name.
    """
    def __init__(self, resspec, atom_name):
        self.resspec = resspec
        self.atom_name = atom_name
        self.message = \
            f"Couldn't find Residue {resspec} Atom {atom_name.strip()}"
        super().__init__(self.message)


class RepresentativeNotFound(SeedLookupError):
    """
    Error for when the seed residue is present but has no C-alpha to stand in
    for it while calculating solvent vectors.
    """
    def __init__(self, resspec):
        self.resspec = resspec
        self.message = f"Couldn't find C-alpha of Residue {resspec}"
        super().__init__(self.message)


class InvalidResidueSpec(ValueError):
    """
    Error for a residue specifier that isn't of the form
    [chain[.]]resnum[insert].
    """
    def __init__(self, resspec):
        self.resspec = resspec
        self.message = \
            f"Invalid residue specification {resspec!r} (expected " \
            "[chain[.]]resnum[insert], e.g. A.24B, L24 or 24)"
        super().__init__(self.message)


class InvalidPlotType(Exception):
    """
    Error for when an unsupported plot type is requested.
    """
    def __init__(self, plot_types):
        self.message = \
            f"Error: the plot type must be one of ({', '.join(plot_types)})."
        super().__init__(self.message)
