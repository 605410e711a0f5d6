"""
Residue specifiers of the form [chain[.]]resnum[insert], e.g. "A.24B",
"L24", "24" or "HA.-3".
"""
import re
from surface_patch import exception


BLANK = " "

_number = re.compile(r"^(-?\d+)([A-Za-z]?)$")


class ResSpec:
    """
    Parsed residue specifier. Chain and insertion code default to a blank
    (" ") which is how PDB files store missing values.
    """
    def __init__(self, chain, resnum, insert=BLANK, text=None):
        self.chain = chain
        self.resnum = resnum
        self.insert = insert
        # What the user typed, kept for messages and the summary line.
        self.text = text

    @property
    def key(self):
        """
        Convenience property to return the (chain, resnum, insert) tuple used
        to match atoms.
        """
        return self.chain, self.resnum, self.insert

    def __eq__(self, other):
        if not isinstance(other, ResSpec):
            return NotImplemented
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __repr__(self):
        return f"ResSpec({self.chain!r}, {self.resnum!r}, {self.insert!r})"

    def __str__(self):
        if self.text is not None:
            return self.text
        return format_residue(*self.key)


def parse_resspec(text):
    """
    Parse a residue specifier. A "." splits a (possibly multi-character)
    chain name from the residue number. Without a "." a leading letter is
    taken as a one character chain name.
    """
    spec = text.strip()
    if '.' in spec:
        chain, _, rest = spec.partition('.')
        if not chain:
            raise exception.InvalidResidueSpec(text)
    elif spec[:1].isalpha():
        chain, rest = spec[0], spec[1:]
    else:
        chain, rest = BLANK, spec

    match = _number.match(rest)
    if match is None:
        raise exception.InvalidResidueSpec(text)
    insert = match.group(2) or BLANK
    return ResSpec(chain, int(match.group(1)), insert, text=text)


def format_residue(chain, resnum, insert):
    """
    Summary token for a residue, chain:resnum[insert].
    """
    return f"{chain}:{resnum}{insert.strip()}"
