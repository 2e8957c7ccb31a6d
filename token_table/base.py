import string
from dataclasses import dataclass, field
from typing import Any, Dict, List


DOMAIN_SIZE = 256

SET_FLAG = "\x01"
UNSET_FLAG = "\x00"

# RFC 7230 section 3.2.6 tchar
TOKEN_CHARS = "!#$%&'*+-.^_`|~" + string.digits + string.ascii_letters


@dataclass
class TableDiff:
    """Outcome of comparing two flag sequences."""
    equal: bool
    length_a: int
    length_b: int
    distance: int
    mismatches: List[int] = field(default_factory=list)

    @property
    def same_length(self) -> bool:
        return self.length_a == self.length_b

    def to_dict(self) -> Dict[str, Any]:
        return {
            "equal": self.equal,
            "length_a": self.length_a,
            "length_b": self.length_b,
            "distance": self.distance,
            "mismatches": self.mismatches
        }


# Hand-written token table, one row per 32 bytes. Kept independent of
# TOKEN_CHARS so the generated table can be checked against it.
REFERENCE_TOKEN_TABLE = (
    "\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0"
    "\0\1\0\1\1\1\1\1\0\0\1\1\0\1\1\0\1\1\1\1\1\1\1\1\1\1\0\0\0\0\0\0"
    "\0\1\1\1\1\1\1\1\1\1\1\1\1\1\1\1\1\1\1\1\1\1\1\1\1\1\1\0\0\0\1\1"
    "\1\1\1\1\1\1\1\1\1\1\1\1\1\1\1\1\1\1\1\1\1\1\1\1\1\1\1\0\1\0\1\0"
    "\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0"
    "\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0"
    "\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0"
    "\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0\0"
)
