import logging

import Levenshtein

from .base import TableDiff


logger = logging.getLogger(__name__)


def tables_equal(a: str, b: str) -> bool:
    """True iff both flag sequences have equal length and identical symbols."""
    return a == b


def compare_tables(a: str, b: str) -> TableDiff:
    """Compare two flag sequences and report where they diverge."""
    mismatches = [i for i, (x, y) in enumerate(zip(a, b)) if x != y]

    if len(a) == len(b):
        distance = Levenshtein.hamming(a, b)
    else:
        distance = Levenshtein.distance(a, b)

    diff = TableDiff(
        equal=tables_equal(a, b),
        length_a=len(a),
        length_b=len(b),
        distance=distance,
        mismatches=mismatches
    )

    logger.debug(f"Compared tables of length {len(a)} and {len(b)}: distance {distance}")
    if not diff.equal:
        if not diff.same_length:
            logger.warning(f"Table lengths differ: {len(a)} != {len(b)}")
        if mismatches:
            logger.warning(f"Tables differ at positions {mismatches}")

    return diff
