import logging
import os
import sys
from typing import List, Optional

from .base import REFERENCE_TOKEN_TABLE
from .builder import TOKEN_TABLE
from .engine import compare_tables
from .render import to_c_array, to_json


RENDERERS = {
    "json": to_json,
    "c": to_c_array,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Print the token table, then whether it matches the hand-written one."""
    if argv is None:
        argv = sys.argv[1:]

    fmt = argv[0] if argv else "json"
    if fmt not in RENDERERS:
        raise ValueError(f"Unknown output format {fmt!r}, expected one of {sorted(RENDERERS)}")

    print(RENDERERS[fmt](TOKEN_TABLE))

    diff = compare_tables(TOKEN_TABLE, REFERENCE_TOKEN_TABLE)
    print(diff.equal)

    return 0


if __name__ == "__main__":
    logging.basicConfig(level=os.getenv("TOKEN_TABLE_LOG_LEVEL", "WARNING").upper())
    sys.exit(main())
