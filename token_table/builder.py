import logging
from typing import Iterable, Set

from .base import DOMAIN_SIZE, SET_FLAG, TOKEN_CHARS, UNSET_FLAG
from .utils import BitmapIndex


logger = logging.getLogger(__name__)


def _check_flags(set_flag: str, unset_flag: str):
    for flag in (set_flag, unset_flag):
        if not isinstance(flag, str) or len(flag) != 1:
            raise ValueError(f"Flag must be a single character, got {flag!r}")
    if set_flag == unset_flag:
        raise ValueError(f"Set and unset flags must differ, both are {set_flag!r}")


def build_table(members: Iterable[int], size: int = DOMAIN_SIZE,
                set_flag: str = SET_FLAG, unset_flag: str = UNSET_FLAG) -> str:
    """
    Build a flag sequence of length `size` from a membership set.

    Position i holds `set_flag` if i is a member, otherwise `unset_flag`.
    Members outside [0, size) are ignored.

    Args:
        members: Integers to mark as set.
        size: Length of the resulting sequence.
        set_flag: Symbol for members.
        unset_flag: Symbol for non-members.
    """
    if size < 0:
        raise ValueError(f"Table size must be non-negative, got {size}")
    _check_flags(set_flag, unset_flag)

    bitmap = BitmapIndex(size)
    for member in members:
        if not isinstance(member, int):
            raise TypeError(f"Table members must be integers, got {member!r}")
        bitmap.set(member)

    logger.debug(f"Built table of size {size} with {bitmap.count()} set entries")
    return bitmap.to_flags(set_flag, unset_flag)


def members_from_chars(chars: str) -> Set[int]:
    """Membership set holding the code point of each character."""
    return {ord(c) for c in chars}


def token_members() -> Set[int]:
    return members_from_chars(TOKEN_CHARS)


def members_from_table(table: str, set_flag: str = SET_FLAG) -> Set[int]:
    """Recover the membership set encoded by a flag sequence."""
    bitmap = BitmapIndex(len(table))
    for idx, flag in enumerate(table):
        if flag == set_flag:
            bitmap.set(idx)
    return set(bitmap.indices())


TOKEN_TABLE = build_table(token_members())
