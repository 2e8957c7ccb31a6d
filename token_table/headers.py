import logging
from typing import Dict, Iterator, List, Optional, Tuple

import ahocorasick

from .base import SET_FLAG
from .builder import TOKEN_TABLE


logger = logging.getLogger(__name__)

COMMON_HEADERS = [
    "Accept", "Accept-Charset", "Accept-Encoding", "Accept-Language",
    "Accept-Ranges", "Cache-Control", "Cc", "Connection", "Content-Id",
    "Content-Language", "Content-Length", "Content-Transfer-Encoding",
    "Content-Type", "Cookie", "Date", "Dkim-Signature", "Etag", "Expires",
    "From", "Host", "If-Modified-Since", "If-None-Match", "In-Reply-To",
    "Last-Modified", "Location", "Message-Id", "Mime-Version", "Pragma",
    "Received", "Return-Path", "Server", "Set-Cookie", "Subject", "To",
    "User-Agent", "Via", "X-Forwarded-For", "X-Imforwards", "X-Powered-By",
]

# RFC 7230 section 3.2.2: may not appear more than once
SINGLETON_HEADERS = frozenset(["Content-Type", "Content-Length", "Host"])


def _build_common_automaton() -> ahocorasick.Automaton:
    automaton = ahocorasick.Automaton()
    for name in COMMON_HEADERS:
        automaton.add_word(name, name)
    automaton.make_automaton()
    return automaton


_common_headers = _build_common_automaton()


def is_token_byte(b: int) -> bool:
    return 0 <= b < len(TOKEN_TABLE) and TOKEN_TABLE[b] == SET_FLAG


def is_common_header(key: str) -> bool:
    return key in _common_headers


def canonical_header_key(key: str) -> str:
    """
    Canonical MIME form of a header key: first letter and letters after a
    hyphen upper case, the rest lower case. Keys holding any non-token
    character are returned unchanged.
    """
    if is_common_header(key):
        return _common_headers.get(key)

    if not all(is_token_byte(ord(c)) for c in key):
        return key

    chars = []
    upper = True
    for c in key:
        if upper and "a" <= c <= "z":
            c = c.upper()
        elif not upper and "A" <= c <= "Z":
            c = c.lower()
        chars.append(c)
        upper = c == "-"

    canonical = "".join(chars)
    # Intern common names
    return _common_headers.get(canonical, canonical)


def is_singleton_header(key: str) -> bool:
    return canonical_header_key(key) in SINGLETON_HEADERS


class HeaderStore:
    """Multi-valued header map keyed by canonical header name."""

    def __init__(self):
        self._headers: Dict[str, List[str]] = {}

    def insert(self, key: str, value: str) -> bool:
        """
        Append a value under `key`. Returns False, leaving the store
        unchanged, when `key` is a singleton header already present.
        """
        if not key:
            raise ValueError("Header key must not be empty")
        key = canonical_header_key(key)
        existing = self._headers.get(key)
        if existing is None:
            self._headers[key] = [value]
            return True

        if key in SINGLETON_HEADERS:
            logger.debug(f"Rejected duplicate singleton header {key}")
            return False

        existing.append(value)
        return True

    def get(self, key: str) -> Optional[str]:
        values = self._headers.get(canonical_header_key(key))
        if not values:
            return None
        return values[0]

    def values(self, key: str) -> Optional[List[str]]:
        values = self._headers.get(canonical_header_key(key))
        if values is None:
            return None
        return list(values)

    def items(self) -> Iterator[Tuple[str, List[str]]]:
        for key, values in self._headers.items():
            yield key, list(values)

    def __contains__(self, key: str) -> bool:
        return canonical_header_key(key) in self._headers

    def __len__(self) -> int:
        return len(self._headers)
