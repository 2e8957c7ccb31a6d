from .base import DOMAIN_SIZE, REFERENCE_TOKEN_TABLE, SET_FLAG, TOKEN_CHARS, UNSET_FLAG, TableDiff
from .builder import TOKEN_TABLE, build_table, members_from_chars, members_from_table, token_members
from .engine import compare_tables, tables_equal
from .headers import HeaderStore, canonical_header_key, is_singleton_header, is_token_byte
from .render import to_c_array, to_json
from .utils import BitmapIndex


__all__ = [
    "DOMAIN_SIZE",
    "SET_FLAG",
    "UNSET_FLAG",
    "TOKEN_CHARS",
    "TOKEN_TABLE",
    "REFERENCE_TOKEN_TABLE",
    "TableDiff",
    "BitmapIndex",
    "build_table",
    "members_from_chars",
    "members_from_table",
    "token_members",
    "tables_equal",
    "compare_tables",
    "to_json",
    "to_c_array",
    "HeaderStore",
    "canonical_header_key",
    "is_singleton_header",
    "is_token_byte"
]

__version__ = "0.1.0"
