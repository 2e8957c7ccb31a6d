import json

from .base import SET_FLAG


CONTROL_NAMES = [
    "NUL", "SOH", "STX", "ETX", "EOT", "ENQ", "ACK", "BEL",
    "BS", "HT", "LF", "VT", "FF", "CR", "SO", "SI",
    "DLE", "DC1", "DC2", "DC3", "DC4", "NAK", "SYN", "ETB",
    "CAN", "EM", "SUB", "ESC", "FS", "GS", "RS", "US",
    "SPC",
]


def to_json(table: str) -> str:
    """Quoted JSON encoding of the table, control bytes as \\u escapes."""
    return json.dumps(table)


def byte_name(b: int) -> str:
    if b < len(CONTROL_NAMES):
        return CONTROL_NAMES[b]
    if b == 0x7f:
        return "DEL"
    if b >= 0x80:
        return hex(b)
    return chr(b)


def to_c_array(table: str, name: str = "token_table", per_line: int = 8,
               set_flag: str = SET_FLAG) -> str:
    """Render the table as a C array initializer with one commented entry per byte."""
    if per_line < 1:
        raise ValueError(f"per_line must be positive, got {per_line}")

    entries = []
    for i, flag in enumerate(table):
        value = 1 if flag == set_flag else 0
        entries.append(f"{value} /* {byte_name(i):<4} */")

    lines = []
    for start in range(0, len(entries), per_line):
        lines.append("    " + ", ".join(entries[start:start + per_line]) + ",")

    body = "\n".join(lines)
    return f"static const char {name}[{len(table)}] = {{\n{body}\n}};"
