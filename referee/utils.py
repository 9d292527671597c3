"""Parsing of literal tokens and a hex dump helper."""

from __future__ import annotations

import math
import re
import string

_INT64_MAX = 2**63 - 1
_INT64_MIN = -(2**63)

_DIGITS = string.digits + string.ascii_lowercase

_DECIMAL_FLOAT = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_HEX_FLOAT = re.compile(
    r"\s*([+-]?0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?\d+)?)",
    re.IGNORECASE,
)


def _integer_pattern(base: int) -> re.Pattern[str]:
    digits = re.escape(_DIGITS[:base])
    prefix = "(?:0[xX])?" if base == 16 else ""
    return re.compile(rf"\s*[+-]?{prefix}[{digits}]+", re.IGNORECASE)


def parse_integer(text: str, base: int) -> int:
    """Parse a signed 64-bit integer in the given base.

    Leading whitespace and a sign are allowed; trailing characters and
    values at or beyond the 64-bit limits are rejected.
    """
    if not text:
        return 0
    if not _integer_pattern(base).fullmatch(text):
        raise ValueError(f"invalid base-{base} integer: {text!r}")
    value = int(text.strip(), base)
    if value >= _INT64_MAX or value <= _INT64_MIN:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def parse_binint(text: str) -> int:
    """Parse a binary integer."""
    return parse_integer(text, 2)


def parse_octint(text: str) -> int:
    """Parse an octal integer."""
    return parse_integer(text, 8)


def parse_decint(text: str) -> int:
    """Parse a decimal integer."""
    return parse_integer(text, 10)


def parse_hexint(text: str) -> int:
    """Parse a hexadecimal integer."""
    return parse_integer(text, 16)


def parse_number(text: str) -> float:
    """Parse a floating point number; positive overflow is an error."""
    if not text:
        return 0.0
    hex_match = _HEX_FLOAT.fullmatch(text)
    if hex_match:
        value = float.fromhex(hex_match.group(1))
    elif _DECIMAL_FLOAT.fullmatch(text):
        value = float(text.strip())
    else:
        raise ValueError(f"invalid number: {text!r}")
    if math.isinf(value) and value > 0:
        raise ValueError(f"number out of range: {text!r}")
    return value


def parse_string(text: str) -> str:
    """Strip the surrounding quote characters from a string literal."""
    if not text:
        raise ValueError("empty string literal")
    return text[1 : len(text) - 1]


def parse_boolean(text: str) -> bool:
    """Parse ``true`` or ``false``."""
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"invalid boolean: {text!r}")


def hex_dump(data: bytes | bytearray | str) -> str:
    """Render data as a hex dump, 16 bytes per line with a printable column."""
    raw = data.encode() if isinstance(data, str) else bytes(data)
    lines = [""]
    for offset in range(0, len(raw), 16):
        chunk = raw[offset : offset + 16]
        hex_part = "".join(f"{byte:02x} " for byte in chunk)
        text = "".join(chr(byte) if 0x20 <= byte < 0x7F else "." for byte in chunk)
        padding = " " * (3 * (16 - len(chunk))) if len(chunk) < 16 else ""
        lines.append(f"{offset:04x}: {hex_part}{padding} | {text}")
    return "\n".join(lines) + "\n"