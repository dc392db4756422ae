"""Backslash escapes inside string literals.

`unescape` runs in the parser (the tokenizer keeps escapes verbatim) and
`escape` is its inverse for display, so printed strings read back unchanged.
"""

from __future__ import annotations

from crisp.errors import CrispParseError

SIMPLE_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "0": "\0",
    "b": "\b",
    "f": "\f",
    "\\": "\\",
    '"': '"',
    "'": "'",
    "/": "/",
}

# Inverse map used when printing; `'` and `/` are left alone
DISPLAY_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\0": "\\0",
    "\b": "\\b",
    "\f": "\\f",
}

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _read_hex(body: str, start: int, count: int) -> int:
    digits = body[start:start + count]
    if len(digits) != count or not set(digits) <= _HEX_DIGITS:
        raise CrispParseError(f"Invalid escape sequence near `{body[start - 2:start + count]}`.")
    return int(digits, 16)


def _codepoint(value: int) -> str:
    if value > 0x10FFFF or 0xD800 <= value <= 0xDFFF:
        raise CrispParseError(f"Invalid unicode code point {value:#x}.")
    return chr(value)


def unescape(body: str) -> str:
    """Resolve backslash escapes in the text between a literal's quotes."""
    out: list[str] = []
    i = 0
    n = len(body)
    while i < n:
        c = body[i]
        if c != "\\":
            out.append(c)
            i += 1
            continue
        if i + 1 >= n:
            raise CrispParseError("Invalid escape sequence: trailing `\\`.")
        code = body[i + 1]
        if code in SIMPLE_ESCAPES:
            out.append(SIMPLE_ESCAPES[code])
            i += 2
        elif code == "x":
            out.append(chr(_read_hex(body, i + 2, 2)))
            i += 4
        elif code == "u" and body.startswith("{", i + 2):
            close = body.find("}", i + 3)
            digits = body[i + 3:close] if close != -1 else ""
            if not 1 <= len(digits) <= 6 or not set(digits) <= _HEX_DIGITS:
                raise CrispParseError(f"Invalid unicode escape near `{body[i:i + 10]}`.")
            out.append(_codepoint(int(digits, 16)))
            i = close + 1
        elif code == "u":
            out.append(_codepoint(_read_hex(body, i + 2, 4)))
            i += 6
        else:
            raise CrispParseError(f"Invalid escape sequence `\\{code}`.")
    return "".join(out)


def escape(text: str) -> str:
    """Re-escape `text` so it can be written back between double quotes."""
    out: list[str] = []
    for c in text:
        if c in DISPLAY_ESCAPES:
            out.append(DISPLAY_ESCAPES[c])
        elif ord(c) < 0x20 or ord(c) == 0x7F:
            out.append(f"\\u{{{ord(c):x}}}")
        else:
            out.append(c)
    return "".join(out)
