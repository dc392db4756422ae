"""
  Crisp Reader: tokenizer and stack-based parser

- `tokenize` never fails; malformed input turns into tokens the parser rejects.
- `parse` consumes one expression and hands back the unconsumed tokens, so a
  REPL can feed the remainder back in.
- Emits Python primitives:

    - nil -> Nil
    - true / false -> bool
    - numbers -> float
    - strings -> str (escapes resolved)
    - ,x -> Char
    - lists -> Python list
    - everything else -> Symbol
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Sequence

from crisp import SExpression
from crisp.errors import CrispParseError
from crisp.reader.escapes import unescape
from crisp.types.char import Char
from crisp.types.nil import Nil
from crisp.types.symbol import Symbol

logger = logging.getLogger(__name__)

LPAREN = "("
RPAREN = ")"
COMMENT = ";"
CHAR_MARKER = ","
STRING_DELIMITERS = ('"', "'")
WHITESPACE = frozenset(" \t\r\n")

NUMBER_RE = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?")


def tokenize(source: str, implicit_parens: bool = True) -> list[str]:
    """Split source text into tokens.

    When `implicit_parens` is set and the first token is not `(`, the token list
    is wrapped in a pair of parens so that `+ 1 2` reads as `(+ 1 2)`.
    """
    tokens: list[str] = []
    current: list[str] = []
    pos = 0
    n = len(source)

    def flush():
        if current:
            tokens.append("".join(current))
            current.clear()

    while pos < n:
        c = source[pos]

        if c in WHITESPACE:
            flush()
            pos += 1
        elif c in (LPAREN, RPAREN):
            flush()
            tokens.append(c)
            pos += 1
        elif c == COMMENT:
            flush()
            end = source.find("\n", pos)
            pos = n if end == -1 else end + 1
        elif c == CHAR_MARKER:
            flush()
            tokens.append(source[pos:pos + 2])
            pos += 2
        elif c in STRING_DELIMITERS:
            flush()
            # Accumulate through the next delimiter not escaped by a backslash
            start = pos
            pos += 1
            while pos < n and source[pos] != c:
                pos += 2 if source[pos] == "\\" else 1
            pos = min(pos + 1, n)
            tokens.append(source[start:pos])
        else:
            current.append(c)
            pos += 1
    flush()

    if implicit_parens and tokens and tokens[0] != LPAREN:
        tokens = [LPAREN, *tokens, RPAREN]
    return tokens


def parse_atom(token: str) -> SExpression:
    """Parse a single non-paren token."""
    if token == "true":
        return True
    if token == "false":
        return False
    if token == "nil":
        return Nil
    if token.startswith(CHAR_MARKER):
        if len(token) != 2:
            raise CrispParseError("Expected a character after `,`.")
        return Char(token[1])
    if token[0] in STRING_DELIMITERS:
        quote = token[0]
        if len(token) < 2 or token[-1] != quote or _escaped_at(token, len(token) - 1):
            raise CrispParseError(f"Unterminated string literal {token}.")
        return unescape(token[1:-1])
    if NUMBER_RE.fullmatch(token):
        return float(token)
    return Symbol(token)


def _escaped_at(token: str, index: int) -> bool:
    """True when the character at `index` is preceded by an odd run of backslashes."""
    count = 0
    i = index - 1
    while i >= 0 and token[i] == "\\":
        count += 1
        i -= 1
    return count % 2 == 1


def _parse_at(tokens: Sequence[str], pos: int) -> tuple[SExpression, int]:
    # Open lists, innermost last; nesting depth is bounded by memory only
    stack: list[list[SExpression]] = []
    while pos < len(tokens):
        token = tokens[pos]
        pos += 1
        if token == LPAREN:
            stack.append([])
            continue
        if token == RPAREN:
            if not stack:
                raise CrispParseError("Unexpected `)`.")
            expr = stack.pop()
        else:
            expr = parse_atom(token)
        if not stack:
            return expr, pos
        stack[-1].append(expr)
    raise CrispParseError("Couldn't find closing `)`.")


def parse(tokens: Sequence[str]) -> tuple[SExpression, list[str]]:
    """Parse one expression from `tokens`.

    Returns the expression and the unparsed tokens. An empty token sequence
    parses to Nil.
    """
    if not tokens:
        return Nil, []
    expr, pos = _parse_at(tokens, 0)
    return expr, list(tokens[pos:])


def parse_all(tokens: Sequence[str]) -> Iterator[SExpression]:
    """Yield every top-level expression in `tokens`, in order."""
    pos = 0
    while pos < len(tokens):
        expr, pos = _parse_at(tokens, pos)
        logger.debug("parsed %r", expr)
        yield expr


def read(source: str) -> SExpression:
    """Tokenize and parse the first expression of `source`."""
    expr, _ = parse(tokenize(source))
    return expr
