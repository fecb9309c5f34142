# src/featuredemo/raw_strings.py
r"""
Delimiter-weighted raw string literals.

A literal written as ``#"..."#`` has weight 1, ``##"..."##`` weight 2 and a
plain ``"..."`` weight 0. Inside a literal of weight N a backslash is an
ordinary character unless it is followed by exactly N ``#`` marks; only then
does it start an escape sequence or an interpolation::

    >>> RawLiteral.parse(r'#"Only \(one)!!"#').render({"one": 1})
    'Only \\(one)!!'
    >>> RawLiteral.parse(r'#"Only \#(one)!!"#').render({"one": 1})
    'Only 1!!'
"""

import logging
from typing import Any, Mapping, Optional

from .exceptions import LiteralSyntaxError

logger = logging.getLogger(__name__)

DELIMITER = "#"
QUOTE = '"'

SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "0": "\0",
    "\\": "\\",
    '"': '"',
    "'": "'",
}


class RawLiteral:
    """A literal body together with the weight of its delimiters."""

    def __init__(self, body: str, weight: int = 1):
        if weight < 0:
            raise ValueError("weight must not be negative")
        self.body = body
        self.weight = weight

    def __repr__(self):
        return f"RawLiteral({self.body!r}, weight={self.weight})"

    def __eq__(self, other):
        if not isinstance(other, RawLiteral):
            return NotImplemented
        return (self.body, self.weight) == (other.body, other.weight)

    @property
    def marker(self) -> str:
        """Escape marker: a backslash followed by ``weight`` delimiters."""
        return "\\" + DELIMITER * self.weight

    @property
    def source(self) -> str:
        """The literal as it would be written in source code."""
        fence = DELIMITER * self.weight
        return f"{fence}{QUOTE}{self.body}{QUOTE}{fence}"

    @classmethod
    def parse(cls, source: str) -> "RawLiteral":
        """Read a literal such as ``##"text"##`` from source text."""
        weight = len(source) - len(source.lstrip(DELIMITER))
        trailing = len(source) - len(source.rstrip(DELIMITER))
        if len(source) < 2 * weight + 2:
            raise LiteralSyntaxError(f"literal too short: {source!r}")
        if source[weight] != QUOTE or source[-trailing - 1] != QUOTE:
            raise LiteralSyntaxError(f"literal must be quoted: {source!r}")
        if trailing != weight:
            raise LiteralSyntaxError(
                f"opening delimiter has {weight} marks but closing has {trailing}"
            )

        body = source[weight + 1:len(source) - trailing - 1]
        if weight:
            if QUOTE + DELIMITER * weight in body:
                raise LiteralSyntaxError(f"literal terminates early: {source!r}")
        else:
            _check_plain_quotes(body)
        return cls(body, weight)

    def render(self, values: Optional[Mapping[str, Any]] = None) -> str:
        """Produce the string value, applying escapes and interpolations."""
        body = self.body
        marker = self.marker
        out = []
        i = 0
        while i < len(body):
            if not body.startswith(marker, i):
                out.append(body[i])
                i += 1
                continue

            j = i + len(marker)
            if j >= len(body):
                raise LiteralSyntaxError("escape marker at end of literal")
            char = body[j]
            if char == "(":
                close = body.find(")", j + 1)
                if close == -1:
                    raise LiteralSyntaxError("unterminated interpolation")
                name = body[j + 1:close].strip()
                if values is None or name not in values:
                    raise LiteralSyntaxError(f"no value for interpolation {name!r}")
                out.append(str(values[name]))
                i = close + 1
            elif char in SIMPLE_ESCAPES:
                out.append(SIMPLE_ESCAPES[char])
                i = j + 1
            elif char == "u":
                text, i = _unicode_escape(body, j + 1)
                out.append(text)
            else:
                raise LiteralSyntaxError(f"invalid escape sequence {marker}{char}")
        return "".join(out)


def _unicode_escape(body: str, start: int):
    """Decode ``{XXXX}`` beginning at ``start``; return (text, next index)."""
    if start >= len(body) or body[start] != "{":
        raise LiteralSyntaxError("expected '{' after unicode escape")
    close = body.find("}", start + 1)
    digits = body[start + 1:close] if close != -1 else ""
    if not 1 <= len(digits) <= 8 or any(c not in "0123456789abcdefABCDEF" for c in digits):
        raise LiteralSyntaxError(f"invalid unicode escape {digits!r}")
    code_point = int(digits, 16)
    if code_point > 0x10FFFF or 0xD800 <= code_point <= 0xDFFF:
        raise LiteralSyntaxError(f"invalid unicode scalar {digits}")
    return chr(code_point), close + 1


def _check_plain_quotes(body: str):
    escaped = False
    for char in body:
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == QUOTE:
            raise LiteralSyntaxError("unescaped quote in plain literal")


def raw(source: str, **values: Any) -> str:
    """Parse and render ``source`` in one step."""
    literal = RawLiteral.parse(source)
    logger.debug("Rendering %r", literal)
    return literal.render(values)
