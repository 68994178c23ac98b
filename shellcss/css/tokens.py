"""CSS value tokens.

Tokens carry the text they were read from (`raw`) so a value can be written back
out exactly as the caller wrote it. Numeric tokens additionally carry their parsed
magnitude and, for dimensions, the unit.

https://www.w3.org/TR/css-syntax-3/#tokenization
"""
from __future__ import annotations
from typing import Literal

__all__ = [
    "Token",
    "Ident",
    "Function",
    "AtKeyword",
    "Hash",
    "String",
    "BadString",

    "Delim",
    "Colon",
    "Semicolon",
    "Comma",

    "LCurlyBracket",
    "LSquareBracket",
    "LParantheses",
    "RCurlyBracket",
    "RSquareBracket",
    "RParantheses",

    "Number",
    "Percentage",
    "Dimension",
    "format_number",

    "Comment",
    "Whitespace",
    "EOF",
]

PRECISION = 5

def format_number(value: int | float) -> str:
    """Number as CSS text with at most `PRECISION` fractional digits and no trailing zeros."""
    if isinstance(value, int) or float(value).is_integer():
        return str(int(value))
    text = f"{value:.{PRECISION}f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text

class Token:
    raw: str
    def __init__(self, raw: str = ''):
        self.raw = raw

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.raw!r})'

    def __str__(self) -> str:
        return self.raw

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.raw == other.raw

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.raw))

class Ident(Token): pass
class Function(Token):
    def __str__(self) -> str:
        return f"{self.raw}("
class AtKeyword(Token):
    def __str__(self) -> str:
        return f"@{self.raw}"
class Hash(Token):
    def __init__(self, raw: str = '', *, type: Literal['id', 'unrestricted'] = 'unrestricted'):
        self.type = type
        super().__init__(raw)
    def __str__(self) -> str:
        return f"#{self.raw}"

class String(Token):
    def __init__(self, raw: str = '', quote: str = '"'):
        self.quote = quote
        super().__init__(raw)
    def __str__(self) -> str:
        return f"{self.quote}{self.raw}{self.quote}"
class BadString(Token): pass

class Delim(Token):
    def __init__(self, raw: str):
        if len(raw) > 1:
            raise ValueError("Delimiters may only be one codepoint long")
        super().__init__(raw)

class Colon(Delim): pass
class Semicolon(Delim): pass
class Comma(Delim): pass

class LCurlyBracket(Token):
    @property
    def alt(self) -> type:
        return RCurlyBracket
class RCurlyBracket(Token):
    @property
    def alt(self) -> type:
        return LCurlyBracket
class LSquareBracket(Token):
    @property
    def alt(self) -> type:
        return RSquareBracket
class RSquareBracket(Token):
    @property
    def alt(self) -> type:
        return LSquareBracket
class LParantheses(Token):
    @property
    def alt(self) -> type:
        return RParantheses
class RParantheses(Token):
    @property
    def alt(self) -> type:
        return LParantheses

class Number(Token):
    value: int | float
    type: Literal['integer', 'number']
    def __init__(
        self,
        value: int | float,
        type: Literal['integer', 'number'] | None = None,
        raw: str | None = None,
    ):
        self.value = value
        self.type = type or ('integer' if isinstance(value, int) else 'number')
        super().__init__(raw if raw is not None else format_number(value))

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.value == other.value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))

class Percentage(Number):
    def __str__(self) -> str:
        return f"{self.raw}%"

class Dimension(Number):
    """A number tagged with a unit, `16px`, `1.5em`."""

    unit: str
    def __init__(
        self,
        value: int | float,
        type: Literal['integer', 'number'] | None = None,
        unit: str = '',
        raw: str | None = None,
    ):
        self.unit = unit
        super().__init__(
            value,
            type,
            raw if raw is not None else f"{format_number(value)}{unit}",
        )

    def __repr__(self) -> str:
        return f"Dimension({self.raw!r})"

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Dimension)
            and self.value == other.value
            and self.unit == other.unit
        )

    def __hash__(self) -> int:
        return hash(("Dimension", self.value, self.unit))

class Comment(Token):
    @property
    def text(self) -> str:
        return self.raw.removeprefix("/*").removesuffix("*/")

class Whitespace(Token): pass
class EOF(Token): pass
