""" CSS value lexing
https://www.w3.org/TR/css-syntax-3/#tokenizing-and-parsing

Covers what design token values and declaration blocks are made of:

    number      => 16, -1.5, 2e3
    dimension   => 16px, 1.5em, 100vw
    percentage  => 50%
    ident       => none, block, lap
    function    => rgba(, calc(
    string      => "Helvetica Neue"
    hash        => #fff
    at-keyword  => @media
    punctuation => : ; , ( ) [ ] { } and any other single delimiter
"""

from __future__ import annotations
import re
from typing import Literal
from shellcss.css.tokens import *

__all__ = ["Check", "Lexer", "ParseError"]

REPLACEMENT_CHAR = '�'

class Check:
    @staticmethod
    def letter(current: str | None) -> bool:
        return current is not None and current.isalpha()

    @staticmethod
    def non_ascii(current: str | None) -> bool:
        return current is not None and ord(current) >= 0x80

    @staticmethod
    def ident_start(current: str | None) -> bool:
        return current is not None and (Check.letter(current) or Check.non_ascii(current) or current == "_")

    @staticmethod
    def digit(current: str | None) -> bool:
        return current is not None and current in "0123456789"

    @staticmethod
    def whitespace(current: str | None) -> bool:
        return current is not None and current in '\t\n '

    @staticmethod
    def hex(current: str | None) -> bool:
        return current is not None and current in '0123456789abcdefABCDEF'

    @staticmethod
    def ident(current: str | None) -> bool:
        return current is not None and (Check.ident_start(current) or Check.digit(current) or current == "-")

    @staticmethod
    def escape(current: str | None, next: str | None) -> bool:
        return current == "\\" and next is not None and next != "\n"

    @staticmethod
    def starts_with_ident(first: str | None, second: str | None, third: str | None) -> bool:
        if first == "-":
            return Check.ident_start(second) or second == "-" or Check.escape(second, third)
        elif first == "\\":
            return Check.escape(first, second)
        return Check.ident_start(first)

    @staticmethod
    def starts_with_number(first: str | None, second: str | None, third: str | None) -> bool:
        if first is not None and first in "+-":
            return Check.digit(second) or (second == "." and Check.digit(third))
        elif first == ".":
            return Check.digit(second)
        return Check.digit(first)


RETURNS = re.compile("\r\n|\f|\r")
class Lexer:
    """Turns CSS text into tokens, one `consume` at a time or all at once with `process`.

    Recoverable problems (an unclosed string, a stray backslash) are collected in
    `errors` instead of raised, the same way a browser keeps going.
    """

    def __init__(self, source: str) -> None:
        self.source: str = RETURNS.sub("\n", source).replace('\u0000', REPLACEMENT_CHAR)
        self.index = 0
        self.errors: list[Exception] = []

    def __iter__(self):
        return self

    def __next__(self) -> Token:
        next = self.consume()
        if isinstance(next, EOF):
            raise StopIteration
        return next

    def process(self) -> list[Token]:
        """Lex the entire source at once."""
        return [token for token in self]

    def peek(self, amount: int = 1) -> str | None:
        """The code point `amount` positions ahead without consuming it."""
        index = self.index + amount - 1
        if index < len(self.source):
            return self.source[index]
        return None

    def next(self) -> str | None:
        if self.index < len(self.source):
            self.index += 1
            return self.source[self.index - 1]
        return None

    def reconsume(self):
        self.index -= 1

    def error(self, error: Exception):
        self.errors.append(error)

    def _consume_comment_(self) -> Comment:
        start = self.index - 1
        end = self.source.find("*/", self.index + 1)
        if end == -1:
            raise ParseError("Comment not closed")
        self.index = end + 2
        return Comment(self.source[start:self.index])

    def _consume_whitespace_(self, current: str) -> Whitespace:
        whitespace = current
        while Check.whitespace(self.peek()):
            whitespace += self.next()
        return Whitespace(whitespace)

    def _consume_string_(self, ending: str) -> String | BadString:
        string = ''
        while True:
            next = self.next()
            if next is None:
                self.error(ParseError("String was not closed"))
                return String(string, ending)
            elif next == ending:
                return String(string, ending)
            elif next == "\n":
                self.reconsume()
                self.error(ParseError("String literal not closed before newline"))
                return BadString(string)
            elif next == "\\":
                if self.peek() is None:
                    continue
                elif self.peek() == "\n":
                    self.next()
                else:
                    string += self._consume_escape_()
            else:
                string += next

    def _consume_escape_(self) -> str:
        next = self.next()
        if next is None:
            return REPLACEMENT_CHAR
        if Check.hex(next):
            digits = next
            while Check.hex(self.peek()) and len(digits) < 6:
                digits += self.next()
            if Check.whitespace(self.peek()):
                self.next()
            code = int(digits, 16)
            if code == 0 or code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
                return REPLACEMENT_CHAR
            return chr(code)
        return next

    def _consume_ident_(self) -> str:
        result = ''
        while True:
            next = self.next()
            if Check.ident(next):
                result += next
            elif Check.escape(next, self.peek()):
                result += self._consume_escape_()
            else:
                if next is not None:
                    self.reconsume()
                return result

    def _consume_hash_(self, current: str) -> Hash | Delim:
        if Check.ident(self.peek()) or Check.escape(self.peek(), self.peek(2)):
            type = "id" if Check.starts_with_ident(self.peek(), self.peek(2), self.peek(3)) else "unrestricted"
            return Hash(self._consume_ident_(), type=type)
        return Delim(current)

    def _consume_number_(self) -> tuple[int | float, Literal['integer', 'number'], str]:
        """Consume a number from the code points. Returning a numeric value, a type
        of either integer or number, and the source text.
        """
        _type: Literal['integer', 'number'] = 'integer'
        raw = ''
        if (peek := self.peek()) is not None and peek in "-+":
            raw += self.next()

        while Check.digit(self.peek()):
            raw += self.next()

        if self.peek() == "." and Check.digit(self.peek(2)):
            _type = "number"
            raw += self.next()
            while Check.digit(self.peek()):
                raw += self.next()

        if (peek := self.peek()) is not None and peek in "Ee" and (
            Check.digit(self.peek(2))
            or ((self.peek(2) or ' ') in "-+" and Check.digit(self.peek(3)))
        ):
            _type = "number"
            raw += self.next() + self.next()
            while Check.digit(self.peek()):
                raw += self.next()

        if _type == "integer":
            return int(raw), _type, raw
        return float(raw), _type, raw

    def _consume_numeric_(self) -> Number | Percentage | Dimension:
        """Consume code points and produce a Number, Percentage, or Dimension token."""
        value, _type, raw = self._consume_number_()
        if Check.starts_with_ident(self.peek(), self.peek(2), self.peek(3)):
            unit = self._consume_ident_()
            return Dimension(value, _type, unit, raw + unit)
        elif self.peek() == "%":
            self.next()
            return Percentage(value, _type, raw)
        return Number(value, _type, raw)

    def _consume_ident_like_(self) -> Ident | Function:
        ident = self._consume_ident_()
        if self.peek() == "(":
            self.next()
            return Function(ident)
        return Ident(ident)

    def consume(self) -> Token:
        """Consume code points and return the next token."""
        next = self.next()
        if next is None:
            return EOF()
        elif next == "/" and self.peek() == "*":
            return self._consume_comment_()
        elif next in '"\'':
            return self._consume_string_(next)
        elif next == '#':
            return self._consume_hash_(next)
        elif next in "+-.":
            if Check.starts_with_number(next, self.peek(), self.peek(2)):
                self.reconsume()
                return self._consume_numeric_()
            elif next == "-" and Check.starts_with_ident(next, self.peek(), self.peek(2)):
                self.reconsume()
                return self._consume_ident_like_()
            return Delim(next)
        elif next == "@":
            if Check.starts_with_ident(self.peek(), self.peek(2), self.peek(3)):
                return AtKeyword(self._consume_ident_())
            return Delim(next)
        elif next == "\\":
            if Check.escape(next, self.peek()):
                self.reconsume()
                return self._consume_ident_like_()
            self.error(ParseError("Invalid backslash"))
            return Delim(next)
        elif Check.digit(next):
            self.reconsume()
            return self._consume_numeric_()
        elif Check.ident_start(next):
            self.reconsume()
            return self._consume_ident_like_()
        elif Check.whitespace(next):
            return self._consume_whitespace_(next)
        elif next == "(":
            return LParantheses(next)
        elif next == ")":
            return RParantheses(next)
        elif next == "[":
            return LSquareBracket(next)
        elif next == "]":
            return RSquareBracket(next)
        elif next == "{":
            return LCurlyBracket(next)
        elif next == "}":
            return RCurlyBracket(next)
        elif next == ",":
            return Comma(next)
        elif next == ":":
            return Colon(next)
        elif next == ";":
            return Semicolon(next)
        return Delim(next)

class ParseError(Exception): pass
