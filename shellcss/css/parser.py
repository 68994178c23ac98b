""" CSS declaration parser and rule model
https://www.w3.org/TR/css-syntax-3/#parsing

The rule model is the output side of the library: breakpoint expansion produces
`AtRule`s holding `QualifiedRule`s holding `Declaration`s, and `render` writes
them out as text. The parser only needs to read what callers hand over as a
declaration block, e.g. `"display: none; color: red !important"`.
"""

from __future__ import annotations
from collections.abc import Iterable, Iterator, Mapping
from typing import Union

from typing_extensions import TypeAliasType

from shellcss.css.lexer import Lexer, ParseError
from shellcss.css.tokens import *

__all__ = [
    "Declaration",
    "QualifiedRule",
    "AtRule",
    "Rule",
    "Stylesheet",
    "Declarations",
    "Parse",
    "Parser",
]

def _join(tokens: Iterable[Token]) -> str:
    """Serialize tokens, collapsing whitespace runs to a single space."""
    out = ''
    for token in tokens:
        if isinstance(token, Comment):
            continue
        if isinstance(token, Whitespace):
            if out and not out.endswith(" "):
                out += " "
            continue
        out += str(token)
    return out.strip()

class Declaration:
    important: bool
    name: str
    value: list[Token]
    def __init__(self, name: str, value: list[Token] | None = None, important: bool = False):
        self.name = name
        self.value = value or []
        self.important = important

    @staticmethod
    def new(name: str, value: str | int | float | Token) -> Declaration:
        """Build a declaration from a python value. Strings are lexed, so a trailing
        `!important` is honored.
        """
        if isinstance(value, Token):
            return Declaration(name, [value])
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return Declaration(name, [Number(value)])
        return Parse.parse_declaration(f"{name}: {value}")

    @property
    def text(self) -> str:
        """The value as CSS text, without the `!important` flag."""
        return _join(self.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Declaration):
            return (
                self.name == other.name
                and self.text == other.text
                and self.important == other.important
            )
        return False

    def __repr__(self) -> str:
        return f"Decl({'!, ' if self.important else ''}{self.name!r}, {self.text!r})"

class QualifiedRule:
    prelude: str
    block: list[Rule]
    def __init__(self, prelude: str, block: Iterable[Rule] | None = None) -> None:
        self.prelude = prelude
        self.block = list(block or [])

    @property
    def declarations(self) -> list[Declaration]:
        return [item for item in self.block if isinstance(item, Declaration)]

    def __repr__(self) -> str:
        return f"QualifiedRule({self.prelude!r}, block={{...}})"

class AtRule:
    name: str
    prelude: str
    block: list[Rule] | None
    def __init__(self, name: str, prelude: str = '', block: Iterable[Rule] | None = None) -> None:
        self.name = name
        self.prelude = prelude
        self.block = None if block is None else list(block)

    @property
    def rules(self) -> list[QualifiedRule]:
        return [item for item in self.block or [] if isinstance(item, QualifiedRule)]

    def __repr__(self) -> str:
        block = "None" if self.block is None else "{...}"
        return f"AtRule({self.name!r}, prelude={self.prelude!r}, block={block})"

Rule = TypeAliasType("Rule", Union[Declaration, QualifiedRule, AtRule])
Declarations = TypeAliasType(
    "Declarations",
    Union[str, Mapping[str, Union[str, int, float, Token]], Iterable[Declaration]],
)

class Stylesheet:
    """Ordered collection of top level rules."""

    def __init__(self, rules: Iterable[QualifiedRule | AtRule] | None = None) -> None:
        self._css_rules_: list[QualifiedRule | AtRule] = list(rules or [])

    @property
    def css_rules(self) -> list[QualifiedRule | AtRule]:
        return self._css_rules_

    def append(self, rule: QualifiedRule | AtRule) -> Stylesheet:
        self._css_rules_.append(rule)
        return self

    def extend(self, rules: Iterable[QualifiedRule | AtRule]) -> Stylesheet:
        self._css_rules_.extend(rules)
        return self

    def __iter__(self) -> Iterator[QualifiedRule | AtRule]:
        return iter(self._css_rules_)

    def __len__(self) -> int:
        return len(self._css_rules_)

    def __str__(self) -> str:
        from shellcss.css.render import render

        return render(self)

    def __repr__(self) -> str:
        sep = "\n  "
        return f"""Stylesheet(
  {sep.join(repr(rule) for rule in self.css_rules)}
)"""

Tokens = list[Token] | str

class Parse:
    @staticmethod
    def normalize(_input_: Tokens) -> list[Token]:
        if isinstance(_input_, list):
            return list(_input_)
        elif isinstance(_input_, str):
            return Lexer(_input_).process()
        raise TypeError(
            "Unexpected input to parse. Expected string or list of tokens."
        )

    @staticmethod
    def parse_declaration(source: Tokens) -> Declaration:
        parser = Parser(source)
        parser.skip_whitespace()
        if not isinstance(parser.peek(), Ident):
            raise ParseError("Missing ident for declaration")
        decl = parser.consume_declaration()
        if decl is None:
            raise ParseError(f"Invalid declaration: {parser.errors[-1]}")
        parser.skip_whitespace()
        if not isinstance(parser.peek(), EOF):
            raise ParseError("Expected a single declaration")
        return decl

    @staticmethod
    def parse_decl_list(source: Tokens) -> list[Declaration]:
        parser = Parser(source)
        decls = parser.consume_decl_list()
        if parser.errors:
            raise parser.errors[0]
        return decls

    @staticmethod
    def declarations(block: Declarations) -> list[Declaration]:
        """Normalize anything accepted as a declaration block into `Declaration`s."""
        if isinstance(block, str):
            return Parse.parse_decl_list(block)
        elif isinstance(block, Mapping):
            return [Declaration.new(name, value) for name, value in block.items()]

        decls = list(block)
        for decl in decls:
            if not isinstance(decl, Declaration):
                raise TypeError(f"Expected a Declaration, got {type(decl).__name__}")
        return decls


class Parser:
    def __init__(self, tokens: Tokens) -> None:
        self.tokens: list[Token] = Parse.normalize(tokens)
        self.index = 0
        self.errors: list[Exception] = []

    def peek(self, amount: int = 1) -> Token:
        index = self.index + amount - 1
        if index < len(self.tokens):
            return self.tokens[index]
        return EOF()

    def next(self) -> Token:
        if self.index < len(self.tokens):
            self.index += 1
            return self.tokens[self.index - 1]
        return EOF()

    def reconsume(self):
        self.index -= 1

    def error(self, error: Exception):
        self.errors.append(error)

    def skip_whitespace(self):
        while isinstance(self.peek(), (Whitespace, Comment)):
            self.next()

    def consume_value(self) -> list[Token]:
        """Consume tokens up to the next top level `;` or the end of input.

        Brackets and functions nest, so `url("a;b")` or `calc(1px;)` never
        end a declaration early.
        """
        value = []
        depth: list[type] = []
        while True:
            next = self.peek()
            if isinstance(next, EOF):
                if depth:
                    self.error(ParseError("Block was not closed"))
                return value
            elif isinstance(next, Semicolon) and not depth:
                return value

            self.next()
            if isinstance(next, (LParantheses, LSquareBracket, LCurlyBracket)):
                depth.append(next.alt)
            elif isinstance(next, Function):
                depth.append(RParantheses)
            elif depth and isinstance(next, depth[-1]):
                depth.pop()
            value.append(next)

    def consume_declaration(self) -> Declaration | None:
        next = self.next()
        decl = Declaration(next.raw)
        self.skip_whitespace()

        if not isinstance(self.peek(), Colon):
            self.error(ParseError(f"Expected a colon after {decl.name!r}"))
            self.consume_value()
            return None

        self.next()
        self.skip_whitespace()
        decl.value = self.consume_value()
        while decl.value and isinstance(decl.value[-1], (Whitespace, Comment)):
            decl.value.pop()

        if (
            len(decl.value) >= 2
            and isinstance(decl.value[-2], Delim) and decl.value[-2].raw == "!"
            and isinstance(decl.value[-1], Ident) and decl.value[-1].raw.lower() == "important"
        ):
            decl.value = decl.value[:-2]
            decl.important = True
            while decl.value and isinstance(decl.value[-1], Whitespace):
                decl.value.pop()

        if not decl.value:
            self.error(ParseError(f"Declaration {decl.name!r} has no value"))
            return None
        return decl

    def consume_decl_list(self) -> list[Declaration]:
        decls = []
        while True:
            next = self.next()
            if isinstance(next, (Whitespace, Semicolon, Comment)):
                continue
            elif isinstance(next, EOF):
                return decls
            elif isinstance(next, Ident):
                self.reconsume()
                if (decl := self.consume_declaration()) is not None:
                    decls.append(decl)
            else:
                self.error(ParseError(f"Invalid declaration list near {str(next)!r}"))
                self.consume_value()
