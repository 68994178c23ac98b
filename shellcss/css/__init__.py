"""
The small slice of CSS the design system needs to read and write.

References:
    - [syntax](https://www.w3.org/TR/css-syntax-3/)
    - [@media](https://developer.mozilla.org/en-US/docs/Web/CSS/@media)

<at-rule prelude>
    <ruleset>
        <selector/> <block>
            <property/>: <value/>;
        </block>
    </ruleset>
</at-rule>
"""
from shellcss.css.lexer import Lexer, ParseError
from shellcss.css.parser import (
    AtRule,
    Declaration,
    Declarations,
    Parse,
    QualifiedRule,
    Rule,
    Stylesheet,
)
from shellcss.css.render import render, render_rule

__all__ = [
    "Lexer",
    "ParseError",
    "AtRule",
    "Declaration",
    "Declarations",
    "Parse",
    "QualifiedRule",
    "Rule",
    "Stylesheet",
    "render",
    "render_rule",
]
