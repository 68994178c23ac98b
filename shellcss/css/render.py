"""Serialize the rule model to CSS text."""

from __future__ import annotations
from collections.abc import Iterable

from shellcss.css.parser import AtRule, Declaration, QualifiedRule, Rule, Stylesheet

__all__ = ["render", "render_rule", "render_declaration"]

INDENT = "  "

def render_declaration(decl: Declaration) -> str:
    return f"{decl.name}: {decl.text}{' !important' if decl.important else ''};"

def _render_block(block: Iterable[Rule], depth: int, indent: str) -> list[str]:
    lines = []
    for item in block:
        lines.extend(_render(item, depth, indent))
    return lines

def _render(rule: Rule, depth: int, indent: str) -> list[str]:
    pad = indent * depth
    if isinstance(rule, Declaration):
        return [pad + render_declaration(rule)]
    elif isinstance(rule, QualifiedRule):
        return [
            f"{pad}{rule.prelude} {{",
            *_render_block(rule.block, depth + 1, indent),
            f"{pad}}}",
        ]
    elif isinstance(rule, AtRule):
        head = f"{pad}@{rule.name}{' ' + rule.prelude if rule.prelude else ''}"
        if rule.block is None:
            return [head + ";"]
        return [
            head + " {",
            *_render_block(rule.block, depth + 1, indent),
            f"{pad}}}",
        ]
    raise TypeError(f"Cannot render {type(rule).__name__}")

def render_rule(rule: Rule, indent: str = INDENT) -> str:
    """Render a single rule, declaration or at-rule without a trailing newline."""
    return "\n".join(_render(rule, 0, indent))

def render(rules: Stylesheet | Iterable[QualifiedRule | AtRule], indent: str = INDENT) -> str:
    """Render top level rules separated by a blank line."""
    blocks = [render_rule(rule, indent) for rule in rules]
    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"
