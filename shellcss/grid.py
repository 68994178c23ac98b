"""Grid width classes.

`.g-one-half { width: 50%; }` and friends, with per breakpoint variants such as
`.g-one-half-from-lap` so a column can change width as the viewport grows.
"""
from __future__ import annotations
from collections.abc import Iterable
from typing import Any

from shellcss.breakpoints import apply_at_breakpoints
from shellcss.config import DEFAULT_SETTINGS, Settings
from shellcss.css.parser import AtRule, Declaration, QualifiedRule
from shellcss.css.tokens import Percentage

__all__ = ["PREFIX", "FRACTIONS", "width", "build"]

PREFIX = "g"

FRACTIONS: dict[str, tuple[int, int]] = {
    "one-whole": (1, 1),
    "one-half": (1, 2),
    "one-third": (1, 3),
    "two-thirds": (2, 3),
    "one-quarter": (1, 4),
    "three-quarters": (3, 4),
}

def width(name: str) -> Declaration:
    """`width` declaration for a named fraction, `one-third` -> `width: 33.33333%`."""
    if name not in FRACTIONS:
        raise KeyError(f"Unknown grid fraction {name!r}, expected one of: {', '.join(FRACTIONS)}")
    numerator, denominator = FRACTIONS[name]
    return Declaration("width", [Percentage(numerator / denominator * 100)])

def build(
    breakpoints: Any = None,
    settings: Settings = DEFAULT_SETTINGS,
    names: Iterable[str] | None = None,
    prefix: str = PREFIX,
) -> list[QualifiedRule | AtRule]:
    """Width classes for every fraction, then their breakpoint variants.

    All base classes come first so a breakpoint variant always wins over the
    plain class it overrides.
    """
    names = list(names or FRACTIONS)
    rules: list[QualifiedRule | AtRule] = [
        QualifiedRule(f".{prefix}-{name}", [width(name)]) for name in names
    ]
    if breakpoints is not None:
        for name in names:
            rules.extend(apply_at_breakpoints(f".{prefix}-{name}", breakpoints, [width(name)], settings))
    return rules
