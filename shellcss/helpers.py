"""Helper classes.

Single purpose classes prefixed `h-`. Each helper can also be generated per
breakpoint, `.h-hide-from-lap`, `.h-hide-visually-up-to-palm`, ...
"""
from __future__ import annotations
from collections.abc import Iterable
from typing import Any

from shellcss.breakpoints import apply_at_breakpoints
from shellcss.config import DEFAULT_SETTINGS, Settings
from shellcss.css.parser import AtRule, Parse, QualifiedRule

__all__ = ["PREFIX", "HELPERS", "helper", "build"]

PREFIX = "h"

HELPERS: dict[str, dict[str, str]] = {
    "hide": {
        "display": "none !important",
    },
    # Hidden on screen, still read out by screen readers
    "hide-visually": {
        "border": "0",
        "clip": "rect(0 0 0 0)",
        "height": "1px",
        "margin": "-1px",
        "overflow": "hidden",
        "padding": "0",
        "position": "absolute",
        "width": "1px",
    },
    "unhide-visually": {
        "clip": "auto",
        "height": "auto",
        "margin": "0",
        "overflow": "visible",
        "position": "static",
        "width": "auto",
    },
}

def helper(
    name: str,
    breakpoints: Any = None,
    settings: Settings = DEFAULT_SETTINGS,
    prefix: str = PREFIX,
) -> list[QualifiedRule | AtRule]:
    """The helper class followed by its breakpoint variants, if any were asked for."""
    if name not in HELPERS:
        raise KeyError(f"Unknown helper {name!r}, expected one of: {', '.join(HELPERS)}")

    selector = f".{prefix}-{name}"
    rules: list[QualifiedRule | AtRule] = [
        QualifiedRule(selector, Parse.declarations(HELPERS[name]))
    ]
    if breakpoints is not None:
        rules.extend(apply_at_breakpoints(selector, breakpoints, HELPERS[name], settings))
    return rules

def build(
    breakpoints: Any = None,
    settings: Settings = DEFAULT_SETTINGS,
    names: Iterable[str] | None = None,
    prefix: str = PREFIX,
) -> list[QualifiedRule | AtRule]:
    rules = []
    for name in names or HELPERS:
        rules.extend(helper(name, breakpoints, settings, prefix))
    return rules
