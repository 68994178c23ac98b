"""Resolve symbolic design token names to their configured values.

Lookups fail loudly: an unknown name is a configuration mistake and must stop the
build instead of producing a rule that silently never matches.
"""
from __future__ import annotations
from collections.abc import Mapping
from typing import Union

from typing_extensions import TypeAliasType

from shellcss.css.tokens import Dimension
from shellcss.errors import NestedZLayer, UnknownBreakpoint, UnknownZLayer
from shellcss.units import em

__all__ = [
    "BREAKPOINT_CONTEXT",
    "BreakpointMap",
    "ZLayerMap",
    "breakpoint",
    "z",
]

BREAKPOINT_CONTEXT = 16
"""Breakpoints are converted against the browser default font size, never the
configured base, since media queries ignore the page's font size."""

BreakpointMap = TypeAliasType("BreakpointMap", Mapping[str, Union[int, float]])
ZLayerMap = TypeAliasType("ZLayerMap", Mapping[str, Union[int, Mapping[str, int]]])

def breakpoint(name: str, breakpoints: BreakpointMap) -> Dimension:
    """The breakpoint's pixel width as an `em` value usable in a media query."""
    if name not in breakpoints:
        raise UnknownBreakpoint(name)
    return em(breakpoints[name], BREAKPOINT_CONTEXT)

def z(layer: str, nested: str | None = None, *, layers: ZLayerMap) -> int:
    """Look up a z-index by layer name, or by layer and sub layer name.

    `z("header")` reads a plain layer and `z("modal-elements", "close-button")`
    reads one level into a nested layer.
    """
    if layer not in layers:
        raise UnknownZLayer(layer)
    value = layers[layer]

    if nested is None:
        if isinstance(value, Mapping):
            raise NestedZLayer(layer, list(value))
        return value

    if not isinstance(value, Mapping) or nested not in value:
        raise UnknownZLayer(layer, nested)
    return value[nested]
