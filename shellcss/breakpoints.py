"""Breakpoint expansion.

Turns a class name and a list of breakpoints into one media query scoped copy of
the class per breakpoint:

    apply_at_breakpoints(".h-hide-visually", ["lap", (900, "max")], "display: none")

    @media (min-width: 45em) {
      .h-hide-visually-from-lap {
        display: none;
      }
    }

    @media (max-width: 56.25em) {
      .h-hide-visually-up-to-900 {
        display: none;
      }
    }

Breakpoints are given loosely, the way they read best at the call site:

    "lap"                   one named breakpoint, min-width
    900                     one pixel width, min-width
    ("lap", "max")          one breakpoint with an explicit limit
    ["lap", ("desk", "max"), 900]
    "all"                   every configured breakpoint, in configured order

`palm` covers the range from zero up to its width, so it always expands to a
max-width rule whatever limit is asked for.
"""
from __future__ import annotations
import logging
from collections.abc import Callable, Sequence
from copy import deepcopy
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Union

from typing_extensions import TypeAliasType

from shellcss.config import DEFAULT_SETTINGS, Settings
from shellcss.css.parser import AtRule, Declarations, Parse, QualifiedRule
from shellcss.css.tokens import Dimension, Number, format_number
from shellcss.errors import InvalidDescriptor
from shellcss.maps import BREAKPOINT_CONTEXT
from shellcss.units import em, is_numeric, strip_unit

__all__ = [
    "Limit",
    "NamedBreakpoint",
    "NumericBreakpoint",
    "AllBreakpoints",
    "Descriptor",
    "GeneratedRule",
    "ALL",
    "PALM",
    "parse_descriptors",
    "expand",
    "apply_at_breakpoints",
]

logger = logging.getLogger(__name__)

ALL = "all"
PALM = "palm"

class Limit(Enum):
    MIN = "min"
    MAX = "max"

    @property
    def label(self) -> str:
        """The word joining the class name and the breakpoint in generated selectors."""
        return "from" if self is Limit.MIN else "up-to"

    @staticmethod
    def is_limit(value: Any) -> bool:
        return isinstance(value, Limit) or value in ("min", "max")

    @staticmethod
    def new(value: Limit | str) -> Limit:
        if isinstance(value, Limit):
            return value
        try:
            return Limit(value)
        except ValueError:
            raise InvalidDescriptor(f"Limit must be 'min' or 'max', got {value!r}") from None

@dataclass(frozen=True)
class NamedBreakpoint:
    name: str
    limit: Limit = Limit.MIN

    @property
    def token(self) -> str:
        return self.name

@dataclass(frozen=True)
class NumericBreakpoint:
    """A pixel width, bare (`900`) or unit bearing (`Dimension`, `"900px"`)."""

    value: int | float | Number | str
    limit: Limit = Limit.MIN

    @property
    def token(self) -> str:
        """The width as written, so `"900px"` names its class `-from-900px`."""
        if isinstance(self.value, str):
            return self.value.strip()
        elif isinstance(self.value, Number):
            return str(self.value)
        return format_number(self.value)

@dataclass(frozen=True)
class AllBreakpoints:
    limit: Limit = Limit.MIN

Descriptor = TypeAliasType("Descriptor", Union[NamedBreakpoint, NumericBreakpoint, AllBreakpoints])

@dataclass(frozen=True)
class GeneratedRule:
    """One expanded breakpoint: the media condition and the selector it scopes."""

    media: str
    selector: str
    descriptor: NamedBreakpoint | NumericBreakpoint
    value: Dimension

def _is_pair(value: Any) -> bool:
    return (
        isinstance(value, (list, tuple))
        and len(value) == 2
        and Limit.is_limit(value[1])
    )

def _descriptor(item: Any, limit: Limit = Limit.MIN) -> Descriptor:
    if isinstance(item, (NamedBreakpoint, NumericBreakpoint, AllBreakpoints)):
        return item
    elif _is_pair(item):
        token, limit = item
        if _is_pair(token) or isinstance(token, (NamedBreakpoint, NumericBreakpoint, AllBreakpoints)):
            raise InvalidDescriptor(f"Breakpoint pairs cannot be nested: {item!r}")
        return _descriptor(token, Limit.new(limit))
    elif isinstance(item, str):
        if item == "":
            raise InvalidDescriptor("Breakpoint names cannot be empty")
        if item == ALL:
            return AllBreakpoints(limit)
        if is_numeric(item):
            return NumericBreakpoint(item, limit)
        return NamedBreakpoint(item, limit)
    elif isinstance(item, Number) or (isinstance(item, (int, float)) and not isinstance(item, bool)):
        return NumericBreakpoint(item, limit)
    raise InvalidDescriptor(
        f"Expected a breakpoint name, a pixel width or a (breakpoint, limit) pair, got {item!r}"
    )

def parse_descriptors(raw: Any) -> list[Descriptor]:
    """Normalize loosely written breakpoints into a list of descriptors.

    Raises
        InvalidDescriptor: The input is empty, malformed, or mixes `all` with
            other breakpoints.
    """
    if isinstance(raw, (bytes, bytearray)):
        raise InvalidDescriptor(f"Expected breakpoints, got bytes {raw!r}")
    elif isinstance(raw, (str, int, float, Number, NamedBreakpoint, NumericBreakpoint, AllBreakpoints)):
        items = [raw]
    elif _is_pair(raw):
        # ("lap", "max") is one breakpoint with a limit, not two breakpoints
        items = [raw]
    elif isinstance(raw, Sequence):
        items = list(raw)
    else:
        raise InvalidDescriptor(f"Expected breakpoints, got {raw!r}")

    if not items:
        raise InvalidDescriptor("At least one breakpoint is required")

    descriptors = [_descriptor(item) for item in items]
    if len(descriptors) > 1 and any(isinstance(d, AllBreakpoints) for d in descriptors):
        raise InvalidDescriptor(f"{ALL!r} cannot be combined with other breakpoints: {raw!r}")
    return descriptors

def _generate(selector: str, descriptor: NamedBreakpoint | NumericBreakpoint, settings: Settings) -> GeneratedRule:
    limit = descriptor.limit
    if isinstance(descriptor, NamedBreakpoint) and descriptor.name == PALM:
        limit = Limit.MAX

    if isinstance(descriptor, NumericBreakpoint):
        value = em(strip_unit(descriptor.value), BREAKPOINT_CONTEXT)
    else:
        value = settings.breakpoint(descriptor.name)

    rule = GeneratedRule(
        media=f"({limit.value}-width: {value})",
        selector=f"{selector}-{limit.label}-{descriptor.token}",
        descriptor=replace(descriptor, limit=limit),
        value=value,
    )
    logger.debug("Expanded %s at %r to %s %s", selector, descriptor.token, rule.media, rule.selector)
    return rule

def expand(
    selector: str,
    breakpoints: Any,
    settings: Settings = DEFAULT_SETTINGS,
) -> list[GeneratedRule]:
    """Expand `selector` into one `GeneratedRule` per breakpoint, in the given order.

    Order is preserved since later rules win the cascade when more than one
    media condition matches.
    """
    rules = []
    for descriptor in parse_descriptors(breakpoints):
        if isinstance(descriptor, AllBreakpoints):
            rules.extend(
                _generate(selector, NamedBreakpoint(name, descriptor.limit), settings)
                for name in settings.breakpoint_names
            )
        else:
            rules.append(_generate(selector, descriptor, settings))
    return rules

def apply_at_breakpoints(
    selector: str,
    breakpoints: Any,
    declarations: Declarations | Callable[[GeneratedRule], Declarations],
    settings: Settings = DEFAULT_SETTINGS,
) -> list[AtRule]:
    """Wrap the declarations in a media query scoped copy of `selector` per breakpoint.

    Args
        selector (str): Class selector the generated ones derive from, `.h-hide`.
        breakpoints (Any): Breakpoints in any form `parse_descriptors` accepts.
        declarations (Declarations | Callable): A declaration string, a mapping of
            property to value, a list of `Declaration`s, or a callable returning
            one of those for each `GeneratedRule`.
        settings (Settings): Breakpoint map to resolve names against.

    Returns
        list[AtRule]: `@media` rules in breakpoint order.
    """
    shared = None if callable(declarations) else Parse.declarations(declarations)

    media = []
    for rule in expand(selector, breakpoints, settings):
        decls = Parse.declarations(declarations(rule)) if shared is None else deepcopy(shared)
        media.append(AtRule("media", rule.media, [QualifiedRule(rule.selector, decls)]))
    return media
