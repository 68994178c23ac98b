"""Shell design system: unit helpers, design token lookups and breakpoint
variants of classes, rendered as plain CSS.

    from shellcss import Settings, apply_at_breakpoints, render

    settings = Settings(breakpoints={"palm": 719, "lap": 720, "desk": 1024})
    print(render(apply_at_breakpoints(".h-hide", "all", "display: none", settings)))
"""
from shellcss.breakpoints import (
    AllBreakpoints,
    GeneratedRule,
    Limit,
    NamedBreakpoint,
    NumericBreakpoint,
    apply_at_breakpoints,
    expand,
    parse_descriptors,
)
from shellcss.config import DEFAULT_SETTINGS, Settings, load_settings
from shellcss.css import Declaration, Stylesheet, render
from shellcss.errors import (
    ConfigError,
    InvalidArgument,
    InvalidDescriptor,
    NestedZLayer,
    ShellError,
    UnknownBreakpoint,
    UnknownZLayer,
)
from shellcss.maps import breakpoint, z
from shellcss.units import em, rem, strip_unit

__version__ = "0.1.0"

__all__ = [
    "AllBreakpoints",
    "GeneratedRule",
    "Limit",
    "NamedBreakpoint",
    "NumericBreakpoint",
    "apply_at_breakpoints",
    "expand",
    "parse_descriptors",
    "DEFAULT_SETTINGS",
    "Settings",
    "load_settings",
    "Declaration",
    "Stylesheet",
    "render",
    "ConfigError",
    "InvalidArgument",
    "InvalidDescriptor",
    "NestedZLayer",
    "ShellError",
    "UnknownBreakpoint",
    "UnknownZLayer",
    "breakpoint",
    "z",
    "em",
    "rem",
    "strip_unit",
]
