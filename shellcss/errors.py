"""Errors raised while resolving design tokens and expanding breakpoints.

Every error is fatal to the stylesheet being built. Nothing here is meant to be
caught and papered over with a fallback value.
"""

__all__ = [
    "ShellError",
    "InvalidArgument",
    "UnknownBreakpoint",
    "UnknownZLayer",
    "NestedZLayer",
    "InvalidDescriptor",
    "ConfigError",
]

class ShellError(Exception): pass

class InvalidArgument(ShellError, TypeError):
    """A number was required but something else was given."""

class UnknownBreakpoint(ShellError, LookupError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown breakpoint {name!r}")

    def __str__(self) -> str:
        return self.args[0]

class UnknownZLayer(ShellError, LookupError):
    def __init__(self, layer: str, nested: str | None = None):
        self.layer = layer
        self.nested = nested
        name = layer if nested is None else f"{layer}.{nested}"
        super().__init__(f"Unknown z-index layer {name!r}")

    def __str__(self) -> str:
        return self.args[0]

class NestedZLayer(ShellError):
    """The layer holds sub layers so a sub layer name is required."""

    def __init__(self, layer: str, options: list[str]):
        self.layer = layer
        self.options = options
        super().__init__(
            f"z-index layer {layer!r} is nested, expected one of: {', '.join(options)}"
        )

class InvalidDescriptor(ShellError, ValueError): pass

class ConfigError(ShellError, ValueError): pass
