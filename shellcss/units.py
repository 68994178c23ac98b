"""Pixel to relative unit conversion.

Values may be plain python numbers, numeric CSS tokens (`Dimension`, `Number`,
`Percentage`) or strings that read as a single numeric token such as `"16px"`.
"""
from __future__ import annotations
from typing import Any

from shellcss.css.lexer import Lexer, ParseError
from shellcss.css.tokens import Dimension, Number, Percentage
from shellcss.errors import InvalidArgument

__all__ = ["BASE_FONT_SIZE", "is_numeric", "strip_unit", "em", "rem"]

BASE_FONT_SIZE = 16
"""Font size in pixels that `1rem` stands for unless configured otherwise."""

def _as_number(value: Any) -> Number | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, Number):
        return value
    if isinstance(value, (int, float)):
        return Number(value)
    if isinstance(value, str):
        try:
            tokens = Lexer(value.strip()).process()
        except ParseError:
            return None
        if len(tokens) == 1 and isinstance(tokens[0], Number):
            return tokens[0]
    return None

def is_numeric(value: Any) -> bool:
    return _as_number(value) is not None

def strip_unit(number: Any) -> Any:
    """The bare magnitude of a number, `16px` -> `16`.

    Unitless numbers come back unchanged and anything that isn't a number is
    returned as is, so this is safe to call on unchecked input.
    """
    if isinstance(number, (int, float)) and not isinstance(number, bool):
        return number
    parsed = _as_number(number)
    if parsed is None:
        return number
    return parsed.value

def _divide(value: Any, context: Any, unit: str) -> Dimension:
    divisor = strip_unit(context)
    if divisor == 0:
        raise InvalidArgument(f"Cannot convert {value!r} to {unit} against a context of 0")
    return Dimension(strip_unit(value) / divisor, unit=unit)

def em(value: Any, context: Any = BASE_FONT_SIZE) -> Dimension:
    """Convert a pixel value to `em` relative to `context`.

    Args
        value (int | float | str | Number): Size in pixels, with or without the `px` unit.
        context (int | float | str | Number): Font size in pixels that `1em` stands for.

    Raises
        InvalidArgument: `value` or `context` is not a number.
    """
    if not is_numeric(value):
        raise InvalidArgument(f"em() expects a number for value, got {value!r}")
    if not is_numeric(context):
        raise InvalidArgument(f"em() expects a number for context, got {context!r}")
    return _divide(value, context, "em")

def rem(value: Any, base_font_size: Any = BASE_FONT_SIZE) -> Dimension:
    """Convert a pixel value to `rem` against the root font size.

    Unlike `em` there is no per call context: `base_font_size` is the configured
    root size, which `Settings.rem` fills in.
    """
    if not is_numeric(value):
        raise InvalidArgument(f"rem() expects a number, got {value!r}")
    if not is_numeric(base_font_size):
        raise InvalidArgument(f"rem() expects a numeric base font size, got {base_font_size!r}")
    return _divide(value, base_font_size, "rem")
