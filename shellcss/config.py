"""Design system settings.

A `Settings` value is validated once, from the defaults or from a YAML file, and is
read-only afterwards, so the same instance can be handed to any number of
expansions.

```yaml
base-font-size: 16
breakpoints:        # order matters, it is the order `all` expands in
  palm: 719
  lap: 720
  desk: 1024
z-layers:
  header: 3
  modal-elements:
    overlay: 100
    close-button: 102
```
"""
from __future__ import annotations
import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError, field_validator

from shellcss import maps, units
from shellcss.css.tokens import Dimension
from shellcss.errors import ConfigError

__all__ = [
    "DEFAULT_BREAKPOINTS",
    "DEFAULT_Z_LAYERS",
    "DEFAULT_SETTINGS",
    "Settings",
    "load_settings",
]

logger = logging.getLogger(__name__)

DEFAULT_BREAKPOINTS: dict[str, int] = {
    "palm": 719,
    "lap": 720,
    "desk": 1024,
    "wall": 1400,
}

DEFAULT_Z_LAYERS: dict[str, Any] = {
    "base": 0,
    "header": 3,
    "dropdown": 10,
    "modal-elements": {
        "overlay": 100,
        "dialog": 101,
        "close-button": 102,
    },
}

RESERVED_BREAKPOINTS = ("all",)

class Settings(BaseModel):
    """Base font size plus the breakpoint and z-index maps.

    Validated with pydantic; both maps are stored read-only once validated.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        populate_by_name=True,
        validate_default=True,
    )

    base_font_size: int | float = Field(default=units.BASE_FONT_SIZE, alias="base-font-size")
    breakpoints: dict[str, int | float] = Field(default_factory=lambda: dict(DEFAULT_BREAKPOINTS))
    z_layers: dict[str, StrictInt | dict[str, StrictInt]] = Field(
        default_factory=lambda: dict(DEFAULT_Z_LAYERS),
        alias="z-layers",
    )

    @field_validator("base_font_size", mode="before")
    @classmethod
    def validate_base_font_size(cls, v: Any) -> int | float:
        if not units.is_numeric(v) or units.strip_unit(v) <= 0:
            raise ValueError(f"base font size must be a positive number, got {v!r}")
        return units.strip_unit(v)

    @field_validator("breakpoints", mode="before")
    @classmethod
    def validate_breakpoints(cls, v: Any) -> Any:
        """Names must be usable in selectors and values must read as pixels, `720` or `"720px"`."""
        if not isinstance(v, Mapping):
            return v
        breakpoints = {}
        for name, value in v.items():
            if not isinstance(name, str) or name == "":
                raise ValueError(f"Breakpoint names must be non empty strings, got {name!r}")
            if name in RESERVED_BREAKPOINTS:
                raise ValueError(f"{name!r} is reserved and cannot name a breakpoint")
            if not units.is_numeric(value):
                raise ValueError(f"Breakpoint {name!r} must be a pixel value, got {value!r}")
            breakpoints[name] = units.strip_unit(value)
        return breakpoints

    @field_validator("z_layers", mode="before")
    @classmethod
    def normalize_layer_names(cls, v: Any) -> Any:
        # YAML reads `1:` as an int key, layer names are always looked up as text
        if not isinstance(v, Mapping):
            return v
        return {
            str(layer): {str(nested): index for nested, index in value.items()}
            if isinstance(value, Mapping) else value
            for layer, value in v.items()
        }

    @field_validator("breakpoints")
    @classmethod
    def freeze_breakpoints(cls, v: dict[str, int | float]) -> Mapping[str, int | float]:
        return MappingProxyType(v)

    @field_validator("z_layers")
    @classmethod
    def freeze_z_layers(cls, v: dict[str, Any]) -> Mapping[str, int | Mapping[str, int]]:
        return MappingProxyType({
            layer: MappingProxyType(value) if isinstance(value, dict) else value
            for layer, value in v.items()
        })

    def __hash__(self) -> int:
        return hash((
            self.base_font_size,
            tuple(self.breakpoints.items()),
            tuple(
                (layer, tuple(value.items()) if isinstance(value, Mapping) else value)
                for layer, value in self.z_layers.items()
            ),
        ))

    @staticmethod
    def from_dict(data: Any) -> Settings:
        """Build settings from a parsed config document. Keys may use `-` or `_`."""
        try:
            return Settings.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Settings validation failed:\n{e}") from e

    @property
    def breakpoint_names(self) -> list[str]:
        return list(self.breakpoints)

    def em(self, value: Any, context: Any = None) -> Dimension:
        return units.em(value, self.base_font_size if context is None else context)

    def rem(self, value: Any) -> Dimension:
        return units.rem(value, self.base_font_size)

    def breakpoint(self, name: str) -> Dimension:
        return maps.breakpoint(name, self.breakpoints)

    def z(self, layer: str, nested: str | None = None) -> int:
        return maps.z(layer, nested, layers=self.z_layers)

DEFAULT_SETTINGS = Settings()

def load_settings(path: Path | str) -> Settings:
    """
    Load and validate a YAML settings file.
    Raises FileNotFoundError if file missing.
    Raises ConfigError if the YAML is invalid or doesn't describe settings.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found at: {path}")

    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax in settings file: {e}") from e

    if data is None:
        data = {}
    settings = Settings.from_dict(data)
    logger.info(
        "Loaded settings from %s (%d breakpoints, %d z-index layers)",
        path,
        len(settings.breakpoints),
        len(settings.z_layers),
    )
    return settings
