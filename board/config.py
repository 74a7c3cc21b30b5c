"""
GridPick — board/config.py
Controller configuration powered by Pydantic, with an optional TOML source.
=============================================================================================
Version:     0.1
Stack:       Python 3.11 | Pydantic v2 | tomllib
Status:      Validation layer for GridInputController options.
"""

import tomllib
from pathlib import Path
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_CURSOR_CHARACTER = "X"
DEFAULT_CURSOR_INTERVAL = 500  # ms
DEFAULT_HOW_TO_USE_MESSAGE = (
    "Use arrow keys to move, SPACE to select cell, and RETURN to finish selection"
)


class ConfigurationError(ValueError):
    """Raised when controller options fail validation."""


# ================================================================================
# SCHEMAS
# ================================================================================

class ControllerConfig(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra="forbid")

    width: int = Field(gt=0)
    height: int = Field(gt=0)
    initial_value: Any
    callback: Callable[[int, int, Any], Any]
    cursor_character: str = Field(default=DEFAULT_CURSOR_CHARACTER, min_length=1)
    cursor_interval: int = Field(default=DEFAULT_CURSOR_INTERVAL, gt=0)
    how_to_use_message: str = DEFAULT_HOW_TO_USE_MESSAGE

    @field_validator("cursor_character")
    @classmethod
    def _single_line_glyph(cls, value: str) -> str:
        if "\n" in value or "\r" in value:
            raise ValueError("cursor_character must be a single line")
        return value


class BoardSection(BaseModel):
    """The [board] table of a TOML config file. Layout options only."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    width: int
    height: int
    cursor_character: str = DEFAULT_CURSOR_CHARACTER
    cursor_interval: int = DEFAULT_CURSOR_INTERVAL
    how_to_use_message: str = DEFAULT_HOW_TO_USE_MESSAGE


# ================================================================================
# BUILDERS
# ================================================================================

def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "config"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def build_config(**options: Any) -> ControllerConfig:
    """Validate raw keyword options into a ControllerConfig.

    Raises ConfigurationError instead of pydantic's ValidationError so callers
    only need to know about one failure type.
    """
    try:
        return ControllerConfig(**options)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid controller configuration: {_describe(exc)}") from exc


def load_config(
    path: Path,
    *,
    initial_value: Any,
    callback: Callable[[int, int, Any], Any],
    overrides: Optional[dict] = None,
) -> ControllerConfig:
    """Read the [board] table of a TOML file and combine it with the caller's
    initial value and cell callback, which cannot live in a file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Board config not found: {path}")

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Malformed board config {path}: {exc}") from exc

    if "board" not in data:
        raise ConfigurationError(f"Board config {path} has no [board] table")

    try:
        section = BoardSection(**data["board"])
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [board] table in {path}: {_describe(exc)}") from exc

    options = section.model_dump()
    options.update(overrides or {})
    return build_config(initial_value=initial_value, callback=callback, **options)
