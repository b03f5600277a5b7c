"""Fallback profiles: the candidate-name tables driving index construction.

A profile has three sections, each mapping a key to an ordered list of
family names:

`cjk`
: Han fallbacks per CJK variant (`simplified`, `traditional`, `japanese`,
  `korean`). The `none` slot always mirrors `traditional`.

`scripts`
: Fallbacks per script, keyed by ISO 15924 tag (`Latn`) or name (`latin`).

`generic`
: Candidates for each generic family (`sans-serif`, `emoji`, ...). Only the
  first installed candidate is used.

Profiles can be loaded from YAML. The optional top-level `extends` key names
the platform whose built-in profile is used as a base (`windows`, `macos`,
`ios`, `android`, `unix`, `other`) or `none` to start empty; it defaults to
the current platform.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
import yaml

from fontindex.defaults import defaults_for
from fontindex.exceptions import ProfileError
from fontindex.platform import Os, current_os
from fontindex.types import Cjk, GenericFamily, Script


def _coerce_names(value: Any) -> Any:
    if isinstance(value, str):
        return [value]
    if value is None:
        return []
    return value


def _coerce_table(enum_cls: type[Enum], value: Any) -> Any:
    """Parse table keys through the enum and accept a bare string as a one-name list."""
    if not isinstance(value, dict):
        return value
    return {
        enum_cls.parse(key): _coerce_names(names)  # type: ignore[attr-defined]
        for key, names in value.items()
    }


class FallbackProfile(BaseModel):
    """Ordered candidate family names per CJK variant, script and generic family."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    cjk: dict[Cjk, list[str]] = Field(default_factory=dict)
    scripts: dict[Script, list[str]] = Field(default_factory=dict)
    generic: dict[GenericFamily, list[str]] = Field(default_factory=dict)

    @field_validator("cjk", mode="before")
    @classmethod
    def _parse_cjk(cls, value: Any) -> Any:
        value = _coerce_table(Cjk, value)
        if isinstance(value, dict) and Cjk.NONE in value:
            raise ValueError("the 'none' CJK slot mirrors 'traditional' and cannot be set")
        return value

    @field_validator("scripts", mode="before")
    @classmethod
    def _parse_scripts(cls, value: Any) -> Any:
        return _coerce_table(Script, value)

    @field_validator("generic", mode="before")
    @classmethod
    def _parse_generic(cls, value: Any) -> Any:
        return _coerce_table(GenericFamily, value)

    def merge(self, other: FallbackProfile) -> FallbackProfile:
        """Return a profile where ``other``'s entries replace this profile's."""
        return FallbackProfile(
            cjk={**self.cjk, **other.cjk},
            scripts={**self.scripts, **other.scripts},
            generic={**self.generic, **other.generic},
        )


def profile_for(platform: Os | str | None = None) -> FallbackProfile:
    """Return the built-in profile for ``platform`` (default: this system)."""
    resolved = Os.parse(platform) if platform is not None else current_os()
    return FallbackProfile.model_validate(defaults_for(resolved))


def load_profile(path: Path) -> FallbackProfile:
    """Load a YAML profile, merged onto the platform it extends."""
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ProfileError(f"Unable to read fallback profile '{path}'.") from exc
    except yaml.YAMLError as exc:
        raise ProfileError(f"Fallback profile '{path}' is not valid YAML.") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ProfileError(f"Fallback profile '{path}' must be a mapping.")

    payload = dict(raw)
    extends = payload.pop("extends", None)
    try:
        overrides = FallbackProfile.model_validate(payload)
    except ValidationError as exc:
        raise ProfileError(f"Invalid fallback profile '{path}': {exc}") from exc

    if isinstance(extends, str) and extends.strip().casefold() == "none":
        return overrides
    try:
        base = profile_for(extends)
    except ValueError as exc:
        raise ProfileError(f"Invalid 'extends' value in '{path}': {extends!r}") from exc
    return base.merge(overrides)


__all__ = ["FallbackProfile", "load_profile", "profile_for"]
