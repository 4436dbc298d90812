# helpgrid/config/settings.py
# Configuration management for helpgrid: layout defaults, theme & JSON-backed persistence

from __future__ import annotations

import os
from dataclasses import dataclass, asdict, replace, fields
from pathlib import Path
from typing import Dict, Any, Optional, cast

import typer

from ..core.exceptions import JSONParsingError, SettingsValidationError

HOME_ENV_VAR = "HELPGRID_HOME"


# * Default settings dataclass; caller options are merged over these per render
@dataclass
class HelpSettings:
    # total rendered line width; longer text is word-wrapped
    line_length: int = 1000
    # width of the colored title band
    title_length: int = 15
    # below this many free columns, option descriptions get their own row
    multiline_threshold: int = 50

    # when False, command name & description are printed above usage
    auto_help: bool = True

    # display
    color: bool = True
    theme: str = "classic"

    def __post_init__(self) -> None:
        # Validate settings values after initialization.
        for name in ("line_length", "title_length"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

        if isinstance(self.multiline_threshold, bool) or not isinstance(self.multiline_threshold, int):
            raise ValueError(
                f"multiline_threshold must be an integer, got {type(self.multiline_threshold).__name__}"
            )
        if self.multiline_threshold < 0:
            raise ValueError(f"multiline_threshold must be >= 0, got {self.multiline_threshold}")

        # strict bool validation (no coercion)
        for name in ("auto_help", "color"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(
                    f"{name} must be a boolean (true/false), got {type(value).__name__}: {value}"
                )

        from ..ui.theming.theme_definitions import THEMES

        if self.theme not in THEMES:
            valid = ", ".join(sorted(THEMES))
            raise ValueError(f"theme must be one of {valid}, got '{self.theme}'")


# * Default config location, honoring HELPGRID_HOME
def default_config_path() -> Path:
    home = os.environ.get(HOME_ENV_VAR)
    base = Path(home) if home else Path.home() / ".helpgrid"
    return base / "config.json"


# * Settings management class w/ JSON persistence for loading, saving, & modifying settings
class SettingsManager:
    def __init__(self, config_path: Optional[Path] = None):
        self._explicit_path = config_path
        self._settings: HelpSettings | None = None

    @property
    def config_path(self) -> Path:
        return self._explicit_path or default_config_path()

    @config_path.setter
    def config_path(self, value: Path) -> None:
        self._explicit_path = value
        self._settings = None

    # load settings from file or return defaults
    def load(self) -> HelpSettings:
        if self._settings is not None:
            return self._settings

        from ..spec_io.generics import read_json_safe

        if self.config_path.exists():
            try:
                data = read_json_safe(self.config_path)
                self._settings = HelpSettings(**data)
            except (JSONParsingError, TypeError, ValueError) as e:
                typer.echo(f"Warning: Invalid config file {self.config_path}: {e}", err=True)
                typer.echo("Using default settings", err=True)
                self._settings = HelpSettings()
        else:
            self._settings = HelpSettings()

        return self._settings

    # save settings to file
    def save(self, settings: HelpSettings) -> None:
        from ..spec_io.generics import write_json_safe

        write_json_safe(asdict(settings), self.config_path)
        self._settings = settings

    # get a specific setting value
    def get(self, key: str) -> Any:
        settings = self.load()
        return getattr(settings, key, None)

    # set a specific setting value; validation reruns through __post_init__
    def set(self, key: str, value: Any) -> None:
        if key not in known_keys():
            raise SettingsValidationError(f"Unknown setting: {key}", key, value)
        try:
            updated = replace(self.load(), **{key: value})
        except ValueError as e:
            raise SettingsValidationError(str(e), key, value) from e
        self.save(updated)

    # reset to default settings
    def reset(self) -> None:
        self.save(HelpSettings())

    # list all settings as a dictionary
    def list_settings(self) -> Dict[str, Any]:
        return asdict(self.load())


# * Names of all settings fields
def known_keys() -> set[str]:
    return {f.name for f in fields(HelpSettings)}


# global settings manager instance
settings_manager = SettingsManager()


# * Retrieve settings preferring injected object from Typer context
def get_settings(ctx: typer.Context, provided: Optional[HelpSettings] = None) -> HelpSettings:
    if provided is not None:
        return provided

    # search ctx & root for HelpSettings
    candidates: list[typer.Context] = [ctx]
    find_root = getattr(ctx, "find_root", None)
    root_ctx = cast(Optional[typer.Context], find_root()) if callable(find_root) else None
    if root_ctx is not None:
        candidates.append(root_ctx)

    for c in candidates:
        obj = getattr(c, "obj", None)
        if isinstance(obj, HelpSettings):
            return obj

    # fallback to loading from disk
    return settings_manager.load()
