# helpgrid/spec_io/specs.py
# Loading help spec files & package metadata into the help data model

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..core.types import HelpConfig, PackageMetadata
from .generics import read_json_safe


# * Read package metadata (package.json-style: top-level name & description)
def load_package_metadata(path: Path) -> PackageMetadata:
    return PackageMetadata.from_mapping(read_json_safe(path))


# * Load a JSON help spec & normalize it against settings; explicit overrides win
def load_help_spec(
    path: Path,
    settings: Any = None,
    pkg_path: Path | None = None,
    **overrides: Any,
) -> HelpConfig:
    data = read_json_safe(path)
    if pkg_path is not None:
        overrides["pkg"] = load_package_metadata(pkg_path)
    return HelpConfig.from_dict(data, settings, **overrides)
