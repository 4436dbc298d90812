# helpgrid/core/measurements.py
# Measurement engine: column widths computed from the full flag & argument sets

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from rich.cells import cell_len

from .types import ArgSpec, FlagDescriptor, REQUIRED_MARKER, VARIADIC_MARKER

LONG_PREFIX = "--"
DEFAULT_LABEL = "(Default: "
ALIAS_COLUMN_WIDTH = 3  # "-x" plus a separating space
NAME_GAP = 1
DEFAULT_GAP = 1
ARG_GAP = 1


# * Column widths & flags-wide facts for one render call
@dataclass(frozen=True)
class Measurements:
    max_name_length: int = 0
    max_default_length: int = 0
    max_arg_length: int = 0
    alias_column_width: int = 0
    required_flags: frozenset[str] = field(default_factory=frozenset)
    any_multiple: bool = False
    any_required_arg: bool = False

    @property
    def any_required(self) -> bool:
        return bool(self.required_flags) or self.any_required_arg


# * Text shown inside "(Default: ...)"; booleans render lowercase
def format_default(value: Any) -> str:
    if value is True:
        return "true"
    if value is False:
        return "false"
    return str(value)


# * Full default annotation text for a flag w/ a default value
def default_annotation(value: Any) -> str:
    return f"{DEFAULT_LABEL}{format_default(value)})"


# * Measure names, defaults, aliases & args in one pass over each mapping
def measure(flags: Mapping[str, FlagDescriptor], args: Mapping[str, str]) -> Measurements:
    longest_name = 0
    max_default = 0
    has_alias = False
    any_multiple = False
    required: set[str] = set()

    for name, descriptor in flags.items():
        longest_name = max(longest_name, cell_len(name))
        if descriptor.has_default:
            max_default = max(max_default, cell_len(default_annotation(descriptor.default)) + DEFAULT_GAP)
        has_alias = has_alias or descriptor.alias is not None
        any_multiple = any_multiple or descriptor.multiple
        # predicates are evaluated here, once per render
        if descriptor.required.evaluate():
            required.add(name)

    max_name = 0
    if flags:
        reserved = len(LONG_PREFIX) + NAME_GAP
        reserved += len(VARIADIC_MARKER) if any_multiple else 0
        reserved += len(REQUIRED_MARKER) if required else 0
        max_name = longest_name + reserved

    max_arg = 0
    any_required_arg = False
    for key in args:
        spec = ArgSpec.parse(key)
        max_arg = max(max_arg, cell_len(spec.display) + ARG_GAP)
        any_required_arg = any_required_arg or spec.required

    return Measurements(
        max_name_length=max_name,
        max_default_length=max_default,
        max_arg_length=max_arg,
        alias_column_width=ALIAS_COLUMN_WIDTH if has_alias else 0,
        required_flags=frozenset(required),
        any_multiple=any_multiple,
        any_required_arg=any_required_arg,
    )
