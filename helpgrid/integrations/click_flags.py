# helpgrid/integrations/click_flags.py
# Click/Typer command introspection: params -> flag descriptors & argument keys
#
# - Params are duck-typed; typer builds its commands on its own click-compatible classes

from __future__ import annotations

from typing import Any

from ..core.types import FlagDescriptor, REQUIRED_MARKER, VARIADIC_MARKER, flag

# click param type names -> type tags used by flag descriptors
_TYPE_NAMES = {
    "integer": "number",
    "integer range": "number",
    "float": "number",
    "float range": "number",
    "boolean": "boolean",
    "choice": "choice",
    "path": "path",
    "filename": "path",
}


def _type_name(param: Any) -> str:
    if getattr(param, "is_flag", False):
        return "boolean"
    return _TYPE_NAMES.get(getattr(param.type, "name", ""), "string")


# default value as shown in help; factories & empty values count as "no default"
def _default_value(param: Any) -> Any:
    default = param.default
    if default is None or callable(default):
        return None
    # boolean switches default to off; not worth annotating
    if getattr(param, "is_flag", False) and default is False:
        return None
    if isinstance(default, str) and not default:
        return None
    if isinstance(default, (list, tuple)):
        return ",".join(str(item) for item in default) or None
    # click stores an unset default as a sentinel object in newer releases
    if type(default).__name__.endswith("Sentinel"):
        return None
    return default


# long name w/o leading dashes, or the param name as a dashed fallback
def _long_name(option: Any) -> str:
    for opt in option.opts:
        if opt.startswith("--"):
            return opt[2:]
    return (option.name or "").replace("_", "-")


def _short_alias(option: Any) -> str | None:
    for opt in list(option.opts) + list(getattr(option, "secondary_opts", [])):
        if opt.startswith("-") and not opt.startswith("--") and len(opt) == 2:
            return opt[1:]
    return None


def _params(command: Any, kind: str) -> list[Any]:
    return [p for p in getattr(command, "params", None) or [] if getattr(p, "param_type_name", None) == kind]


# * Extract flag descriptors from a click (or typer-generated) command, skipping --help
def flags_from_command(command: Any) -> dict[str, FlagDescriptor]:
    flags: dict[str, FlagDescriptor] = {}
    for param in _params(command, "option"):
        if "--help" in param.opts or getattr(param, "hidden", False):
            continue
        flags[_long_name(param)] = flag(
            getattr(param, "help", None) or "",
            alias=_short_alias(param),
            type=_type_name(param),
            default=_default_value(param),
            required=getattr(param, "required", False),
            multiple=getattr(param, "multiple", False),
        )
    return flags


# * Extract positional argument keys (w/ required/variadic markers) from a click command
def args_from_command(command: Any, descriptions: dict[str, str] | None = None) -> dict[str, str]:
    descriptions = descriptions or {}
    args: dict[str, str] = {}
    for param in _params(command, "argument"):
        name = param.name or ""
        key = name
        if param.nargs == -1 or param.nargs > 1:
            key += VARIADIC_MARKER
        if getattr(param, "required", False):
            key += REQUIRED_MARKER
        # typer attaches help text to arguments; plain click does not
        args[key] = descriptions.get(name) or getattr(param, "help", None) or ""
    return args
