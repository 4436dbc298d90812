# helpgrid/core/types.py
# Data model for help rendering: flag/arg/group descriptors, normalized config & row specs

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Literal, Mapping, Sequence, Union

from rich.text import Text

from .exceptions import ConfigurationError
from .verbose import vlog_resolution

REQUIRED_MARKER = "*"
VARIADIC_MARKER = "..."


# * Requiredness given as a literal boolean
@dataclass(frozen=True)
class RequiredLiteral:
    value: bool = False

    def evaluate(self) -> bool:
        return self.value


# * Requiredness computed by a zero-argument predicate at render time
@dataclass(frozen=True)
class RequiredComputed:
    predicate: Callable[[], bool]

    def evaluate(self) -> bool:
        return bool(self.predicate())


Requiredness = Union[RequiredLiteral, RequiredComputed]
NOT_REQUIRED = RequiredLiteral(False)


# * Coerce a bool, predicate or existing variant into a Requiredness
def as_requiredness(value: Any) -> Requiredness:
    if isinstance(value, (RequiredLiteral, RequiredComputed)):
        return value
    if callable(value):
        return RequiredComputed(value)
    return RequiredLiteral(bool(value))


# * Flag metadata as supplied by the flag-parsing layer; the name is its key in the flags mapping
@dataclass(frozen=True)
class FlagDescriptor:
    description: str = ""
    alias: str | None = None
    type: str = "string"
    default: Any = None
    required: Requiredness = NOT_REQUIRED
    multiple: bool = False

    @property
    def has_default(self) -> bool:
        return self.default is not None

    # build from a plain mapping; accepts camelCase keys & "desc" for description
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FlagDescriptor":
        return flag(
            data.get("desc", data.get("description", "")) or "",
            alias=data.get("alias"),
            type=data.get("type", "string"),
            default=data.get("default"),
            required=data.get("isRequired", data.get("required", False)),
            multiple=bool(data.get("isMultiple", data.get("multiple", False))),
        )


# * Convenience constructor accepting a bool or predicate for `required`
def flag(
    description: str = "",
    *,
    alias: str | None = None,
    type: str = "string",
    default: Any = None,
    required: bool | Callable[[], bool] | Requiredness = False,
    multiple: bool = False,
) -> FlagDescriptor:
    return FlagDescriptor(
        description=description,
        alias=alias,
        type=type,
        default=default,
        required=as_requiredness(required),
        multiple=multiple,
    )


# * Positional argument parsed from its declared key (`path*`, `files...`, `files...*`)
@dataclass(frozen=True)
class ArgSpec:
    name: str
    required: bool = False
    variadic: bool = False

    @classmethod
    def parse(cls, key: str) -> "ArgSpec":
        required = key.endswith(REQUIRED_MARKER)
        name = key[: -len(REQUIRED_MARKER)] if required else key
        variadic = name.endswith(VARIADIC_MARKER)
        if variadic:
            name = name[: -len(VARIADIC_MARKER)]
        return cls(name=name, required=required, variadic=variadic)

    # bracketed name w/ variadic marker after the closing bracket
    @property
    def bracketed(self) -> str:
        suffix = VARIADIC_MARKER if self.variadic else ""
        return f"<{self.name}>{suffix}"

    @property
    def display(self) -> str:
        return self.bracketed + (REQUIRED_MARKER if self.required else "")


# * Group header attached to the flag that opens the group
@dataclass(frozen=True)
class GroupDescriptor:
    title: str | None = None
    description: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GroupDescriptor":
        return cls(title=data.get("title"), description=data.get("description"))


# * Package metadata fallback for command name & description
@dataclass(frozen=True)
class PackageMetadata:
    name: str | None = None
    description: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "PackageMetadata":
        if not data:
            return cls()
        return cls(name=data.get("name") or None, description=data.get("description") or None)


# * Assure output is a tuple of lines from None, a single string or a sequence
def arrify(value: str | Sequence[str] | None) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


# keys accepted by HelpConfig.from_dict, including camelCase spellings
_DICT_KEYS = {
    "command": "command",
    "description": "description",
    "usage": "usage",
    "examples": "examples",
    "args": "args",
    "flags": "flags",
    "groups": "groups",
    "pkg": "pkg",
    "lineLength": "line_length",
    "line_length": "line_length",
    "titleLength": "title_length",
    "title_length": "title_length",
    "multilineThreshold": "multiline_threshold",
    "multiline_threshold": "multiline_threshold",
    "autoHelp": "auto_help",
    "auto_help": "auto_help",
    "color": "color",
    "theme": "theme",
}


# * Fully normalized help configuration; built once per render & never mutated
@dataclass(frozen=True)
class HelpConfig:
    command: str
    description: tuple[str, ...] = ()
    usage: tuple[str, ...] = ()
    examples: tuple[str, ...] = ()
    args: dict[str, str] = field(default_factory=dict)
    flags: dict[str, FlagDescriptor] = field(default_factory=dict)
    groups: dict[str, GroupDescriptor] = field(default_factory=dict)
    line_length: int = 1000
    title_length: int = 15
    multiline_threshold: int = 50
    auto_help: bool = True
    color: bool = True
    theme: str = "classic"

    @property
    def arg_specs(self) -> list[tuple[ArgSpec, str]]:
        return [(ArgSpec.parse(key), desc) for key, desc in self.args.items()]

    # merge caller options over settings defaults & resolve command/description
    @classmethod
    def from_options(
        cls,
        settings: Any = None,
        *,
        command: str | None = None,
        description: str | Sequence[str] | None = None,
        pkg: PackageMetadata | Mapping[str, Any] | None = None,
        usage: str | Sequence[str] | None = None,
        examples: str | Sequence[str] | None = None,
        args: Mapping[str, str] | None = None,
        flags: Mapping[str, FlagDescriptor | Mapping[str, Any]] | None = None,
        groups: Mapping[str, GroupDescriptor | Mapping[str, Any]] | None = None,
        line_length: int | None = None,
        title_length: int | None = None,
        multiline_threshold: int | None = None,
        auto_help: bool | None = None,
        color: bool | None = None,
        theme: str | None = None,
    ) -> "HelpConfig":
        from ..config.settings import HelpSettings

        defaults = settings or HelpSettings()
        metadata = pkg if isinstance(pkg, PackageMetadata) else PackageMetadata.from_mapping(pkg)

        # an explicit empty command is kept & rejected rather than replaced by pkg.name
        resolved_command = command if command is not None else metadata.name
        if not resolved_command:
            raise ConfigurationError("Either 'command' or 'pkg' with name is required.")
        vlog_resolution("command", resolved_command, "command" if command is not None else "pkg.name")
        if description is not None:
            vlog_resolution("description", description, "description")
        elif metadata.description:
            vlog_resolution("description", metadata.description, "pkg.description")

        return cls(
            command=resolved_command,
            description=arrify(description if description is not None else metadata.description),
            usage=arrify(usage),
            examples=arrify(examples),
            args=dict(args or {}),
            flags={
                name: value if isinstance(value, FlagDescriptor) else FlagDescriptor.from_dict(value)
                for name, value in (flags or {}).items()
            },
            groups={
                name: value if isinstance(value, GroupDescriptor) else GroupDescriptor.from_dict(value)
                for name, value in (groups or {}).items()
            },
            line_length=line_length or defaults.line_length,
            title_length=title_length if title_length is not None else defaults.title_length,
            multiline_threshold=(
                multiline_threshold if multiline_threshold is not None else defaults.multiline_threshold
            ),
            auto_help=auto_help if auto_help is not None else defaults.auto_help,
            color=color if color is not None else defaults.color,
            theme=theme or defaults.theme,
        )

    # build from a JSON-style mapping (help spec files); unknown keys are ignored
    @classmethod
    def from_dict(cls, data: Mapping[str, Any], settings: Any = None, **overrides: Any) -> "HelpConfig":
        options = {_DICT_KEYS[key]: value for key, value in data.items() if key in _DICT_KEYS}
        options.update({key: value for key, value in overrides.items() if value is not None})
        return cls.from_options(settings, **options)


Align = Literal["left", "center", "right"]
PaddingSpec = tuple[int, int, int, int]
NO_PADDING: PaddingSpec = (0, 0, 0, 0)


# * One typesetter cell: styled text, optional fixed width, alignment & (top, right, bottom, left) padding
@dataclass(frozen=True)
class Cell:
    text: Text
    width: int | None = None
    align: Align | None = None
    padding: PaddingSpec = NO_PADDING


# * Title band handed to Typesetter.start_block
@dataclass(frozen=True)
class Band:
    text: Text
    padding: PaddingSpec = NO_PADDING


# * One row of aligned cells handed to Typesetter.row
@dataclass(frozen=True)
class Row:
    cells: tuple[Cell, ...]


RowSpec = Union[Band, Row]


# * Flags most commands share; spread into a flags mapping: {**mine, **COMMON_FLAGS}
COMMON_FLAGS: dict[str, FlagDescriptor] = {
    "help": flag("Show help.", type="boolean"),
    "version": flag("Show version.", type="boolean"),
}
