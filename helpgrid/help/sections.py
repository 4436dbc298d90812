# helpgrid/help/sections.py
# Section builders: usage, arguments, options, required note & examples as ordered row specs

from __future__ import annotations

import math

from rich.text import Text

from ..core.layout import DESCRIPTION_INDENT
from ..core.measurements import ALIAS_COLUMN_WIDTH, DEFAULT_LABEL, Measurements, format_default
from ..core.types import (
    ArgSpec,
    Band,
    Cell,
    FlagDescriptor,
    GroupDescriptor,
    HelpConfig,
    NO_PADDING,
    PaddingSpec,
    REQUIRED_MARKER,
    Row,
    RowSpec,
    VARIADIC_MARKER,
)
from ..core.verbose import is_debug_enabled, vlog_flag_row, vlog_group
from ..ui.theming.theme_engine import HelpRoles, compose, styled

TITLE_PADDING: PaddingSpec = (1, 0, 1, 0)
SPACED_ABOVE: PaddingSpec = (1, 0, 0, 0)
GROUP_DESCRIPTION_INDENT = 2
PROMPT = "$"
OPTIONS_MARKER = "[options]"
REQUIRED_NOTE = " Required field."


def cell(
    text: str | Text,
    width: int | None = None,
    align: str | None = None,
    padding: PaddingSpec = NO_PADDING,
) -> Cell:
    return Cell(text if isinstance(text, Text) else Text(text), width, align, padding)  # type: ignore[arg-type]


def row(*cells: Cell) -> Row:
    return Row(tuple(cells))


# * Centered, upper-cased title padded w/ spaces to the title band length
def title_band(section: str, title_length: int) -> Band:
    title = section.upper()
    prefix = " " * max(0, math.ceil((title_length - len(title)) / 2))
    suffix = " " * max(0, title_length - len(title) - len(prefix))
    return Band(styled(f"{prefix}{title}{suffix}", HelpRoles.title(section)), TITLE_PADDING)


# * Prefix a usage/example line w/ the prompt & highlight a leading command name
def prompt_line(line: str, command: str) -> Text:
    prompt = styled(PROMPT, HelpRoles.PROMPT)
    if line.startswith(command):
        return compose(prompt, " ", styled(command, HelpRoles.COMMAND), line[len(command):])
    return compose(prompt, " ", line)


# * Bracketed argument name w/ variadic suffix & required marker
def arg_text(spec: ArgSpec) -> Text:
    required = styled(REQUIRED_MARKER, HelpRoles.REQUIRED) if spec.required else ""
    return compose(styled(spec.bracketed, HelpRoles.ARGUMENT), required)


# * Command name & description shown when the flag parser does not print them itself
def build_header(config: HelpConfig, measurements: Measurements, single_row: bool) -> list[RowSpec]:
    if config.auto_help:
        return []
    rows: list[RowSpec] = [row(cell(styled(config.command, HelpRoles.COMMAND_NAME), padding=SPACED_ABOVE))]
    if any(line.strip() for line in config.description):
        rows.append(row(cell("\n".join(config.description), padding=SPACED_ABOVE)))
    return rows


def build_usage(config: HelpConfig, measurements: Measurements, single_row: bool) -> list[RowSpec]:
    if config.usage:
        lines = [prompt_line(line, config.command) for line in config.usage]
    else:
        parts: list[str | Text] = [styled(PROMPT, HelpRoles.PROMPT), " ", styled(config.command, HelpRoles.COMMAND)]
        if config.flags:
            parts += [" ", styled(OPTIONS_MARKER, HelpRoles.OPTION)]
        for spec, _ in config.arg_specs:
            parts += [" ", arg_text(spec)]
        lines = [compose(*parts)]
    return [title_band("usage", config.title_length), *(row(cell(line)) for line in lines)]


def build_arguments(config: HelpConfig, measurements: Measurements, single_row: bool) -> list[RowSpec]:
    if not config.args:
        return []
    rows: list[RowSpec] = [title_band("arguments", config.title_length)]
    for spec, description in config.arg_specs:
        rows.append(row(cell(arg_text(spec), width=measurements.max_arg_length), cell(description)))
    return rows


# group title row (flush w/ the section title for the first header) & optional indented description
def _group_header(group: GroupDescriptor, first: bool) -> list[RowSpec]:
    rows: list[RowSpec] = []
    top = 0 if first else 1
    if group.title:
        rows.append(row(cell(styled(f"{group.title}:", HelpRoles.GROUP), padding=(top, 0, 0, 0))))
        top = 0
    if group.description:
        rows.append(
            row(cell(styled(group.description, HelpRoles.GROUP), padding=(top, 0, 0, GROUP_DESCRIPTION_INDENT)))
        )
    return rows


def _default_text(descriptor: FlagDescriptor) -> Text:
    if not descriptor.has_default:
        return Text()
    return compose(
        styled(DEFAULT_LABEL, HelpRoles.DEFAULT_LABEL),
        styled(format_default(descriptor.default), HelpRoles.DEFAULT_VALUE),
        styled(")", HelpRoles.DEFAULT_LABEL),
    )


def _flag_rows(
    name: str, descriptor: FlagDescriptor, measurements: Measurements, single_row: bool
) -> list[RowSpec]:
    cells: list[Cell] = []
    if measurements.alias_column_width:
        alias = styled(f"-{descriptor.alias}", HelpRoles.OPTION) if descriptor.alias else ""
        cells.append(cell(alias, width=ALIAS_COLUMN_WIDTH))

    multiple = VARIADIC_MARKER if descriptor.multiple else ""
    required = styled(REQUIRED_MARKER, HelpRoles.REQUIRED) if name in measurements.required_flags else ""
    name_text = compose(styled(f"--{name}{multiple}", HelpRoles.OPTION), required)
    cells.append(cell(name_text, width=measurements.max_name_length))

    # default column collapses when no flag declares a default
    if measurements.max_default_length:
        if single_row:
            cells.append(cell(_default_text(descriptor), width=measurements.max_default_length))
        else:
            cells.append(cell(_default_text(descriptor), align="right"))

    if single_row:
        cells.append(cell(descriptor.description))
        return [row(*cells)]
    return [
        row(*cells),
        row(cell(descriptor.description, padding=(0, 0, 0, DESCRIPTION_INDENT))),
    ]


def build_options(config: HelpConfig, measurements: Measurements, single_row: bool) -> list[RowSpec]:
    if not config.flags:
        return []
    rows: list[RowSpec] = [title_band("options", config.title_length)]
    headers = 0
    for name, descriptor in config.flags.items():
        group = config.groups.get(name)
        if group is not None:
            rows.extend(_group_header(group, first=headers == 0))
            vlog_group(group.title, name, 0 if headers == 0 else 1)
            headers += 1
        flag_rows = _flag_rows(name, descriptor, measurements, single_row)
        if is_debug_enabled():
            vlog_flag_row(name, [c.text.plain for r in flag_rows if isinstance(r, Row) for c in r.cells], single_row)
        rows.extend(flag_rows)
    return rows


# * Closing note explaining the required marker; present once when anything is required
def build_required_note(config: HelpConfig, measurements: Measurements, single_row: bool) -> list[RowSpec]:
    if not measurements.any_required:
        return []
    note = compose(styled(REQUIRED_MARKER, HelpRoles.REQUIRED), REQUIRED_NOTE)
    return [row(cell(note, padding=SPACED_ABOVE))]


def build_examples(config: HelpConfig, measurements: Measurements, single_row: bool) -> list[RowSpec]:
    if not config.examples:
        return []
    rows: list[RowSpec] = [title_band("examples", config.title_length)]
    rows.extend(row(cell(prompt_line(line, config.command))) for line in config.examples)
    return rows


# builders in render order
SECTION_BUILDERS = (
    ("header", build_header),
    ("usage", build_usage),
    ("arguments", build_arguments),
    ("options", build_options),
    ("required note", build_required_note),
    ("examples", build_examples),
)
