# helpgrid/core/verbose.py
# Logging helpers for the layout engine: measurements, layout decisions, sections, rows & file I/O

from __future__ import annotations

from pathlib import Path
from typing import Any, TYPE_CHECKING

from .output import get_output_manager, set_output_manager, OutputLevel

if TYPE_CHECKING:
    from .measurements import Measurements


# * Register the CLI log sink for the requested verbosity
def init_verbose(
    enabled: bool = False,
    log_file: Path | None = None,
    debug: bool = False,
    quiet: bool = False,
) -> None:
    from ..cli.output_manager import OutputManager

    get_output_manager().close()
    level = OutputLevel.from_flags(verbose=enabled, debug=debug, quiet=quiet)
    set_output_manager(OutputManager(level, log_file))


def is_verbose_enabled() -> bool:
    return get_output_manager().enabled(OutputLevel.VERBOSE)


def is_debug_enabled() -> bool:
    return get_output_manager().enabled(OutputLevel.DEBUG)


# * Core verbose logging function
def vlog(category: str, message: str, detail: str | None = None) -> None:
    get_output_manager().log(OutputLevel.VERBOSE, category, message, detail)


# * Debug-only logging
def vlog_debug(category: str, message: str, detail: str | None = None) -> None:
    get_output_manager().log(OutputLevel.DEBUG, category, message, detail)


# * Log measured column widths for one render call
def vlog_measurements(measurements: "Measurements") -> None:
    detail = (
        f"name={measurements.max_name_length}, "
        f"default={measurements.max_default_length}, "
        f"arg={measurements.max_arg_length}, "
        f"alias={measurements.alias_column_width}"
    )
    vlog("MEASURE", "Measured columns", detail)
    if measurements.required_flags:
        vlog_debug("MEASURE", f"Required flags: {', '.join(sorted(measurements.required_flags))}")


# * Log the single-row/two-row decision for the options section
def vlog_layout(single_row: bool, available: int, threshold: int) -> None:
    shape = "single row" if single_row else "two rows"
    vlog("LAYOUT", f"Options use {shape}", f"available={available}, threshold={threshold}")


# * Log a built section & its row count
def vlog_section(section: str, rows: int) -> None:
    vlog("SECTION", f"{section}: {rows} rows" if rows else f"{section}: omitted")


# * Log where the command name & description came from
def vlog_resolution(field: str, value: Any, source: str) -> None:
    vlog_debug("CONFIG", f"{field} = {value!r} (from {source})")


# * Log one flag's row shape; cells are listed by plain text
def vlog_flag_row(name: str, cells: list[str], single_row: bool) -> None:
    shape = "single row" if single_row else "name row + description row"
    vlog_debug("ROW", f"--{name}: {shape}", " | ".join(repr(cell) for cell in cells))


# * Log where a group header landed
def vlog_group(title: str | None, flag_name: str, top_padding: int) -> None:
    vlog_debug("GROUP", f"{title or '(untitled)'} before --{flag_name}, top padding {top_padding}")


def vlog_file_read(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    vlog("FILE", f"Read: {path}{size_str}")


def vlog_file_write(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    vlog("FILE", f"Write: {path}{size_str}")


# * Log configuration values being used
def vlog_config(key: str, value: Any) -> None:
    vlog("CONFIG", f"{key} = {value}")
