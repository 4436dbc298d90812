# helpgrid/help/renderer.py
# Orchestrator: normalize config, measure once, decide layout once, run section builders in order & typeset

from __future__ import annotations

from typing import Any

from rich.text import Text

from ..config.settings import HelpSettings
from ..core.layout import available_description_width, decide_single_row
from ..core.measurements import measure
from ..core.types import Band, Cell, HelpConfig, Row, RowSpec
from ..core.verbose import vlog, vlog_layout, vlog_measurements, vlog_section
from ..ui.theming.theme_engine import get_help_theme
from ..ui.typesetter import RichTypesetter, Typesetter
from .sections import SECTION_BUILDERS

TRAILING_ROW = Row((Cell(Text("")),))


# * Build every row spec for a normalized config (no typesetting)
def build_row_specs(config: HelpConfig) -> list[RowSpec]:
    measurements = measure(config.flags, config.args)
    vlog_measurements(measurements)

    single_row = decide_single_row(config.line_length, measurements, config.multiline_threshold)
    vlog_layout(
        single_row,
        available_description_width(config.line_length, measurements),
        config.multiline_threshold,
    )

    orphans = [name for name in config.groups if name not in config.flags]
    if orphans:
        vlog("GROUPS", f"Ignoring groups w/o a matching flag: {', '.join(orphans)}")

    specs: list[RowSpec] = []
    for section, builder in SECTION_BUILDERS:
        rows = builder(config, measurements, single_row)
        vlog_section(section, len(rows))
        specs.extend(rows)
    specs.append(TRAILING_ROW)
    return specs


# * Feed row specs to a typesetter in order & return its text
def typeset(specs: list[RowSpec], typesetter: Typesetter) -> str:
    for spec in specs:
        if isinstance(spec, Band):
            typesetter.start_block(spec.text, spec.padding)
        else:
            typesetter.row(*spec.cells)
    return typesetter.render()


# * Render help text from a HelpConfig or from keyword options merged over settings defaults
def render(
    config: HelpConfig | None = None,
    *,
    settings: HelpSettings | None = None,
    typesetter: Typesetter | None = None,
    **options: Any,
) -> str:
    if config is None:
        config = HelpConfig.from_options(settings, **options)
    elif options:
        raise TypeError("Pass either a HelpConfig or keyword options, not both")

    setter = typesetter or RichTypesetter(
        config.line_length, theme=get_help_theme(config.theme), color=config.color
    )
    return typeset(build_row_specs(config), setter)
