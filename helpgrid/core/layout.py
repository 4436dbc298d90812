# helpgrid/core/layout.py
# Row layout policy: one global single-row/two-row decision for the options section

from __future__ import annotations

from .measurements import Measurements

# left padding of a description pushed to its own row
DESCRIPTION_INDENT = 5


# * Columns left for descriptions after name, default & alias columns
def available_description_width(line_length: int, measurements: Measurements) -> int:
    used = (
        measurements.max_name_length
        + measurements.max_default_length
        + measurements.alias_column_width
    )
    return line_length - used


# * True when every flag's description fits on the same row as its name
def decide_single_row(line_length: int, measurements: Measurements, multiline_threshold: int) -> bool:
    return available_description_width(line_length, measurements) > multiline_threshold
