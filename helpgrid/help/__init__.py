# helpgrid/help/__init__.py
# Help text assembly: section builders & render orchestrator

from .renderer import render, build_row_specs, typeset
from .sections import SECTION_BUILDERS

__all__ = ["render", "build_row_specs", "typeset", "SECTION_BUILDERS"]
