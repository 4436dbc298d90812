# helpgrid/spec_io/__init__.py
# File I/O for help spec files, package metadata & settings JSON

from .generics import read_json_safe, write_json_safe
from .specs import load_help_spec, load_package_metadata

__all__ = [
    "read_json_safe",
    "write_json_safe",
    "load_help_spec",
    "load_package_metadata",
]
