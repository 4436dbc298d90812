# helpgrid/core/output.py
# Output levels & the log sink registry used by the layout engine
# * Pure module: the registered sink (helpgrid/cli/output_manager.py) owns all console & file I/O

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Protocol, runtime_checkable


# * Output verbosity levels, from least to most verbose
class OutputLevel(IntEnum):
    QUIET = 0
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3

    # --quiet wins over everything; --debug implies verbose
    @classmethod
    def from_flags(cls, verbose: bool = False, debug: bool = False, quiet: bool = False) -> "OutputLevel":
        if quiet:
            return cls.QUIET
        if debug:
            return cls.DEBUG
        if verbose:
            return cls.VERBOSE
        return cls.NORMAL


# * Anything that can receive leveled log records & user-facing messages
@runtime_checkable
class OutputInterface(Protocol):
    level: OutputLevel

    def enabled(self, level: OutputLevel) -> bool: ...

    def log(self, level: OutputLevel, category: str, message: str, detail: Optional[str] = None) -> None: ...

    def info(self, message: str) -> None: ...

    def close(self) -> None: ...


# * Sink used until the CLI registers a real one; library callers log nowhere
class NullOutputManager:
    level = OutputLevel.NORMAL

    def enabled(self, level: OutputLevel) -> bool:
        return False

    def log(self, level: OutputLevel, category: str, message: str, detail: Optional[str] = None) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def close(self) -> None:
        pass


_output_manager: OutputInterface = NullOutputManager()


def set_output_manager(manager: OutputInterface) -> None:
    global _output_manager
    _output_manager = manager


def get_output_manager() -> OutputInterface:
    return _output_manager


# * Close the registered sink & fall back to the null one
def reset_output_manager() -> None:
    global _output_manager
    _output_manager.close()
    _output_manager = NullOutputManager()
