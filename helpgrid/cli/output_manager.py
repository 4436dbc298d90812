# helpgrid/cli/output_manager.py
# Console & file log sink registered by the CLI; prints layout logs through the shared Rich console

from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from rich.markup import escape

from ..core.output import OutputLevel

# category label style per level
_CATEGORY_STYLES = {
    OutputLevel.VERBOSE: "bold cyan",
    OutputLevel.DEBUG: "dim cyan",
}


class OutputManager:
    def __init__(self, level: OutputLevel = OutputLevel.NORMAL, log_file: Path | None = None) -> None:
        self.level = level
        self._started = time.monotonic()
        self._log_file: TextIO | None = None
        if log_file is not None:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            self._log_file = open(log_file, "a", encoding="utf-8")
            self._write(f"# helpgrid {datetime.now().isoformat()} level={level.name}")

    def enabled(self, level: OutputLevel) -> bool:
        return self.level >= level

    # leveled record: "[elapsed] [CATEGORY] message" plus indented detail lines
    def log(self, level: OutputLevel, category: str, message: str, detail: Optional[str] = None) -> None:
        if not self.enabled(level):
            return
        from .console import console

        elapsed = f"{time.monotonic() - self._started:.2f}s"
        style = _CATEGORY_STYLES.get(level, "bold cyan")
        console.print(f"[dim]\\[{elapsed}][/] [{style}]\\[{category}][/] {escape(message)}")
        self._write(f"[{elapsed}] [{category}] {message}")
        for line in (detail or "").splitlines():
            console.print(f"  [dim]{escape(line)}[/]")
            self._write(f"  {line}")

    # user-facing confirmations; silenced only by --quiet
    def info(self, message: str) -> None:
        if self.enabled(OutputLevel.NORMAL):
            from .console import console

            console.print(message)

    def close(self) -> None:
        if self._log_file is not None:
            self._log_file.close()
            self._log_file = None

    def _write(self, line: str) -> None:
        if self._log_file is not None:
            self._log_file.write(f"{line}\n")
            self._log_file.flush()
