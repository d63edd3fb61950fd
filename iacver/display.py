"""User-facing messages and log lines."""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO


class Displayer:
    """Writes messages and log lines to a stream.

    In buffered mode, messages are held until ``flush``: a proxy call drops
    them, a normal call writes them and switches to direct display.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        level: int = logging.INFO,
        quiet: bool = False,
        buffered: bool = False,
    ) -> None:
        self._stream = stream
        self.level = level
        self.quiet = quiet
        self.buffered = buffered
        self._pending: list[str] = []

    def _write(self, line: str) -> None:
        print(line, file=self._stream if self._stream is not None else sys.stderr)

    def display(self, message: str) -> None:
        """Show a message to the user (or hold it in buffered mode)."""
        if self.quiet:
            return
        if self.buffered:
            self._pending.append(message)
        else:
            self._write(message)

    def log(self, level: int, message: str, **kwargs: Any) -> None:
        """Write a log line when the level reaches the configured threshold."""
        if self.quiet or level < self.level:
            return
        details = " ".join(f"{key}={value}" for key, value in kwargs.items())
        line = f"[{logging.getLevelName(level)}] {message}"
        self._write(f"{line}: {details}" if details else line)

    def flush(self, proxy_call: bool) -> None:
        """Release held messages: dropped for a proxy call, written otherwise."""
        pending, self._pending = self._pending, []
        if proxy_call:
            return
        self.buffered = False
        for message in pending:
            self.display(message)

    def is_debug(self) -> bool:
        """Tell whether debug lines are written."""
        return self.level <= logging.DEBUG


def display_detection_info(displayer: Displayer, version: str, source: str) -> str:
    """Report where a version was found and return that version."""
    displayer.display(f"Resolved version from {source} : {version}")
    return version