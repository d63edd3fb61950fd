"""Record and read the last date a tool version was used."""

from __future__ import annotations

import logging
import os
from datetime import date, datetime
from pathlib import Path

from iacver.display import Displayer

FILE_NAME = "last-use.txt"

_DATE_FORMAT = "%Y-%m-%d"
_RW_PERM = 0o600


def read_last_use(dir_path: str | os.PathLike[str], displayer: Displayer) -> date | None:
    """Return the recorded last-use date, or None when it cannot be read."""
    path = Path(dir_path) / FILE_NAME
    try:
        data = path.read_bytes()
    except OSError as err:
        level = logging.DEBUG if isinstance(err, FileNotFoundError) else logging.WARNING
        displayer.log(level, "Unable to read date in file", error=err)
        return None
    try:
        return datetime.strptime(data.decode("ascii"), _DATE_FORMAT).date()
    except ValueError as err:
        displayer.log(logging.WARNING, "Unable to parse date in file", error=err)
        return None


def write_last_use(dir_path: str | os.PathLike[str], displayer: Displayer) -> None:
    """Record today as the last-use date; failures are only logged."""
    path = Path(dir_path) / FILE_NAME
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _RW_PERM)
        with os.fdopen(fd, "w", encoding="ascii") as file:
            file.write(date.today().strftime(_DATE_FORMAT))
    except OSError as err:
        displayer.log(logging.WARNING, "Unable to write date in file", error=err)