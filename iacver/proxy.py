"""Locate the executable of a selected tool version for proxied calls."""

from __future__ import annotations

import os
from collections.abc import Iterable

from iacver.display import Displayer
from iacver.lastuse import write_last_use

CHDIR_FLAG_PREFIX = "-chdir="


def exec_path(
    install_path: str | os.PathLike[str],
    version: str,
    exec_name: str,
    displayer: Displayer,
) -> str:
    """Return the executable path of an installed version and record its use today."""
    version_path = os.path.join(os.fspath(install_path), version)
    write_last_use(version_path, displayer)
    return os.path.join(version_path, exec_name)


def work_path_from_args(cmd_args: Iterable[str]) -> str | None:
    """Return the directory given by the first ``-chdir=`` argument, or None."""
    for arg in cmd_args:
        if arg.startswith(CHDIR_FLAG_PREFIX):
            return arg[len(CHDIR_FLAG_PREFIX):]
    return None