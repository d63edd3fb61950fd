"""Version files: plain files, asdf tool files, TOML files and the directory walk."""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from iacver.display import Displayer, display_detection_info

TOOL_FILE_NAME = ".tool-versions"

OPENTOFU_TOOL = "opentofu"
TERRAFORM_TOOL = "terraform"
TERRAGRUNT_TOOL = "terragrunt"
ATMOS_TOOL = "atmos"

_VERSION_KEY = "version"

DisplayMsg = Callable[[Displayer, str, str], str]
VersionParser = Callable[[str, Displayer], str]


@dataclass(frozen=True)
class VersionFile:
    """A file name to look for and the parser that reads a version out of it."""

    name: str
    parser: VersionParser


def _read_failure_level(err: OSError) -> int:
    return logging.DEBUG if isinstance(err, FileNotFoundError) else logging.WARNING


def retrieve_flat(
    file_path: str | os.PathLike[str],
    displayer: Displayer,
    display_msg: DisplayMsg | None = None,
) -> str:
    """Return the stripped content of a file, or '' when it is missing or empty.

    ``display_msg`` reports the found value; without it nothing is displayed.
    """
    try:
        data = Path(file_path).read_bytes()
    except OSError as err:
        displayer.log(_read_failure_level(err), "Failed to read file", error=err)
        return ""
    resolved = data.strip().decode("utf-8", errors="replace")
    if not resolved:
        return ""
    if display_msg is None:
        return resolved
    return display_msg(displayer, resolved, os.fspath(file_path))


def retrieve_flat_version(file_path: str | os.PathLike[str], displayer: Displayer) -> str:
    """Read a version from a plain file and report where it was found."""
    return retrieve_flat(file_path, displayer, display_detection_info)


def parse_tool_versions(
    file_path: str | os.PathLike[str],
    lines: Iterable[str],
    tool_name: str,
    displayer: Displayer,
) -> str:
    """Return the version given for a tool in asdf tool-file lines ('' if none).

    The last line naming the tool wins; only its first version is kept.
    """
    resolved = ""
    for line in lines:
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue
        parts = trimmed.split()
        if len(parts) >= 2 and parts[0] == tool_name:
            resolved = parts[1].partition("#")[0]
    if not resolved:
        return ""
    return display_detection_info(displayer, resolved, os.fspath(file_path))


def retrieve_tool_version(
    file_path: str | os.PathLike[str], tool_name: str, displayer: Displayer
) -> str:
    """Read the version of a tool from an asdf tool file ('' when unavailable)."""
    try:
        file = open(file_path, encoding="utf-8", errors="replace")
    except OSError as err:
        displayer.log(_read_failure_level(err), "Failed to open tool file", error=err)
        return ""
    with file:
        try:
            return parse_tool_versions(file_path, file, tool_name, displayer)
        except OSError as err:
            displayer.log(logging.WARNING, "Failed to parse tool file", error=err)
            return ""


def retrieve_toml_version(file_path: str | os.PathLike[str], displayer: Displayer) -> str:
    """Read the ``version`` key of a flat TOML file of strings.

    A missing file gives ''; malformed content raises ValueError.
    """
    try:
        data = Path(file_path).read_bytes()
    except OSError as err:
        displayer.log(_read_failure_level(err), "Failed to read tgswitch file", error=err)
        return ""
    parsed = tomllib.loads(data.decode("utf-8"))
    for key, value in parsed.items():
        if not isinstance(value, str):
            raise ValueError(f"toml: cannot decode {type(value).__name__} into a string for key {key!r}")
    resolved = parsed.get(_VERSION_KEY, "")
    if not resolved:
        return ""
    return display_detection_info(displayer, resolved, os.fspath(file_path))


def _retrieve_from_dir(
    version_files: Sequence[VersionFile], dir_path: str, displayer: Displayer
) -> str:
    for version_file in version_files:
        found = version_file.parser(os.path.join(dir_path, version_file.name), displayer)
        if found:
            return found
    return ""


def retrieve_version(
    version_files: Sequence[VersionFile],
    work_path: str | os.PathLike[str],
    user_path: str | os.PathLike[str],
    displayer: Displayer,
) -> str:
    """Search version files from the working directory up to the root, then in user_path."""
    user_dir = os.fspath(user_path)
    previous = os.path.abspath(work_path)
    found = _retrieve_from_dir(version_files, previous, displayer)
    if found:
        return found

    user_path_done = False
    current = os.path.dirname(previous)
    while current != previous:
        found = _retrieve_from_dir(version_files, current, displayer)
        if found:
            return found
        if current == user_dir:
            user_path_done = True
        previous, current = current, os.path.dirname(current)

    if user_path_done:
        return ""
    return _retrieve_from_dir(version_files, user_dir, displayer)