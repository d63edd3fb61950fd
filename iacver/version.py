"""Version numbers, version constraints and version extraction from text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from itertools import zip_longest
from typing import Callable

_MAX_SEGMENT = 2**63 - 1
_MIN_PARTS = 3

_PART = r"[0-9A-Za-z\-~]"
_VERSION_RAW = (
    r"v?([0-9]+(?:\.[0-9]+)*)"
    rf"(?:-([0-9]+{_PART}*(?:\.{_PART}+)*)|-?([A-Za-z\-~]+{_PART}*(?:\.{_PART}+)*))?"
    rf"(?:\+({_PART}+(?:\.{_PART}+)*))?"
)
_VERSION_RE = re.compile(_VERSION_RAW)
_INT_RE = re.compile(r"[+-]?[0-9]+")

_OPERATORS = ("~>", ">=", "<=", "!=", ">", "<", "=", "")
_SPACE = r"[ \t\n\f\r]*"
_CONSTRAINT_RE = re.compile(
    _SPACE
    + "("
    + "|".join(re.escape(op) for op in _OPERATORS)
    + ")"
    + _SPACE
    + "("
    + _VERSION_RAW
    + ")"
    + _SPACE
)


class VersionError(ValueError):
    """Raised when a version or a constraint cannot be parsed."""


@dataclass(frozen=True)
class Version:
    """A parsed version: numeric segments, pre-release and build metadata."""

    segments: tuple[int, ...]
    prerelease: str = ""
    metadata: str = ""
    specified: int = _MIN_PARTS

    def __str__(self) -> str:
        text = ".".join(str(segment) for segment in self.segments)
        if self.prerelease:
            text += f"-{self.prerelease}"
        if self.metadata:
            text += f"+{self.metadata}"
        return text

    def compare(self, other: Version) -> int:
        """Return -1, 0 or 1 as this version is lower, equal or higher than other."""
        if str(self) == str(other):
            return 0
        if self.segments == other.segments:
            if not self.prerelease and not other.prerelease:
                return 0
            if not self.prerelease:
                return 1
            if not other.prerelease:
                return -1
            return _compare_prereleases(self.prerelease, other.prerelease)
        for lhs, rhs in zip_longest(self.segments, other.segments, fillvalue=0):
            if lhs != rhs:
                return -1 if lhs < rhs else 1
        return 0


def _as_int(part: str) -> int | None:
    if not _INT_RE.fullmatch(part):
        return None
    value = int(part)
    if not -_MAX_SEGMENT - 1 <= value <= _MAX_SEGMENT:
        return None
    return value


def _compare_part(left: str, right: str) -> int:
    if left == right:
        return 0
    left_num, right_num = _as_int(left), _as_int(right)
    if left == "":
        return -1 if right_num is not None else 1
    if right == "":
        return 1 if left_num is not None else -1
    if left_num is not None and right_num is None:
        return -1
    if left_num is None and right_num is not None:
        return 1
    if left_num is None and right_num is None:
        return 1 if left > right else -1
    return 1 if left_num > right_num else -1


def _compare_prereleases(left: str, right: str) -> int:
    if left == right:
        return 0
    for left_part, right_part in zip_longest(left.split("."), right.split("."), fillvalue=""):
        result = _compare_part(left_part, right_part)
        if result:
            return result
    return 0


def parse_version(text: str) -> Version:
    """Parse a version string such as ``v1.6.0-rc1+build``."""
    match = _VERSION_RE.fullmatch(text)
    if match is None:
        raise VersionError(f"malformed version: {text}")
    segments = [int(part) for part in match.group(1).split(".")]
    if any(segment > _MAX_SEGMENT for segment in segments):
        raise VersionError(f"version segment out of range: {text}")
    specified = len(segments)
    segments.extend([0] * (_MIN_PARTS - specified))
    prerelease = match.group(3) or match.group(2) or ""
    return Version(tuple(segments), prerelease, match.group(4) or "", specified)


def _prerelease_check(version: Version, target: Version) -> bool:
    if target.prerelease and version.prerelease:
        return target.segments == version.segments
    return not (version.prerelease and not target.prerelease)


def _pessimistic(version: Version, target: Version) -> bool:
    if not _prerelease_check(version, target) or (target.prerelease and not version.prerelease):
        return False
    if version.compare(target) < 0:
        return False
    size = len(target.segments)
    if size > len(version.segments):
        return False
    if version.segments[: target.specified - 1] != target.segments[: target.specified - 1]:
        return False
    return target.segments[size - 1] <= version.segments[size - 1]


_CHECKS: dict[str, Callable[[Version, Version], bool]] = {
    "": lambda v, c: v.compare(c) == 0,
    "=": lambda v, c: v.compare(c) == 0,
    "!=": lambda v, c: v.compare(c) != 0,
    ">": lambda v, c: _prerelease_check(v, c) and v.compare(c) == 1,
    "<": lambda v, c: _prerelease_check(v, c) and v.compare(c) == -1,
    ">=": lambda v, c: _prerelease_check(v, c) and v.compare(c) >= 0,
    "<=": lambda v, c: _prerelease_check(v, c) and v.compare(c) <= 0,
    "~>": _pessimistic,
}


@dataclass(frozen=True)
class _Constraint:
    operator: str
    version: Version
    text: str

    def check(self, version: Version) -> bool:
        return _CHECKS[self.operator](version, self.version)


@dataclass(frozen=True)
class Constraints:
    """A conjunction of single version constraints."""

    items: tuple[_Constraint, ...] = ()

    def check(self, version: Version) -> bool:
        """Tell whether the version satisfies every constraint."""
        return all(item.check(version) for item in self.items)

    def __add__(self, other: Constraints) -> Constraints:
        return Constraints(self.items + other.items)

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        return ",".join(item.text for item in self.items)


def _parse_single(text: str) -> _Constraint:
    match = _CONSTRAINT_RE.fullmatch(text)
    if match is None:
        raise VersionError(f"malformed constraint: {text}")
    return _Constraint(match.group(1), parse_version(match.group(2)), text)


def parse_constraint(text: str) -> Constraints:
    """Parse a comma separated list of constraints such as ``>= 1.5, < 2.0``."""
    return Constraints(tuple(_parse_single(part) for part in text.split(",")))


def find_version(text: str) -> str:
    """Return the first version found in text, without a leading 'v', or ''."""
    match = _VERSION_RE.search(text)
    if match is None:
        return ""
    found = match.group(0)
    return found[1:] if found.startswith("v") else found