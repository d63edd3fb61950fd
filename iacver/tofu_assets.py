"""Asset names, tags and signing identities for OpenTofu and Atmos releases."""

from __future__ import annotations

from iacver.version import Version, parse_version

BASE_IDENTITY = "https://github.com/opentofu/opentofu/.github/workflows/release.yml@refs/heads/v"
UNSTABLE_IDENTITY = "https://github.com/opentofu/opentofu/.github/workflows/release.yml@refs/heads/main"
ISSUER = "https://token.actions.githubusercontent.com"

_TOFU_BASE = "tofu_"
_ATMOS_BASE = "atmos_"
_SUMS_SUFFIX = "SHA256SUMS"
_WINDOWS = "windows"
_EXE_SUFFIX = ".exe"


def split_tag(version: str) -> tuple[str, str]:
    """Return (version without leading 'v', release tag with leading 'v')."""
    if not version:
        raise ValueError("empty version")
    if version.startswith("v"):
        return version[1:], version
    return version, "v" + version


def tofu_asset_names(version: str, goos: str, arch: str, stable: bool) -> list[str]:
    """Return archive, sums, certificate and signature names for an OpenTofu release.

    Stable releases also carry a PGP signature of the sums file.
    """
    prefix = f"{_TOFU_BASE}{version}_"
    sums_name = prefix + _SUMS_SUFFIX
    names = [
        f"{prefix}{goos}_{arch}.zip",
        sums_name,
        sums_name + ".pem",
        sums_name + ".sig",
    ]
    if stable:
        names.append(sums_name + ".gpgsig")
    return names


def tofu_identity(version: str | Version, stable: bool) -> str:
    """Return the certificate identity expected for the signature of a release."""
    if not stable:
        return UNSTABLE_IDENTITY
    parsed = version if isinstance(version, Version) else parse_version(version)
    cleaned = str(parsed)
    short_version = cleaned[: cleaned.rindex(".")]
    return BASE_IDENTITY + short_version


def atmos_asset_names(version: str, goos: str, arch: str) -> tuple[str, str]:
    """Return (binary asset name, sums file name) for an Atmos release."""
    prefix = f"{_ATMOS_BASE}{version}_"
    name = f"{prefix}{goos}_{arch}"
    if goos == _WINDOWS:
        name += _EXE_SUFFIX
    return name, prefix + _SUMS_SUFFIX