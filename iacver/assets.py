"""Asset names and version tags for Terraform and Terragrunt releases."""

from __future__ import annotations

_TERRAFORM_BASE = "terraform_"
_TERRAGRUNT_BASE = "terragrunt_"
_SUMS_SUFFIX = "SHA256SUMS"
_WINDOWS = "windows"
_EXE_SUFFIX = ".exe"


def _require_version(version: str) -> None:
    if not version:
        raise ValueError("empty version")


def terraform_install_version(version: str) -> str:
    """Return the version as used in Terraform asset names (no leading 'v')."""
    _require_version(version)
    return version[1:] if version.startswith("v") else version


def terragrunt_tag(version: str) -> str:
    """Return the release tag for a Terragrunt version (always a leading 'v')."""
    _require_version(version)
    return version if version.startswith("v") else "v" + version


def terraform_asset_names(version: str, goos: str, arch: str) -> tuple[str, str, str]:
    """Return (archive name, sums file name, sums signature file name)."""
    prefix = f"{_TERRAFORM_BASE}{version}_"
    sums_name = prefix + _SUMS_SUFFIX
    return f"{prefix}{goos}_{arch}.zip", sums_name, sums_name + ".sig"


def terragrunt_asset_names(goos: str, arch: str) -> tuple[str, str]:
    """Return (binary asset name, sums file name) for a platform."""
    name = f"{_TERRAGRUNT_BASE}{goos}_{arch}"
    if goos == _WINDOWS:
        name += _EXE_SUFFIX
    return name, _SUMS_SUFFIX