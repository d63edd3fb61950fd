import pytest

from iacver.assets import (
    terraform_asset_names,
    terraform_install_version,
    terragrunt_asset_names,
    terragrunt_tag,
)


def test_terraform_asset_names_match_release_index():
    file_name, sums, sig = terraform_asset_names("1.7.0", "linux", "386")
    assert file_name == "terraform_1.7.0_linux_386.zip"
    assert sums == "terraform_1.7.0_SHA256SUMS"
    assert sig == "terraform_1.7.0_SHA256SUMS.sig"


@pytest.mark.parametrize(
    ("version", "goos", "arch"),
    [("1.6.6", "darwin", "arm64"), ("1.7.0-rc1", "windows", "amd64"), ("0.12.31", "freebsd", "arm")],
)
def test_terraform_asset_names_structure(version, goos, arch):
    file_name, sums, sig = terraform_asset_names(version, goos, arch)
    assert file_name.startswith(f"terraform_{version}_")
    assert file_name.endswith(f"_{goos}_{arch}.zip")
    assert sums.endswith("SHA256SUMS")
    assert sig == sums + ".sig"
    assert sums.startswith(f"terraform_{version}_")


def test_terraform_install_version_strips_v():
    assert terraform_install_version("v1.7.0") == "1.7.0"
    assert terraform_install_version("1.7.0") == "1.7.0"


def test_terraform_install_version_empty_raises():
    with pytest.raises(ValueError):
        terraform_install_version("")


def test_terragrunt_tag_adds_v_once():
    assert terragrunt_tag("0.71.1") == "v0.71.1"
    assert terragrunt_tag("v0.71.1") == "v0.71.1"
    assert terragrunt_tag(terragrunt_tag("0.71.1")) == terragrunt_tag("0.71.1")


def test_terragrunt_tag_empty_raises():
    with pytest.raises(ValueError):
        terragrunt_tag("")


def test_terragrunt_asset_names_linux():
    name, sums = terragrunt_asset_names("linux", "amd64")
    assert name == "terragrunt_linux_amd64"
    assert sums == "SHA256SUMS"


def test_terragrunt_asset_names_windows_has_exe_suffix():
    name, sums = terragrunt_asset_names("windows", "amd64")
    assert name.endswith(".exe")
    assert name.startswith("terragrunt_windows_amd64")
    assert sums == "SHA256SUMS"


@pytest.mark.parametrize(("goos", "arch"), [("darwin", "arm64"), ("linux", "386"), ("freebsd", "arm")])
def test_terragrunt_asset_names_non_windows_structure(goos, arch):
    name, _ = terragrunt_asset_names(goos, arch)
    assert name == "terragrunt_" + goos + "_" + arch