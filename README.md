# iacver

`iacver` is a library of building blocks for working with versions of
infrastructure-as-code tools: OpenTofu, Terraform, Terragrunt and Atmos. It
parses and compares versions, checks version constraints, finds the requested
version in version files, and names release assets. It has no command-line
entry point and no dependencies outside the standard library.

## Installation

```
pip install iacver
```

## Modules

- `iacver.version`: `parse_version` returns a `Version`. `Version.compare`
  returns -1, 0 or 1, and a pre-release sorts before its release.
  `parse_constraint` parses comma separated constraints (`=`, `!=`, `>`, `<`,
  `>=`, `<=`, `~>`) into a `Constraints` object, and `Constraints.check` tests a
  `Version` against them. `find_version` takes the first version out of some
  text, such as a release URL, and drops a leading `v`. Parse failures raise
  `VersionError`, which is a `ValueError`.
- `iacver.display`: `Displayer` writes messages and log lines to a stream,
  which is standard error by default. It can hold messages until
  `flush(proxy_call)`. A proxy call drops the held messages. Any other call
  writes them and switches to direct display. `display_detection_info`
  reports where a version was found.
- `iacver.parsers`: readers for version files.
  - `retrieve_flat_version` reads a plain version file.
  - `retrieve_tool_version` and `parse_tool_versions` read an asdf
    `.tool-versions` file.
  - `retrieve_toml_version` reads the `version` key of a TOML file such as
    `.tgswitch.toml`.
  - `retrieve_version` takes a list of `VersionFile` entries and searches each
    directory from the working directory up to the filesystem root. It then
    searches a given user directory.

  Missing files give an empty string.
- `iacver.lastuse`: `write_last_use` records today's date in `last-use.txt`
  inside a version directory. `read_last_use` returns that date, or `None` when
  it cannot be read.
- `iacver.assets`: Terraform and Terragrunt asset naming.
  - `terraform_asset_names` and `terragrunt_asset_names` name the assets.
  - `terraform_install_version` gives the version without a leading `v`.
  - `terragrunt_tag` gives the tag with a leading `v`.
- `iacver.tofu_assets`: OpenTofu and Atmos asset naming.
  - `split_tag` splits a version into the bare version and its tag.
  - `tofu_asset_names` names the archive, checksum, certificate and signature
    assets. Stable releases also get a PGP signature asset.
  - `tofu_identity` gives the expected signing identity.
  - `atmos_asset_names` names the Atmos binary and checksum assets.
- `iacver.proxy`: `exec_path` returns the executable path inside an installed
  version directory and records its use today. `work_path_from_args` returns
  the directory of the first `-chdir=` argument, or `None`.

## Example

```python
from functools import cmp_to_key

from iacver.version import find_version, parse_constraint, parse_version

versions = [parse_version(v) for v in ["1.6.0-beta5", "1.5.2", "1.6.0", "1.5.1"]]
versions.sort(key=cmp_to_key(lambda a, b: a.compare(b)))
print([str(v) for v in versions])
# ['1.5.1', '1.5.2', '1.6.0-beta5', '1.6.0']

constraints = parse_constraint(">= 1.5, < 2.0")
print(constraints.check(parse_version("1.6.0")))  # True

print(find_version("terraform/v1.7.1/"))  # 1.7.1
```

## What it does not do

`iacver` does not download, verify, install or uninstall tool versions. It
does not list remote releases and does not run the tools. It has no
command-line interface. It provides the version logic, the file lookups and
the asset names that such a tool would build on.

## Running the tests

```
pip install -e ".[test]"
pytest
```