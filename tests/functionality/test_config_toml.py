"""
Tests for Config Persistence (TOML).

Verifies that:
1. RuntimeConfig.load() picks up [tool.nconv] from pyproject.toml.
2. CLI arguments override TOML settings.
3. File traversal finds toml in parent directories.
4. Without any TOML, the command-line defaults apply.
5. TOML grouping and width are held to the command-line option range.
"""

import pytest
from pydantic import ValidationError

from nconv.config import DEFAULT_GROUPING, DEFAULT_WIDTH, MAX_OPTION, RuntimeConfig
from nconv.enums import NumSystem


@pytest.fixture
def toml_file(tmp_path):
  """Creates a dummy pyproject.toml in the temp dir."""
  fpath = tmp_path / "pyproject.toml"
  content = """
[tool.nconv]
grouping = 4
width = 8
separator = "_"
"""
  fpath.write_text(content, encoding="utf-8")
  return fpath


def test_load_defaults_from_toml(tmp_path, toml_file):
  config = RuntimeConfig.load("dec", "hex", "255", search_path=tmp_path)

  assert config.grouping == 4
  assert config.width == 8
  assert config.separator == "_"
  assert config.source_radix is NumSystem.DEC
  assert config.target_radix is NumSystem.HEX


def test_cli_overrides_toml(tmp_path, toml_file):
  config = RuntimeConfig.load("dec", "hex", "255", grouping=2, search_path=tmp_path)

  assert config.grouping == 2  # CLI wins
  assert config.width == 8  # TOML fallback


def test_toml_found_in_parent(tmp_path, toml_file):
  nested = tmp_path / "a" / "b"
  nested.mkdir(parents=True)

  config = RuntimeConfig.load("dec", "hex", "255", search_path=nested)
  assert config.width == 8


def test_toml_without_section_uses_defaults(tmp_path):
  (tmp_path / "pyproject.toml").write_text("[project]\nname = 'other'\n", encoding="utf-8")

  config = RuntimeConfig.load("dec", "hex", "255", search_path=tmp_path)

  assert config.grouping == DEFAULT_GROUPING
  assert config.width == DEFAULT_WIDTH
  assert config.separator == " "


def test_invalid_toml_value_is_rejected(tmp_path):
  (tmp_path / "pyproject.toml").write_text("[tool.nconv]\nwidth = -3\n", encoding="utf-8")

  with pytest.raises(ValidationError):
    RuntimeConfig.load("dec", "hex", "255", search_path=tmp_path)


@pytest.mark.parametrize("key", ["grouping", "width"])
def test_toml_value_above_option_range_is_rejected(tmp_path, key):
  (tmp_path / "pyproject.toml").write_text(f"[tool.nconv]\n{key} = {MAX_OPTION + 1}\n", encoding="utf-8")

  with pytest.raises(ValidationError) as excinfo:
    RuntimeConfig.load("dec", "hex", "255", search_path=tmp_path)

  assert excinfo.value.errors()[0]["loc"] == (key,)


def test_toml_range_bounds_are_accepted(tmp_path):
  (tmp_path / "pyproject.toml").write_text(f"[tool.nconv]\ngrouping = 0\nwidth = {MAX_OPTION}\n", encoding="utf-8")

  config = RuntimeConfig.load("dec", "hex", "255", search_path=tmp_path)

  assert config.grouping == 0  # still switches grouping off
  assert config.width == MAX_OPTION


def test_out_of_range_toml_is_rejected_despite_cli_override(tmp_path):
  (tmp_path / "pyproject.toml").write_text("[tool.nconv]\nwidth = 5000\n", encoding="utf-8")

  with pytest.raises(ValidationError):
    RuntimeConfig.load("dec", "hex", "255", width=4, search_path=tmp_path)
