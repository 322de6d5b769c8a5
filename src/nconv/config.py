"""
Runtime Configuration Store.

Holds the immutable per-invocation settings and resolves display defaults
from ``[tool.nconv]`` in the nearest ``pyproject.toml``.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nconv.core.formatting import DEFAULT_SEPARATOR
from nconv.enums import NumSystem

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

# Option range accepted by the command line.
MIN_OPTION = 1
MAX_OPTION = 256

DEFAULT_GROUPING = 1
DEFAULT_WIDTH = 1


class _TomlDefaults(BaseModel):
  """
  Display defaults read from ``[tool.nconv]``.

  Values are held to the command-line option range; 0 still switches
  grouping or padding off.
  """

  grouping: Optional[int] = Field(None, ge=0, le=MAX_OPTION)
  width: Optional[int] = Field(None, ge=0, le=MAX_OPTION)
  separator: Optional[str] = None


class RuntimeConfig(BaseModel):
  """
  Settings for a single conversion run.
  """

  model_config = ConfigDict(frozen=True)

  source_radix: NumSystem = Field(..., description="Number system of the input literal.")
  target_radix: NumSystem = Field(..., description="Number system of the output.")
  number: str = Field(..., description="The raw input literal, optionally prefixed.")
  grouping: int = Field(0, ge=0, description="Digits per group; 0 disables grouping.")
  width: int = Field(0, ge=0, description="Minimum number of output characters.")
  separator: str = Field(DEFAULT_SEPARATOR, description="Character placed between digit groups.")

  @field_validator("source_radix", "target_radix", mode="before")
  @classmethod
  def validate_system(cls, v: Any) -> NumSystem:
    """
    Accepts members, labels (``"hex"``) and integer radixes.

    Raises:
        InvalidBase: If the value names no supported number system.
    """
    return NumSystem.coerce(v)

  @field_validator("separator")
  @classmethod
  def validate_separator(cls, v: str) -> str:
    if len(v) != 1:
      raise ValueError(f"separator must be a single character, got {v!r}")
    return v

  @classmethod
  def load(
    cls,
    source: Union[NumSystem, str, int],
    target: Union[NumSystem, str, int],
    number: str,
    grouping: Optional[int] = None,
    width: Optional[int] = None,
    separator: Optional[str] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Builds a configuration from CLI values, falling back to pyproject.toml.

    Args:
        source: Source number system.
        target: Target number system.
        number: The literal to convert.
        grouping: Override for the grouping size.
        width: Override for the minimum width.
        separator: Override for the group separator.
        search_path: Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.

    Raises:
        ValidationError: If a TOML default lies outside ``[0, MAX_OPTION]`` or
            the merged settings are invalid.
        TOMLDecodeError: If the pyproject.toml is malformed.
        OSError: If the pyproject.toml cannot be read.
    """
    toml_table, _ = _load_toml_settings(search_path or Path.cwd())
    toml_config = _TomlDefaults.model_validate(toml_table)

    final_grouping = _first_set(grouping, toml_config.grouping, DEFAULT_GROUPING)
    final_width = _first_set(width, toml_config.width, DEFAULT_WIDTH)
    final_separator = _first_set(separator, toml_config.separator, DEFAULT_SEPARATOR)

    return cls(
      source_radix=source,
      target_radix=target,
      number=number,
      grouping=final_grouping,
      width=final_width,
      separator=final_separator,
    )


def _first_set(*values: Any) -> Any:
  return next(v for v in values if v is not None)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches ``start_path`` and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The ``[tool.nconv]`` table and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      with open(toml_path, "rb") as f:
        data = tomllib.load(f)
      return data.get("tool", {}).get("nconv", {}), parent

  return {}, None
