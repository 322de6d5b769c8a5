"""
Convert Command Handler.

Runs the conversion pipeline for one literal and maps the outcome onto the
process interface: the result on stdout with exit code 0, or an
``error: <description>`` line on stderr with exit code 1.
"""

from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from nconv.config import RuntimeConfig, tomllib
from nconv.core.pipeline import run
from nconv.errors import ConversionError
from nconv.utils.console import log_info, log_success, print_error


def handle_convert(
  source: str,
  target: str,
  number: str,
  grouping: Optional[int] = None,
  width: Optional[int] = None,
  separator: Optional[str] = None,
  search_path: Optional[Path] = None,
) -> int:
  """
  Handles the conversion command execution.

  Args:
      source: Source number system label (e.g. 'hex').
      target: Target number system label (e.g. 'dec').
      number: The literal to convert.
      grouping: Digits per group, or None for the configured default.
      width: Minimum output width, or None for the configured default.
      separator: Group separator, or None for the configured default.
      search_path: Directory to start the pyproject.toml lookup from.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  try:
    config = RuntimeConfig.load(
      source,
      target,
      number,
      grouping=grouping,
      width=width,
      separator=separator,
      search_path=search_path,
    )
  except ValidationError as e:
    print_error(_describe_validation_error(e))
    return 1
  except (tomllib.TOMLDecodeError, UnicodeDecodeError, OSError) as e:
    # Unreadable or malformed pyproject.toml
    print_error(f"invalid configuration: {e}")
    return 1

  log_info(
    f"Converting '{config.number}' from {config.source_radix.display_name} to {config.target_radix.display_name}"
  )

  try:
    result = run(config)
  except ConversionError as e:
    print_error(e.message)
    return 1

  log_success(f"Converted to {result.converted}")
  print(result.output)
  return 0


def _describe_validation_error(error: ValidationError) -> str:
  """
  Flattens a pydantic error into a one-line message.
  """
  parts = []
  for item in error.errors():
    loc = ".".join(str(p) for p in item["loc"])
    ctx_error = item.get("ctx", {}).get("error")
    if isinstance(ctx_error, ConversionError):
      parts.append(f"{loc}: {ctx_error.message}")
    else:
      parts.append(f"{loc}: {item['msg']}")
  return "; ".join(parts)
