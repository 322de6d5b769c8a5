"""
nconv Package.

Converts unsigned integer literals between binary, octal, decimal and
hexadecimal, with optional zero-padding and digit grouping.

Usage
-----

Simple String Conversion
^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import nconv
    nconv.convert("0xFF", source="hex", target="dec")
    # '255'
    nconv.convert("3735928559", source="dec", target="hex", width=12, grouping=4)
    # '0000 DEAD BEEF'

Pipeline Usage
^^^^^^^^^^^^^^

.. code-block:: python

    from nconv import NumSystem, RuntimeConfig, run

    config = RuntimeConfig(source_radix=NumSystem.BIN, target_radix=NumSystem.DEC, number="1010")
    result = run(config)
    print(result.output)
    # 10
"""

from typing import Union

from nconv.config import RuntimeConfig
from nconv.core.formatting import DEFAULT_SEPARATOR, group_digits, pad_width
from nconv.core.pipeline import ConversionResult, run
from nconv.core.radix import convert_base
from nconv.enums import NumSystem
from nconv.errors import (
  ConversionError,
  InvalidBase,
  InvalidDigit,
  MissingDigits,
  NumberOverflow,
)

__version__ = "0.1.0"


def convert(
  number: str,
  source: Union[NumSystem, str, int],
  target: Union[NumSystem, str, int],
  width: int = 0,
  grouping: int = 0,
  separator: str = DEFAULT_SEPARATOR,
) -> str:
  """
  Converts and formats a literal in one call.

  Args:
      number (str): The literal, optionally prefixed with a matching ``0b``/``0o``/``0x``.
      source: Source system (member, label such as ``"hex"``, or radix).
      target: Target system (member, label, or radix).
      width (int): Minimum output width; 0 disables padding.
      grouping (int): Digits per group; 0 disables grouping.
      separator (str): Group separator.

  Returns:
      str: The formatted result.

  Raises:
      ConversionError: If the literal cannot be converted or a system is unknown.
      pydantic.ValidationError: If width or grouping is negative.
  """
  config = RuntimeConfig(
    source_radix=NumSystem.coerce(source),
    target_radix=NumSystem.coerce(target),
    number=number,
    width=width,
    grouping=grouping,
    separator=separator,
  )
  return run(config).output


__all__ = [
  "ConversionError",
  "ConversionResult",
  "InvalidBase",
  "InvalidDigit",
  "MissingDigits",
  "NumSystem",
  "NumberOverflow",
  "RuntimeConfig",
  "__version__",
  "convert",
  "convert_base",
  "group_digits",
  "pad_width",
  "run",
]
