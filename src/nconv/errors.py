"""
Conversion Error Hierarchy.

All failures of the conversion pipeline derive from ``ConversionError``.
Library code raises them; the CLI handler is the only layer that turns them
into an exit status and a message.
"""

from typing import Optional

# Largest value representable by the 128-bit intermediate.
U128_MAX = (1 << 128) - 1


class ConversionError(ValueError):
  """
  Base class for terminal pipeline failures.
  """

  description = "conversion failed"

  def __init__(self, detail: Optional[str] = None) -> None:
    self.detail = detail
    super().__init__(self.message)

  @property
  def message(self) -> str:
    """
    Human readable description used for ``error: <description>`` output.
    """
    if self.detail:
      return f"{self.description}: {self.detail}"
    return self.description


class InvalidDigit(ConversionError):
  """
  A character is not a legal digit under the resolved source radix.

  Attributes:
      char (str): The offending character.
  """

  description = "invalid digit"

  def __init__(self, char: str) -> None:
    self.char = char
    super().__init__(f"'{char}'")


class MissingDigits(InvalidDigit):
  """
  A literal prefix is not followed by any digits (e.g. ``"0x"``).
  """

  description = "missing digits"

  def __init__(self, prefix: str) -> None:
    self.prefix = prefix
    self.char = ""
    ConversionError.__init__(self, f"nothing follows prefix '{prefix}'")


class NumberOverflow(ConversionError):
  """
  The value does not fit in the 128-bit intermediate.
  """

  description = "input value exceeds 128 bit limit"


class InvalidBase(ConversionError):
  """
  A prefix conflicts with the declared source radix, or a radix is unsupported.
  """

  description = "invalid base"
