"""
Enumerations for nconv.

Defines the supported number systems. Each member is keyed by its command-line
label; the radix value, legal digits and prefix live in an explicit metadata
table rather than being derived from the enum value.
"""

from enum import Enum
from typing import Dict, NamedTuple, Optional, Union

from nconv.errors import InvalidBase

DIGITS = "0123456789ABCDEF"


class RadixInfo(NamedTuple):
  """
  Static description of a positional number system.
  """

  radix: int
  digits: str
  name: str
  prefix: Optional[str]


class NumSystem(str, Enum):
  """
  Supported number systems, identified by their CLI label.
  """

  BIN = "bin"
  OCT = "oct"
  DEC = "dec"
  HEX = "hex"

  @property
  def info(self) -> RadixInfo:
    return _RADIX_TABLE[self]

  @property
  def radix(self) -> int:
    """
    The base of the number system (2, 8, 10 or 16).
    """
    return self.info.radix

  @property
  def digits(self) -> str:
    """
    Uppercase digit characters legal in this system.
    """
    return self.info.digits

  @property
  def display_name(self) -> str:
    return self.info.name

  @property
  def prefix(self) -> Optional[str]:
    """
    The conventional two-character literal prefix, or None for decimal.
    """
    return self.info.prefix

  @classmethod
  def coerce(cls, value: Union["NumSystem", str, int]) -> "NumSystem":
    """
    Resolves a member from a NumSystem, a label or an integer radix.

    Args:
        value: ``NumSystem.HEX``, ``"hex"``/``"HEX"`` or ``16``.

    Returns:
        NumSystem: The matching member.

    Raises:
        InvalidBase: If the value names no supported number system.
    """
    if isinstance(value, cls):
      return value

    # bool is an int subclass, never a radix
    if isinstance(value, int) and not isinstance(value, bool):
      for member, info in _RADIX_TABLE.items():
        if info.radix == value:
          return member
      raise InvalidBase(f"unsupported radix {value}")

    if isinstance(value, str):
      label = value.strip().lower()
      for member in cls:
        if member.value == label:
          return member

    raise InvalidBase(f"unknown number system '{value}'")

  @classmethod
  def from_prefix(cls, text: str) -> Optional["NumSystem"]:
    """
    Maps a literal prefix (``0x``, ``0o``, ``0b``; any case) to its system.

    Args:
        text: The input string. Only the first two characters are inspected.

    Returns:
        Optional[NumSystem]: The implied system, or None if no prefix matches.
    """
    head = text[:2].lower()
    return _PREFIX_TABLE.get(head)


_RADIX_TABLE: Dict[NumSystem, RadixInfo] = {
  NumSystem.BIN: RadixInfo(radix=2, digits=DIGITS[:2], name="binary", prefix="0b"),
  NumSystem.OCT: RadixInfo(radix=8, digits=DIGITS[:8], name="octal", prefix="0o"),
  NumSystem.DEC: RadixInfo(radix=10, digits=DIGITS[:10], name="decimal", prefix=None),
  NumSystem.HEX: RadixInfo(radix=16, digits=DIGITS[:16], name="hexadecimal", prefix="0x"),
}

_PREFIX_TABLE: Dict[str, NumSystem] = {
  info.prefix: member for member, info in _RADIX_TABLE.items() if info.prefix is not None
}
