"""
Prefix Resolver.

Decides which part of the raw literal holds the digits and which radix they
are written in. A literal prefix must agree with the declared source system;
it confirms the radix and never overrides it.
"""

import logging
from typing import NamedTuple, Optional

from nconv.enums import NumSystem
from nconv.errors import InvalidBase

logger = logging.getLogger(__name__)

PREFIX_LEN = 2


class ResolvedNumber(NamedTuple):
  """
  Outcome of prefix resolution.

  Attributes:
      digits: The digit substring to parse (may be empty).
      system: The radix to parse the digits under.
      prefix: The prefix that was stripped, as written by the caller, or None.
  """

  digits: str
  system: NumSystem
  prefix: Optional[str]


def resolve_prefix(number: str, source: NumSystem) -> ResolvedNumber:
  """
  Strips a matching ``0x``/``0o``/``0b`` prefix from ``number``.

  Args:
      number: The raw literal supplied by the caller.
      source: The declared source number system.

  Returns:
      ResolvedNumber: Digits, effective system and stripped prefix.

  Raises:
      InvalidBase: If the prefix implies a different radix than ``source``.
  """
  implied = NumSystem.from_prefix(number)
  if implied is None:
    return ResolvedNumber(number, source, None)

  if implied is not source:
    raise InvalidBase(f"prefix '{number[:PREFIX_LEN]}' does not match source base '{source.value}'")

  logger.debug("Stripped %s prefix %r", implied.display_name, number[:PREFIX_LEN])
  return ResolvedNumber(number[PREFIX_LEN:], source, number[:PREFIX_LEN])
