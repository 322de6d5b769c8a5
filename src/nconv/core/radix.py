"""
Radix Converter.

Converts a literal in two phases: every source system is parsed into a common
unsigned 128-bit intermediate, and every target system is rendered from it.
The 128-bit bound is enforced while parsing, digit by digit.
"""

import logging
from typing import Dict, List, Union

from nconv.core.prefix import resolve_prefix
from nconv.enums import DIGITS, NumSystem
from nconv.errors import U128_MAX, InvalidDigit, MissingDigits, NumberOverflow

logger = logging.getLogger(__name__)

SystemLike = Union[NumSystem, str, int]

# Both cases map to the same value; anything absent is never a digit.
_DIGIT_VALUES: Dict[str, int] = {char: value for value, char in enumerate(DIGITS)}
_DIGIT_VALUES.update({char.lower(): value for value, char in enumerate(DIGITS)})


def digit_value(char: str, source: NumSystem) -> int:
  """
  Maps one digit character to its numeric value under ``source``.

  Args:
      char: A single character.
      source: The system the character is written in.

  Returns:
      int: The digit value, in ``range(source.radix)``.

  Raises:
      InvalidDigit: If the character is not a legal digit of ``source``.
  """
  value = _DIGIT_VALUES.get(char)
  if value is None or value >= source.radix:
    raise InvalidDigit(char)
  return value


def parse_digits(digits: str, source: NumSystem) -> int:
  """
  Accumulates a digit string into an unsigned 128-bit integer.

  Digits are scanned most-significant first. The 128-bit bound is checked
  after both the multiply and the add of every step. An empty string parses
  to zero.

  Args:
      digits: Digit characters with any prefix already removed.
      source: The radix the digits are written in.

  Returns:
      int: The decoded value, ``0 <= value <= U128_MAX``.

  Raises:
      InvalidDigit: On the first character that is not legal in ``source``.
      NumberOverflow: If the value exceeds ``U128_MAX``.
  """
  radix = source.radix
  accumulator = 0
  for char in digits:
    value = digit_value(char, source)

    accumulator *= radix
    if accumulator > U128_MAX:
      raise NumberOverflow()

    accumulator += value
    if accumulator > U128_MAX:
      raise NumberOverflow()

  return accumulator


def render_value(value: int, target: NumSystem) -> str:
  """
  Renders an unsigned 128-bit integer in the target radix.

  Args:
      value: Integer in ``[0, U128_MAX]``.
      target: The output number system.

  Returns:
      str: Uppercase digits, most significant first. Zero renders as ``"0"``.

  Raises:
      NumberOverflow: If ``value`` lies outside the 128-bit unsigned range.
  """
  if value < 0 or value > U128_MAX:
    raise NumberOverflow(f"{value} is not an unsigned 128 bit value")

  if value == 0:
    return "0"

  radix = target.radix
  collected: List[str] = []
  while value > 0:
    value, remainder = divmod(value, radix)
    collected.append(DIGITS[remainder])

  return "".join(reversed(collected))


def convert_base(number: str, source: SystemLike, target: SystemLike) -> str:
  """
  Converts ``number`` from the ``source`` system into the ``target`` system.

  A ``0b``/``0o``/``0x`` prefix is accepted when it matches ``source``.

  Args:
      number: The literal to convert, e.g. ``"0xFF"`` or ``"1010"``.
      source: Source system (member, label such as ``"hex"``, or radix).
      target: Target system (member, label, or radix).

  Returns:
      str: The converted digit string.

  Raises:
      InvalidBase: If a system is unsupported or the prefix disagrees with ``source``.
      InvalidDigit: If a digit is illegal in the source system, or a prefix has no digits.
      NumberOverflow: If the value exceeds 128 bits.
  """
  src = NumSystem.coerce(source)
  tgt = NumSystem.coerce(target)

  resolved = resolve_prefix(number, src)
  if resolved.prefix is not None and not resolved.digits:
    raise MissingDigits(resolved.prefix)

  value = parse_digits(resolved.digits, resolved.system)
  converted = render_value(value, tgt)
  logger.debug("%s %r -> %d -> %s %r", src.display_name, resolved.digits, value, tgt.display_name, converted)
  return converted
