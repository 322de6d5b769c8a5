"""
Output Formatting.

Zero-padding and digit grouping for rendered numbers. The two functions are
independent; the pipeline pads first and groups the padded result.
"""

from typing import List

DEFAULT_SEPARATOR = " "


def pad_width(digits: str, width: int) -> str:
  """
  Left-pads ``digits`` with zeros to at least ``width`` characters.

  Args:
      digits: The rendered number.
      width: Minimum output length. Values <= the current length are no-ops.

  Returns:
      str: The padded string, of length ``max(len(digits), width)``.
  """
  missing = width - len(digits)
  if missing <= 0:
    return digits
  return "0" * missing + digits


def group_digits(digits: str, grouping: int, separator: str = DEFAULT_SEPARATOR) -> str:
  """
  Inserts ``separator`` every ``grouping`` characters, counted from the right.

  Only the leftmost group may be shorter than ``grouping``. A grouping of 0
  (or less) disables grouping.

  Args:
      digits: The (possibly padded) number.
      grouping: Characters per group.
      separator: String placed between groups.

  Returns:
      str: The grouped string.

  Example:
      >>> group_digits("1234567", 3)
      '1 234 567'
  """
  if grouping <= 0 or len(digits) <= grouping:
    return digits

  head = len(digits) % grouping
  groups: List[str] = [digits[:head]] if head else []
  for start in range(head, len(digits), grouping):
    groups.append(digits[start : start + grouping])

  return separator.join(groups)
