"""
Core conversion stages.

Modules:
    - ``prefix``: Literal prefix detection and validation.
    - ``radix``: Parsing into the 128-bit intermediate and rendering from it.
    - ``formatting``: Zero-padding and digit grouping.
    - ``pipeline``: Composition of the stages driven by ``RuntimeConfig``.
"""

from nconv.core.formatting import group_digits, pad_width
from nconv.core.prefix import ResolvedNumber, resolve_prefix
from nconv.core.radix import convert_base, parse_digits, render_value

__all__ = [
  "ResolvedNumber",
  "convert_base",
  "group_digits",
  "pad_width",
  "parse_digits",
  "render_value",
  "resolve_prefix",
]
