"""
Conversion Pipeline.

Composes the stages left to right:
prefix resolution -> radix conversion -> zero-padding -> digit grouping.
"""

import logging

from pydantic import BaseModel, ConfigDict, Field

from nconv.config import RuntimeConfig
from nconv.core.formatting import group_digits, pad_width
from nconv.core.radix import convert_base

logger = logging.getLogger(__name__)


class ConversionResult(BaseModel):
  """
  Structured result of a single conversion, including intermediate stages.
  """

  model_config = ConfigDict(frozen=True)

  converted: str = Field(..., description="Digits in the target system, unformatted.")
  padded: str = Field(..., description="The converted digits after zero-padding.")
  output: str = Field(..., description="The final display string.")

  def __str__(self) -> str:
    return self.output


def run(config: RuntimeConfig) -> ConversionResult:
  """
  Executes the full pipeline for ``config``.

  Args:
      config: Immutable run settings.

  Returns:
      ConversionResult: The final output and its intermediate forms.

  Raises:
      ConversionError: If any stage fails. No partial result is produced.
  """
  converted = convert_base(config.number, config.source_radix, config.target_radix)
  padded = pad_width(converted, config.width)
  output = group_digits(padded, config.grouping, config.separator)

  logger.debug("Formatted %r (width=%d, grouping=%d) as %r", converted, config.width, config.grouping, output)
  return ConversionResult(converted=converted, padded=padded, output=output)
