"""
Main Entry Point for the nconv CLI.

This module handles argument parsing and dispatches to the command handler
defined in `nconv.cli.handlers`.
"""

import argparse
import sys
from typing import List, Optional

from nconv import __version__
from nconv.cli import handlers
from nconv.config import MAX_OPTION, MIN_OPTION
from nconv.enums import NumSystem
from nconv.utils.console import set_verbose

EXAMPLES = """\
examples:
  nconv hex dec 0xFF                  --> 2 5 5
  nconv -g 3 hex dec 0xDEADBEEF       --> 3 735 928 559
  nconv dec bin 3735928559 -g 32      --> 11011110101011011011111011101111
  nconv dec oct 3735928559 -g 11      --> 33653337357
  nconv -g 4 dec hex 3735928559       --> DEAD BEEF
  nconv -g 4 -w 12 dec hex 3735928559 --> 0000 DEAD BEEF
"""


def bounded_int(raw: str) -> int:
  """
  Argparse type for ``--grouping``/``--width``: an integer in [1, 256].

  Raises:
      argparse.ArgumentTypeError: If the value is not an integer in range.
  """
  try:
    value = int(raw)
  except ValueError:
    raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")

  if not MIN_OPTION <= value <= MAX_OPTION:
    raise argparse.ArgumentTypeError(f"{value} is not in {MIN_OPTION}..={MAX_OPTION}")
  return value


def build_parser() -> argparse.ArgumentParser:
  systems = [s.value for s in NumSystem]

  parser = argparse.ArgumentParser(
    prog="nconv",
    description="Convert numbers between binary, octal, decimal and hexadecimal.",
    epilog=EXAMPLES,
    formatter_class=argparse.RawDescriptionHelpFormatter,
  )
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("source", choices=systems, metavar="SRC_BASE", help="source number system (%(choices)s)")
  parser.add_argument("target", choices=systems, metavar="TGT_BASE", help="target number system (%(choices)s)")
  parser.add_argument("number", metavar="NUM", help="a positive integer in the source number system")
  parser.add_argument(
    "-g",
    "--grouping",
    type=bounded_int,
    default=None,
    help="how to visually group the digits in the output number (default: 1)",
  )
  parser.add_argument(
    "-w",
    "--width",
    type=bounded_int,
    default=None,
    help="minimum number of digits in the output (default: 1)",
  )
  parser.add_argument(
    "-s",
    "--separator",
    default=None,
    help="character placed between digit groups (default: space)",
  )
  parser.add_argument("-v", "--verbose", action="store_true", help="log each pipeline stage to stderr")
  return parser


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, 1 for a failed conversion).
  """
  parser = build_parser()
  args = parser.parse_args(argv)

  set_verbose(args.verbose)

  return handlers.handle_convert(
    args.source,
    args.target,
    args.number,
    grouping=args.grouping,
    width=args.width,
    separator=args.separator,
  )


if __name__ == "__main__":
  sys.exit(main())
