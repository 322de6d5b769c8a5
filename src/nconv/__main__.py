"""
Entry point for module execution (``python -m nconv``).

This module delegates execution to the CLI handler in ``nconv.cli.__main__``.
"""

import sys
from nconv.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
