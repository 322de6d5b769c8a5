"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console and logging isolation between tests.
"""

import sys
from pathlib import Path

import pytest

# Add src to path so we can import 'nconv' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from nconv.utils.console import reset_console  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_console():
  """Ensures every test starts with a fresh stderr console at WARNING level."""
  reset_console()
  yield
  reset_console()


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
  """Runs the test from an empty directory so no pyproject.toml defaults leak in."""
  monkeypatch.chdir(tmp_path)
  return tmp_path
