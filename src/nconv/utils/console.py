"""
Central Logging and Console Utilities.

This module unifies diagnostic output using the Python standard `logging`
library, backed by `rich` for formatting.

Diagnostics (log records and error messages) go to a Rich Console bound to
standard error, so standard output carries nothing but conversion results.
The console sits behind a proxy so the destination can be swapped at runtime
via `set_console`, e.g. to capture output in tests or when embedding.

Attributes:
    console (_ConsoleProxy): A global, stable reference to the active Rich Console.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.theme import Theme

# Define custom logging level for Success (higher than INFO, lower than WARNING)
SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme(
  {
    "logging.level.success": "green",
    "error": "bold red",
  }
)


def _make_console() -> Console:
  return Console(theme=_THEME, stderr=True)


class _ConsoleProxy:
  """
  A Proxy wrapper around `rich.console.Console`.

  All printing operations are forwarded to the active backend. When the
  backend changes, the root logger's RichHandler is rebuilt so that
  `logging.info(...)` follows it to the new destination.

  Attributes:
      _backend (Console): The active Rich Console instance.
  """

  def __init__(self) -> None:
    self._backend: Console = _make_console()
    self._level = logging.WARNING
    self._configure_logging()

  def set_backend(self, new_console: Console) -> None:
    """
    Injects a new Console backend and updates logging handlers.

    Args:
        new_console (Console): The new Rich Console instance to use.
    """
    self._backend = new_console
    self._configure_logging()

  def reset(self) -> None:
    """
    Resets the proxy to a fresh standard error console at WARNING level.
    """
    self._backend = _make_console()
    self._level = logging.WARNING
    self._configure_logging()

  def set_level(self, level: int) -> None:
    self._level = level
    logging.getLogger().setLevel(level)

  @property
  def backend(self) -> Console:
    return self._backend

  def _configure_logging(self) -> None:
    """
    Points the root logger at the current backend console.
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
      if isinstance(handler, RichHandler):
        root_logger.removeHandler(handler)

    rich_handler = RichHandler(
      console=self._backend,
      show_time=False,
      omit_repeated_times=False,
      show_path=False,
      markup=False,
      rich_tracebacks=True,
    )

    root_logger.setLevel(self._level)
    root_logger.addHandler(rich_handler)

  def print(self, *args: Any, **kwargs: Any) -> None:
    self._backend.print(*args, **kwargs)

  def export_text(self, **kwargs: Any) -> str:
    """
    Forwards `export_text` (useful for log capturing).
    """
    return self._backend.export_text(**kwargs)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Global helper to inject a specific console instance.

  Args:
      new_console (Console): The configured Rich console to use globally.
  """
  console.set_backend(new_console)


def reset_console() -> None:
  """
  Global helper to reset logging and console to standard error.
  """
  console.reset()


def get_console() -> Console:
  """
  Retrieves the currently active console backend.

  Returns:
      Console: The active Rich Console.
  """
  return console.backend


def set_verbose(verbose: bool) -> None:
  """
  Switches the root logger between DEBUG and WARNING.

  Args:
      verbose (bool): True to show pipeline stage details.
  """
  console.set_level(logging.DEBUG if verbose else logging.WARNING)


def print_error(msg: str) -> None:
  """
  Prints a terminal failure as ``error: <msg>``.

  Args:
      msg (str): Plain text description; markup characters are escaped.
  """
  console.print(f"[error]error:[/error] {escape(msg)}", soft_wrap=True, highlight=False, emoji=False)


def log_info(msg: str) -> None:
  """
  Logs an informational message via standard logging.
  """
  logging.info(msg)


def log_success(msg: str) -> None:
  logging.log(SUCCESS_LEVEL_NUM, msg)
