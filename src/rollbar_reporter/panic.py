from __future__ import annotations

import logging
import sys
import threading
from concurrent.futures import Future
from types import TracebackType
from typing import TYPE_CHECKING, Any, Callable, Optional, Tuple, Type

from .errors import PanicEvent
from .level import Level, LevelLike
from .report import SendStrategy
from .status import ResponseStatus

if TYPE_CHECKING:
  from .client import Client

_logger = logging.getLogger("rollbar_reporter.panic")

_lock = threading.Lock()
_active: Optional["PanicHandler"] = None
# (sys.excepthook, threading.excepthook) as they were before the first install.
_original_hooks: Optional[Tuple[Callable[..., Any], Callable[..., Any]]] = None


class PanicHandler:
  """
  Reports uncaught exceptions, then hands them to the previous hooks.

  Runs synchronously on the thread that raised. Building and dispatching
  the report must never raise out of the hook, so failures are logged and
  dropped; the delivery itself happens in the background.
  """

  def __init__(
    self,
    client: "Client",
    level: Optional[LevelLike] = None,
    send_strategy: Optional[SendStrategy] = None,
  ) -> None:
    self.client = client
    self.level: Optional[Level] = Level.coerce(level) if level is not None else None
    self.send_strategy = send_strategy

  def report(
    self,
    error: BaseException,
    tb: Optional[TracebackType] = None,
  ) -> Optional["Future[Optional[ResponseStatus]]"]:
    try:
      builder = self.client.build_report()
      if self.send_strategy is not None:
        builder.with_send_strategy(self.send_strategy)
      report = builder.from_panic(PanicEvent.from_exception(error, tb))
      if tb is not None:
        report.with_backtrace(tb)
      if self.level is not None:
        report.with_level(self.level)
      return report.send()
    except Exception:
      # Never let reporting replace the original failure.
      _logger.exception("Failed to report an uncaught exception")
      return None

  def excepthook(
    self,
    exc_type: Type[BaseException],
    exc_value: BaseException,
    exc_tb: Optional[TracebackType],
  ) -> None:
    if not issubclass(exc_type, KeyboardInterrupt):
      self.report(exc_value, exc_tb)
    if _original_hooks is not None:
      _original_hooks[0](exc_type, exc_value, exc_tb)

  def threading_excepthook(self, args: "threading.ExceptHookArgs") -> None:
    if args.exc_value is not None and not issubclass(args.exc_type, (KeyboardInterrupt, SystemExit)):
      self.report(args.exc_value, args.exc_traceback)
    if _original_hooks is not None:
      _original_hooks[1](args)


def install_panic_handler(
  client: "Client",
  level: Optional[LevelLike] = None,
  send_strategy: Optional[SendStrategy] = None,
) -> PanicHandler:
  """
  Report every uncaught exception, in the main thread and in other threads.

  Only one handler is active at a time: installing again replaces the
  current handler instead of stacking a second report. The hooks that were
  in place before the first install still run after each report; call
  :func:`uninstall_panic_handler` to restore them.
  """
  global _active, _original_hooks

  handler = PanicHandler(client, level=level, send_strategy=send_strategy)
  with _lock:
    if _original_hooks is None:
      _original_hooks = (sys.excepthook, threading.excepthook)
    sys.excepthook = handler.excepthook
    threading.excepthook = handler.threading_excepthook
    _active = handler
  _logger.debug("Installed panic handler for environment %r", client.environment)
  return handler


def uninstall_panic_handler() -> None:
  """Restore the hooks that were active before the first install."""
  global _active, _original_hooks

  with _lock:
    if _original_hooks is not None:
      sys.excepthook, threading.excepthook = _original_hooks
    _original_hooks = None
    _active = None


def active_panic_handler() -> Optional[PanicHandler]:
  return _active
