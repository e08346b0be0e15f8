from __future__ import annotations

import threading
from concurrent.futures import Future
from typing import Any, Callable, TypeVar

T = TypeVar("T")


def dispatch(work: Callable[..., T], *args: Any, name: str = "rollbar-reporter-send") -> "Future[T]":
  """
  Run ``work(*args)`` on a fresh background thread.

  Returns immediately with a future for the result. Exceptions raised by
  ``work`` are set on the future and never reach the calling thread.

  The thread is not a daemon: the interpreter waits for in-flight
  deliveries at exit, so a report sent from an exception hook still leaves.
  """
  future: "Future[T]" = Future()

  def _run() -> None:
    if not future.set_running_or_notify_cancel():
      return
    try:
      result = work(*args)
    except BaseException as exc:
      future.set_exception(exc)
    else:
      future.set_result(result)

  thread = threading.Thread(target=_run, name=name, daemon=False)
  thread.start()
  return future


def resolved(value: T) -> "Future[T]":
  """A future that is already done with ``value``."""
  future: "Future[T]" = Future()
  future.set_result(value)
  return future
