"""
One-call helpers over the builder chain.

Each helper is equivalent to the chain spelled out in its docstring; build
the chain yourself when a report needs more customization.
"""

from __future__ import annotations

import sys
from concurrent.futures import Future
from typing import TYPE_CHECKING, Any, Optional, Union

from .errors import ReportableError
from .frame import Frame, FrameBuilder, capture_backtrace
from .level import Level, LevelLike
from .panic import PanicHandler, install_panic_handler
from .status import ResponseStatus

if TYPE_CHECKING:
  from .client import Client


def report_error(
  client: "Client",
  error: Union[BaseException, ReportableError],
  level: Optional[LevelLike] = None,
) -> "Future[Optional[ResponseStatus]]":
  """
  Report an error together with where it was caught.

  Equivalent to::

      client.build_report()
          .from_error(error)
          .with_backtrace(error.__traceback__)
          .with_frame(FrameBuilder().with_line_number(<caller line>).build())
          .send()

  Errors that are not exceptions get the current call stack instead.
  """
  report = client.build_report().from_error(error)
  tb = getattr(error, "__traceback__", None)
  report.with_backtrace(tb if tb is not None else capture_backtrace(skip=1))
  report.with_frame(_call_site())
  if level is not None:
    report.with_level(level)
  return report.send()


def report_error_message(
  client: "Client",
  message: Any,
  level: Optional[LevelLike] = None,
) -> "Future[Optional[ResponseStatus]]":
  """
  Report a value's text as an error, with the caller's location and stack.

  Equivalent to::

      client.build_report()
          .from_error_message(message)
          .with_frame(FrameBuilder().with_line_number(<caller line>).build())
          .with_backtrace(capture_backtrace())
          .send()
  """
  report = client.build_report().from_error_message(message)
  report.with_frame(_call_site())
  report.with_backtrace(capture_backtrace(skip=1))
  if level is not None:
    report.with_level(level)
  return report.send()


def report_message(
  client: "Client",
  text: str,
  level: LevelLike = Level.INFO,
) -> "Future[Optional[ResponseStatus]]":
  return client.build_report().from_message(text).with_level(level).send()


def report_panics(client: "Client", level: Optional[LevelLike] = None) -> PanicHandler:
  """Shorthand for :func:`install_panic_handler`."""
  return install_panic_handler(client, level=level)


def _call_site() -> Frame:
  # Two frames up: past this helper and the public shortcut.
  caller = sys._getframe(2)
  return (
    FrameBuilder()
    .with_file_name(caller.f_code.co_filename)
    .with_line_number(caller.f_lineno)
    .with_function_name(caller.f_code.co_name)
    .build()
  )
