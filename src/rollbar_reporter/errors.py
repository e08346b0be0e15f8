from __future__ import annotations

import traceback
from dataclasses import dataclass
from types import TracebackType
from typing import Any, Optional, Protocol, runtime_checkable

UNKNOWN_PANIC_PAYLOAD = "<unknown panic payload>"


@runtime_checkable
class ReportableError(Protocol):
  """
  The narrow interface an error value offers to the report builders.

  Exceptions do not need to implement it; ``ExceptionAdapter`` provides it
  for any ``BaseException``.
  """

  def short_description(self) -> str:
    ...

  def cause(self) -> Optional["ReportableError"]:
    ...

  def debug_rendering(self) -> str:
    ...


class ExceptionAdapter:
  """
  ``ReportableError`` view of a Python exception.
  """

  def __init__(self, error: BaseException) -> None:
    self.error = error

  def short_description(self) -> str:
    return str(self.error) or type(self.error).__name__

  def cause(self) -> Optional["ExceptionAdapter"]:
    cause = self.error.__cause__
    if cause is None and not self.error.__suppress_context__:
      cause = self.error.__context__
    return ExceptionAdapter(cause) if cause is not None else None

  def debug_rendering(self) -> str:
    error = self.error
    return "".join(traceback.format_exception(type(error), error, error.__traceback__))

  def __str__(self) -> str:
    return str(self.error)

  def __repr__(self) -> str:
    return f"ExceptionAdapter({self.error!r})"


@dataclass(frozen=True)
class PanicLocation:
  file: str
  line: Optional[int] = None


@dataclass(frozen=True)
class PanicEvent:
  """
  An uncaught exception as seen by the process-wide hooks.

  ``payload`` is normally the exception text; ``location`` is where it was
  raised, when a traceback was available.
  """

  payload: Any
  location: Optional[PanicLocation] = None

  @classmethod
  def from_exception(
    cls,
    error: BaseException,
    tb: Optional[TracebackType] = None,
  ) -> "PanicEvent":
    tb = tb if tb is not None else error.__traceback__
    location = None
    if tb is not None:
      summary = traceback.extract_tb(tb)
      if summary:
        innermost = summary[-1]
        location = PanicLocation(file=innermost.filename, line=innermost.lineno)
    return cls(payload=str(error) or type(error).__name__, location=location)

  def message(self) -> str:
    if isinstance(self.payload, str) and self.payload:
      return self.payload
    return UNKNOWN_PANIC_PAYLOAD
