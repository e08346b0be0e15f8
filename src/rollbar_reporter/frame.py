from __future__ import annotations

import sys
import traceback
from types import TracebackType
from typing import Any, Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict

Backtrace = Union[TracebackType, traceback.StackSummary, Iterable[Any]]


class Frame(BaseModel):
  """
  A single stack frame as the item API expects it.

  Unset optional fields are dropped from the serialized form rather than
  sent as null.
  """

  model_config = ConfigDict(frozen=True)

  filename: str
  lineno: Optional[int] = None
  colno: Optional[int] = None
  method: Optional[str] = None

  def to_dict(self) -> dict[str, Any]:
    return self.model_dump(exclude_none=True)


class FrameBuilder:
  """
  Fluent constructor for :class:`Frame`.

  The file name defaults to the source file of the code creating the
  builder, so ``FrameBuilder().with_line_number(n).build()`` points at the
  call site.
  """

  def __init__(self, _depth: int = 1) -> None:
    self._filename: str = _caller_filename(_depth)
    self._lineno: Optional[int] = None
    self._colno: Optional[int] = None
    self._method: Optional[str] = None

  def with_file_name(self, filename: str) -> "FrameBuilder":
    self._filename = filename
    return self

  def with_line_number(self, lineno: int) -> "FrameBuilder":
    self._lineno = lineno
    return self

  def with_column_number(self, colno: int) -> "FrameBuilder":
    self._colno = colno
    return self

  def with_function_name(self, method: str) -> "FrameBuilder":
    self._method = method
    return self

  def build(self) -> Frame:
    return Frame(
      filename=self._filename,
      lineno=self._lineno,
      colno=self._colno,
      method=self._method,
    )


def frames_from_backtrace(backtrace: Backtrace) -> List[Frame]:
  """
  Convert a captured call stack into frames, oldest call first.

  Accepts a traceback object, a ``traceback.StackSummary`` or any iterable
  of objects exposing ``filename``, ``lineno``, ``colno`` and ``name``.
  Extraction is best effort: a missing file name becomes an empty string
  and any other missing attribute is left unset.
  """
  if isinstance(backtrace, TracebackType):
    symbols: Iterable[Any] = traceback.extract_tb(backtrace)
  else:
    symbols = backtrace

  frames: List[Frame] = []
  for symbol in symbols:
    frames.append(
      Frame(
        filename=getattr(symbol, "filename", None) or "",
        lineno=_optional_int(getattr(symbol, "lineno", None)),
        colno=_optional_int(getattr(symbol, "colno", None)),
        method=getattr(symbol, "name", None) or None,
      )
    )
  return frames


def capture_backtrace(skip: int = 0) -> traceback.StackSummary:
  """
  Capture the current call stack, ending at the caller of this function.

  ``skip`` drops that many additional innermost frames, for helpers that
  capture on behalf of their own caller.
  """
  return traceback.extract_stack(sys._getframe(1 + skip))


def _caller_filename(depth: int) -> str:
  try:
    return sys._getframe(depth + 1).f_code.co_filename
  except ValueError:
    return ""


def _optional_int(value: Any) -> Optional[int]:
  if value is None:
    return None
  try:
    number = int(value)
  except (TypeError, ValueError):
    return None
  return number if number >= 0 else None
