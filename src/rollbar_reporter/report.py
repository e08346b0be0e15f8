from __future__ import annotations

import json
from abc import ABC, abstractmethod
from concurrent.futures import Future
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Union

from .errors import ExceptionAdapter, PanicEvent, ReportableError
from .frame import Backtrace, Frame, frames_from_backtrace
from .level import Level, LevelLike
from .status import ResponseStatus
from .trace import ExceptionInfo, Trace

if TYPE_CHECKING:
  from .client import Client
  from .transport import HttpTransport

LANGUAGE = "python"
PANIC_CLASS = "<panic>"

SendStrategy = Callable[["HttpTransport", str], "Future[Optional[ResponseStatus]]"]


class ReportBuilder:
  """
  Entry point of the builder chain, obtained from ``Client.build_report()``.

  Pick exactly one origin (``from_panic``, ``from_error``,
  ``from_error_message`` or ``from_message``); each returns a specialized
  builder that is finished with ``send()``.
  """

  def __init__(self, client: "Client") -> None:
    self._client = client
    self._send_strategy: Optional[SendStrategy] = None

  @property
  def client(self) -> "Client":
    return self._client

  def with_send_strategy(self, send_strategy: SendStrategy) -> "ReportBuilder":
    """
    Replace the client's delivery for reports built from here.

    The strategy receives the client's shared transport and the serialized
    payload, and returns a future for the delivery outcome.
    """
    self._send_strategy = send_strategy
    return self

  def from_panic(self, event: PanicEvent) -> "ErrorReportBuilder":
    message = event.message()
    trace = Trace(
      exception=ExceptionInfo(class_=PANIC_CLASS, message=message, description=message),
    )
    if event.location is not None:
      trace.frames.append(Frame(filename=event.location.file, lineno=event.location.line))
    return ErrorReportBuilder(self, trace, title=message)

  def from_error(self, error: Union[BaseException, ReportableError]) -> "ErrorReportBuilder":
    if isinstance(error, BaseException):
      reportable: ReportableError = ExceptionAdapter(error)
    elif isinstance(error, ReportableError):
      reportable = error
    else:
      raise TypeError(
        f"from_error() expects an exception or a ReportableError, got {type(error).__name__}"
      )

    class_name = type(error).__name__
    message = reportable.short_description() or class_name
    cause = reportable.cause()
    description = cause.debug_rendering() if cause is not None else reportable.debug_rendering()
    trace = Trace(
      exception=ExceptionInfo(class_=class_name, message=message, description=description),
    )
    return ErrorReportBuilder(self, trace, title=str(error) or message)

  def from_error_message(self, value: Any) -> "ErrorReportBuilder":
    class_name = type(value).__name__
    text = str(value) or class_name
    trace = Trace(
      exception=ExceptionInfo(class_=class_name, message=text, description=text),
    )
    return ErrorReportBuilder(self, trace, title=text)

  def from_message(self, text: str) -> "MessageReportBuilder":
    return MessageReportBuilder(self, text)

  def _send(self, payload: str) -> "Future[Optional[ResponseStatus]]":
    if self._send_strategy is not None:
      return self._send_strategy(self._client.transport, payload)
    return self._client.send(payload)


class _SpecializedBuilder(ABC):
  default_level = Level.ERROR

  def __init__(self, report_builder: ReportBuilder) -> None:
    self._report_builder = report_builder
    self._level: Optional[Level] = None

  def with_level(self, level: LevelLike):
    self._level = Level.coerce(level)
    return self

  @property
  def level(self) -> Level:
    return self._level if self._level is not None else self.default_level

  @abstractmethod
  def _data(self) -> Dict[str, Any]:
    ...

  def to_payload(self) -> str:
    """Serialize the report to the JSON body posted to the item endpoint."""
    client = self._report_builder.client
    payload = {
      "access_token": client.access_token,
      "data": self._data(),
    }
    return json.dumps(payload, separators=(",", ":"))

  def send(self) -> "Future[Optional[ResponseStatus]]":
    """
    Serialize and dispatch without blocking.

    Wait on the returned future for the response status (``None`` when the
    request never got a response), or drop it: delivery proceeds anyway.
    """
    return self._report_builder._send(self.to_payload())


class ErrorReportBuilder(_SpecializedBuilder):
  """
  Builder for error, error-message and panic reports; always has a trace.
  """

  def __init__(self, report_builder: ReportBuilder, trace: Trace, title: Optional[str] = None) -> None:
    super().__init__(report_builder)
    self._trace = trace
    self._title = title

  @property
  def trace(self) -> Trace:
    return self._trace

  @property
  def title(self) -> Optional[str]:
    return self._title

  def with_backtrace(self, backtrace: Backtrace) -> "ErrorReportBuilder":
    self._trace.frames.extend(frames_from_backtrace(backtrace))
    return self

  def with_frame(self, frame: Frame) -> "ErrorReportBuilder":
    self._trace.frames.append(frame)
    return self

  def with_title(self, title: str) -> "ErrorReportBuilder":
    self._title = title
    return self

  def _data(self) -> Dict[str, Any]:
    data: Dict[str, Any] = {
      "environment": self._report_builder.client.environment,
      "body": {"trace": self._trace.to_body()},
      "level": str(self.level),
      "language": LANGUAGE,
    }
    if self._title is not None:
      data["title"] = self._title
    return data


class MessageReportBuilder(_SpecializedBuilder):
  """
  Builder for plain text messages. Defaults to INFO and carries no trace.
  """

  default_level = Level.INFO

  def __init__(self, report_builder: ReportBuilder, text: str) -> None:
    super().__init__(report_builder)
    self._text = text

  def _data(self) -> Dict[str, Any]:
    return {
      "environment": self._report_builder.client.environment,
      "body": {"message": {"body": self._text}},
      "level": str(self.level),
    }
