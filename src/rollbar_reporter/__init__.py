"""
rollbar_reporter

Client library that turns exceptions, uncaught errors and messages into
Rollbar item reports and delivers them in the background.
"""

from .client import Client, default_send_strategy
from .config import ITEM_ENDPOINT, ClientConfig
from .errors import ExceptionAdapter, PanicEvent, PanicLocation, ReportableError
from .frame import Frame, FrameBuilder, capture_backtrace, frames_from_backtrace
from .level import Level
from .panic import install_panic_handler, uninstall_panic_handler
from .report import ErrorReportBuilder, MessageReportBuilder, ReportBuilder, SendStrategy
from .shortcuts import report_error, report_error_message, report_message, report_panics
from .status import ResponseStatus
from .trace import ExceptionInfo, Trace
from .transport import HttpTransport

__version__ = "0.1.0"

__all__ = [
  "Client",
  "ClientConfig",
  "ErrorReportBuilder",
  "ExceptionAdapter",
  "ExceptionInfo",
  "Frame",
  "FrameBuilder",
  "HttpTransport",
  "ITEM_ENDPOINT",
  "Level",
  "MessageReportBuilder",
  "PanicEvent",
  "PanicLocation",
  "ReportBuilder",
  "ReportableError",
  "ResponseStatus",
  "SendStrategy",
  "Trace",
  "capture_backtrace",
  "default_send_strategy",
  "frames_from_backtrace",
  "install_panic_handler",
  "report_error",
  "report_error_message",
  "report_message",
  "report_panics",
  "uninstall_panic_handler",
]
