from __future__ import annotations

import logging
from concurrent.futures import Future
from typing import Optional

import httpx

from .config import ITEM_ENDPOINT, ClientConfig
from .delivery import dispatch, resolved
from .report import ReportBuilder
from .status import ResponseStatus
from .transport import HttpTransport

_logger = logging.getLogger("rollbar_reporter.client")



class Client:
  """
  Long-lived handle to the item endpoint.

  Holds the credentials embedded in every payload and one shared transport.
  A client is immutable once built and may be shared freely across threads;
  create it once at startup.
  """

  def __init__(
    self,
    access_token: str,
    environment: str,
    *,
    endpoint: str = ITEM_ENDPOINT,
    enabled: bool = True,
    http_backend: Optional[httpx.BaseTransport] = None,
  ) -> None:
    self._access_token = access_token
    self._environment = environment
    self._enabled = enabled
    self._transport = HttpTransport(endpoint=endpoint, backend=http_backend)

  @classmethod
  def from_config(
    cls,
    config: ClientConfig,
    http_backend: Optional[httpx.BaseTransport] = None,
  ) -> "Client":
    return cls(
      config.access_token,
      config.environment,
      endpoint=config.endpoint,
      enabled=config.enabled,
      http_backend=http_backend,
    )

  @classmethod
  def from_env(cls) -> "Client":
    return cls.from_config(ClientConfig.from_env())

  @property
  def access_token(self) -> str:
    return self._access_token

  @property
  def environment(self) -> str:
    return self._environment

  @property
  def enabled(self) -> bool:
    return self._enabled

  @property
  def transport(self) -> HttpTransport:
    return self._transport

  def build_report(self) -> ReportBuilder:
    return ReportBuilder(self)

  def send(self, payload: str) -> "Future[Optional[ResponseStatus]]":
    """
    Deliver a serialized report in the background.

    The returned future resolves to the response status, or to ``None``
    when no response was received. It never raises for delivery problems.
    """
    if not self._enabled:
      _logger.debug("Reporting disabled; dropping report")
      return resolved(None)
    return default_send_strategy(self._transport, payload)

  def close(self) -> None:
    self._transport.close()

  def __enter__(self) -> "Client":
    return self

  def __exit__(self, *exc_info: object) -> None:
    self.close()


def default_send_strategy(
  transport: HttpTransport, payload: str
) -> "Future[Optional[ResponseStatus]]":
  return dispatch(_deliver, transport, payload)


def _deliver(transport: HttpTransport, payload: str) -> Optional[ResponseStatus]:
  try:
    response = transport.post(payload)
  except Exception as exc:
    # No response was received; the report is dropped, never raised.
    _logger.warning(
      "Error while sending a report to Rollbar: %s\nThe report was:\n%s",
      exc,
      payload,
    )
    return None

  status = ResponseStatus.from_response(response)
  if not status.is_success():
    _logger.warning(
      "Rollbar did not accept a report. %s\nResponse body: %s\nThe report was:\n%s",
      status,
      response.text,
      payload,
    )
  return status
