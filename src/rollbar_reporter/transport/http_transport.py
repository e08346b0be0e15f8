from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

import httpx

_logger = logging.getLogger("rollbar_reporter.transport")


@dataclass
class HttpTransport:
  """
  Shared HTTPS handle used by every dispatch of one client.

  Wraps a single ``httpx.Client`` so the connection pool and TLS context are
  created once and reused from all dispatch threads. ``httpx.Client`` is
  safe for concurrent use; nothing here mutates after construction.
  """

  endpoint: str
  backend: Optional[httpx.BaseTransport] = None
  _http: httpx.Client = field(init=False, repr=False)

  def __post_init__(self) -> None:
    # Building the client loads the TLS context; failures here propagate.
    self._http = httpx.Client(transport=self.backend)

  def post(self, payload: str) -> httpx.Response:
    """
    POST a serialized item. Raises ``httpx.HTTPError`` on transport failure.
    """
    _logger.debug("POST %s (%d bytes)", self.endpoint, len(payload))
    return self._http.post(
      self.endpoint,
      content=payload.encode("utf-8"),
      headers={"Content-Type": "application/json"},
    )

  def close(self) -> None:
    self._http.close()
