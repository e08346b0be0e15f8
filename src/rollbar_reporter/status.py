from __future__ import annotations

from typing import Any

import httpx

# https://docs.rollbar.com/reference/create-item
_DESCRIPTIONS = {
  200: "The item was accepted for processing.",
  400: "No JSON payload was found, or it could not be decoded.",
  401: "No access token was found in the request.",
  403: (
    "Check that your `access_token` is valid, enabled, and has the correct scope. "
    "The response will contain a `message` key explaining the problem."
  ),
  413: (
    "Max payload size is 128kb. Try removing or truncating unnecessary large data "
    "included in the payload, like whole binary files or long strings."
  ),
  422: (
    "A syntactically valid JSON payload was found, but it had one or more semantic "
    "errors. The response will contain a `message` key describing the errors."
  ),
  429: (
    "Request dropped because the rate limit has been reached for this access token, "
    "or the account is on the Free plan and the plan limit has been reached."
  ),
  500: "There was an error on Rollbar's end.",
}

UNDEFINED_ERROR = "An undefined error occurred."


class ResponseStatus:
  """
  HTTP status returned by the item endpoint, with a readable explanation.
  """

  __slots__ = ("code",)

  def __init__(self, code: int) -> None:
    self.code = int(code)

  @classmethod
  def from_response(cls, response: httpx.Response) -> "ResponseStatus":
    return cls(response.status_code)

  def description(self) -> str:
    return _DESCRIPTIONS.get(self.code, UNDEFINED_ERROR)

  def is_success(self) -> bool:
    return self.code == 200

  def __str__(self) -> str:
    return f"Error {self.code}: {self.description()}"

  def __repr__(self) -> str:
    return f"ResponseStatus({self.code})"

  def __eq__(self, other: Any) -> bool:
    if isinstance(other, ResponseStatus):
      return self.code == other.code
    return NotImplemented

  def __hash__(self) -> int:
    return hash(self.code)
