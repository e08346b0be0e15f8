import json
from typing import Any, Dict, List

import httpx

from rollbar_reporter import Client, report_error, report_error_message, report_message  # type: ignore[import]


def _client(payloads: List[Dict[str, Any]]) -> Client:
  def handler(request: httpx.Request) -> httpx.Response:
    payloads.append(json.loads(request.content))
    return httpx.Response(200)

  return Client("ACCESS_TOKEN", "ENVIRONMENT", http_backend=httpx.MockTransport(handler))


def test_report_message_defaults_to_info():
  payloads: List[Dict[str, Any]] = []

  status = report_message(_client(payloads), "hai").result(timeout=5)

  assert status is not None and status.is_success()
  assert payloads == [
    {
      "access_token": "ACCESS_TOKEN",
      "data": {
        "environment": "ENVIRONMENT",
        "body": {"message": {"body": "hai"}},
        "level": "info",
      },
    }
  ]


def test_report_error_attaches_traceback_then_call_site():
  payloads: List[Dict[str, Any]] = []
  client = _client(payloads)

  try:
    int("笑")
  except ValueError as exc:
    report_error(client, exc).result(timeout=5)

  trace = payloads[0]["data"]["body"]["trace"]
  assert trace["exception"]["class"] == "ValueError"
  methods = [f.get("method") for f in trace["frames"]]
  assert methods == [
    "test_report_error_attaches_traceback_then_call_site",
    "test_report_error_attaches_traceback_then_call_site",
  ]
  call_site = trace["frames"][-1]
  assert call_site["filename"] == __file__
  assert call_site["lineno"] > trace["frames"][0]["lineno"]


def test_report_error_message_attaches_call_site_then_stack():
  payloads: List[Dict[str, Any]] = []

  report_error_message(_client(payloads), "＿|￣|○", level="warning").result(timeout=5)

  data = payloads[0]["data"]
  assert data["level"] == "warning"
  assert data["title"] == "＿|￣|○"
  frames = data["body"]["trace"]["frames"]
  assert frames[0]["method"] == "test_report_error_message_attaches_call_site_then_stack"
  assert frames[-1]["method"] == "test_report_error_message_attaches_call_site_then_stack"
  assert len(frames) > 2
