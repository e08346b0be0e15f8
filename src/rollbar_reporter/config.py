from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

# https://docs.rollbar.com/reference/create-item
ITEM_ENDPOINT = "https://api.rollbar.com/api/1/item/"
DEFAULT_ENVIRONMENT = "development"
CONFIG_PATH = Path("_rollbar/config.json")

_logger = logging.getLogger("rollbar_reporter.config")


@dataclass(frozen=True)
class ClientConfig:
  """
  Settings needed to build a :class:`~rollbar_reporter.client.Client`.
  """

  access_token: str
  environment: str
  endpoint: str = ITEM_ENDPOINT
  enabled: bool = True

  @classmethod
  def from_env(cls) -> "ClientConfig":
    """
    Load configuration from environment variables.

    Recognized:
      - ROLLBAR_ACCESS_TOKEN
      - ROLLBAR_ENVIRONMENT (default: development)
      - ROLLBAR_ENDPOINT (default: the public item endpoint)
      - ROLLBAR_ENABLED (default: on)
    """
    return cls.from_params_or_env()

  @classmethod
  def from_params_or_env(
    cls,
    access_token: Optional[str] = None,
    environment: Optional[str] = None,
    endpoint: Optional[str] = None,
  ) -> "ClientConfig":
    """
    Build configuration from explicit parameters, falling back to the environment.

    Priority:
      1. Explicit function arguments
      2. Environment variables
      3. Config file (_rollbar/config.json)
      4. Defaults (empty token, "development")

    A missing token is not an error: the service answers 401 and the
    client logs it, the host application keeps running.
    """
    token = access_token if access_token is not None else os.getenv("ROLLBAR_ACCESS_TOKEN")
    env = environment if environment is not None else os.getenv("ROLLBAR_ENVIRONMENT")

    if token is None or env is None:
      file_config = _read_config_file()
      if token is None:
        token = file_config.get("access_token") or file_config.get("accessToken")
      if env is None:
        env = file_config.get("environment")

    url = endpoint or os.getenv("ROLLBAR_ENDPOINT", ITEM_ENDPOINT)
    _validate_endpoint(url)

    return cls(
      access_token=token or "",
      environment=env if env is not None else DEFAULT_ENVIRONMENT,
      endpoint=url,
      enabled=_get_enabled_flag(),
    )


def _read_config_file() -> dict:
  if not CONFIG_PATH.exists():
    return {}
  try:
    data = json.loads(CONFIG_PATH.read_text())
  except (OSError, ValueError) as exc:
    _logger.warning("Ignoring unreadable config file %s: %s", CONFIG_PATH, exc)
    return {}
  return data if isinstance(data, dict) else {}


def _validate_endpoint(url: str) -> None:
  parsed = urlparse(url)
  if parsed.scheme in ("http", "https") and parsed.netloc:
    return
  raise ValueError(
    f"Cannot post Rollbar items to '{url}': the endpoint needs an http(s) scheme and a host. "
    f"Leave ROLLBAR_ENDPOINT unset to use {ITEM_ENDPOINT}, or point it at your item proxy."
  )


_ENABLED_VALUES = {
  "1": True, "true": True, "yes": True, "on": True,
  "0": False, "false": False, "no": False, "off": False,
}


def _get_enabled_flag() -> bool:
  """
  Read ROLLBAR_ENABLED; reports are delivered when it is unset.

  A value that is neither a recognized on nor off switch mutes delivery
  and says so once, rather than posting reports nobody asked for.
  """
  raw = os.getenv("ROLLBAR_ENABLED")
  if raw is None:
    return True

  enabled = _ENABLED_VALUES.get(raw.strip().lower())
  if enabled is None:
    _logger.warning("Unrecognized ROLLBAR_ENABLED=%r; report delivery is off", raw)
    return False
  return enabled
