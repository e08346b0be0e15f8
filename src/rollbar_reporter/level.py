from __future__ import annotations

from enum import Enum
from typing import Union


class Level(Enum):
  """Severity attached to a report."""

  CRITICAL = "critical"
  ERROR = "error"
  WARNING = "warning"
  INFO = "info"
  DEBUG = "debug"

  def __str__(self) -> str:
    return self.value

  @classmethod
  def parse(cls, text: str) -> "Level":
    """
    Parse a severity string.

    Only the five lowercase names are recognized; anything else,
    including mixed case and the empty string, falls back to ERROR.
    """
    for level in cls:
      if level.value == text:
        return level
    return cls.ERROR

  @classmethod
  def coerce(cls, value: "LevelLike") -> "Level":
    if isinstance(value, Level):
      return value
    return cls.parse(value)


LevelLike = Union[Level, str]
