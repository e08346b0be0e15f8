import pytest

from rollbar_reporter import Level  # type: ignore[import]


@pytest.mark.parametrize(
  "text, expected",
  [
    ("critical", Level.CRITICAL),
    ("warning", Level.WARNING),
    ("info", Level.INFO),
    ("debug", Level.DEBUG),
    ("error", Level.ERROR),
  ],
)
def test_parse_recognizes_canonical_names(text, expected):
  assert Level.parse(text) is expected


@pytest.mark.parametrize("text", ["", "INFO", "Warning", "fatal", "  debug"])
def test_parse_falls_back_to_error(text):
  assert Level.parse(text) is Level.ERROR


@pytest.mark.parametrize("text", ["critical", "error", "warning", "info", "debug"])
def test_canonical_names_round_trip(text):
  assert str(Level.parse(text)) == text


def test_round_trip_does_not_hold_for_other_strings():
  assert str(Level.parse("Info")) == "error"


def test_coerce_accepts_level_or_string():
  assert Level.coerce(Level.DEBUG) is Level.DEBUG
  assert Level.coerce("warning") is Level.WARNING
  assert Level.coerce("nope") is Level.ERROR
