import traceback
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from rollbar_reporter import Frame, FrameBuilder, capture_backtrace, frames_from_backtrace  # type: ignore[import]


def test_frame_builder_defaults_file_name_to_call_site():
  frame = FrameBuilder().build()
  assert frame.filename == __file__
  assert frame.to_dict() == {"filename": __file__}


def test_frame_builder_sets_every_field():
  frame = (
    FrameBuilder()
    .with_file_name("app/main.py")
    .with_line_number(42)
    .with_column_number(7)
    .with_function_name("handle")
    .build()
  )
  assert frame.to_dict() == {
    "filename": "app/main.py",
    "lineno": 42,
    "colno": 7,
    "method": "handle",
  }


def test_built_frame_is_immutable():
  frame = FrameBuilder().with_file_name("a.py").build()
  with pytest.raises(ValidationError):
    frame.lineno = 3  # type: ignore[misc]


def test_unset_optional_fields_are_absent_not_null():
  serialized = Frame(filename="a.py", lineno=1).to_dict()
  assert serialized == {"filename": "a.py", "lineno": 1}
  assert "colno" not in serialized
  assert "method" not in serialized


def test_frames_from_symbols_is_best_effort():
  symbols = [
    SimpleNamespace(filename="a.py", lineno=10, name="outer"),
    SimpleNamespace(filename=None, lineno=None, name=None),
    SimpleNamespace(),
  ]

  frames = frames_from_backtrace(symbols)

  assert [f.to_dict() for f in frames] == [
    {"filename": "a.py", "lineno": 10, "method": "outer"},
    {"filename": ""},
    {"filename": ""},
  ]


def _inner():
  raise ValueError("bad value")


def _outer():
  _inner()


def test_frames_from_traceback_keep_call_order():
  try:
    _outer()
  except ValueError as exc:
    frames = frames_from_backtrace(exc.__traceback__)

  methods = [f.method for f in frames]
  assert methods == ["test_frames_from_traceback_keep_call_order", "_outer", "_inner"]
  assert all(f.filename == __file__ for f in frames)
  assert all(f.lineno for f in frames)


def test_frames_from_stack_summary():
  summary = traceback.StackSummary.from_list([("lib.py", 3, "run", "run()")])
  frames = frames_from_backtrace(summary)
  assert frames[0].filename == "lib.py"
  assert frames[0].lineno == 3
  assert frames[0].method == "run"


def test_capture_backtrace_ends_at_caller():
  summary = capture_backtrace()
  assert summary[-1].name == "test_capture_backtrace_ends_at_caller"
  assert summary[-1].filename == __file__
