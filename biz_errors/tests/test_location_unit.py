"""Unit coverage for call-site capture helpers."""

from __future__ import annotations

import inspect
import re

from biz_errors.location import Origin, capture_location, capture_origin


def _here() -> str:
    return capture_location()


def _parent() -> str:
    return _child()


def _child() -> str:
    return capture_location(1)


def test_capture_location_describes_caller():
    expected_line = inspect.currentframe().f_lineno + 1
    loc = capture_location()
    assert re.match(r"^test_location_unit\.py/test_location_unit\..*test_capture_location_describes_caller:\d+$", loc), loc
    assert loc.endswith(f":{expected_line}")


def test_capture_location_in_helper():
    assert "_here:" in _here()


def test_skip_moves_up_the_stack():
    assert "_parent:" in _parent()


def test_skip_beyond_stack_returns_empty():
    assert capture_location(10_000) == ""


def test_negative_skip_is_clamped():
    assert "test_negative_skip_is_clamped:" in capture_location(-5)


def test_capture_origin_collects_frames():
    origin = capture_origin()
    assert "test_capture_origin_collects_frames:" in origin.location
    assert origin.frames
    assert origin.frames[-1].name == "test_capture_origin_collects_frames"
    assert "test_capture_origin_collects_frames" in origin.format_stack()


def test_capture_origin_respects_disable(monkeypatch):
    monkeypatch.setenv("BIZ_ERRORS_CAPTURE_STACK", "false")
    origin = capture_origin()
    assert origin.frames == ()
    assert origin.format_stack() == ""
    assert origin.location


def test_capture_origin_beyond_stack_is_empty():
    assert capture_origin(10_000) == Origin()
