"""Unit coverage for BizError formatting and generic chain protocol support."""

from __future__ import annotations

import traceback

import pytest

from biz_errors import BizCode, BizError, as_error, is_error


def _chain() -> BizError:
    inner = BizCode("inner").wrap(ValueError("inner error"))
    middle = BizCode("middle").wrap(inner)
    return BizCode("outer").wrap(middle)


def test_compact_formats_show_key_only(recorder):
    err = BizCode("a3").wrap(ValueError("detail that must not leak"))
    assert f"{err}" == "a3"  # nosec B101 - asserts are appropriate in unit tests
    assert format(err, "s") == "a3"  # nosec B101
    assert format(err, "v") == "a3"  # nosec B101
    assert "detail" not in str(err)  # nosec B101


def test_quoted_format(recorder):
    err = BizCode('say "hi"').wrap(ValueError("x"))
    assert format(err, "q") == '"say \\"hi\\""'


def test_other_format_specs_apply_to_key(recorder):
    err = BizCode("abc").wrap(ValueError("x"))
    assert f"{err:>5}" == "  abc"


def test_verbose_format_includes_origin_stack(recorder):
    def origin_site():
        return BizCode("deep").wrap(ValueError("x"))

    err = BizCode("top").wrap(origin_site())
    text = format(err, "+v")
    assert text.splitlines()[0] == "top"
    assert "origin_site" in text
    assert text == err.verbose()


def test_verbose_without_stack_capture(monkeypatch, recorder):
    monkeypatch.setenv("BIZ_ERRORS_CAPTURE_STACK", "0")
    err = BizCode("flat").wrap(ValueError("x"))
    assert err.origin.frames == ()
    assert err.location  # location is still captured
    assert format(err, "+v") == "flat"


def test_stack_depth_is_bounded(monkeypatch, recorder):
    monkeypatch.setenv("BIZ_ERRORS_STACK_DEPTH", "2")
    err = BizCode("short").wrap(ValueError("x"))
    assert len(err.origin.frames) == 2


def test_matches_is_single_level(recorder):
    err = _chain()
    assert err.matches(BizError("outer"))
    assert not err.matches(BizError("inner"))
    assert not err.matches(ValueError("outer"))


def test_is_error_finds_any_level(recorder):
    err = BizCode("test").wrap(ValueError("test error"))
    assert is_error(err, BizError("test"))

    outer = _chain()
    assert is_error(outer, BizError("outer")), "should find outer error"
    assert is_error(outer, BizError("middle")), "should find middle error"
    assert is_error(outer, BizError("inner")), "should find inner error"
    assert not is_error(outer, BizError("nonexist")), "should not find nonexistent error"


def test_is_error_matches_identity_of_plain_errors(recorder):
    base = ValueError("root")
    err = BizCode("x").wrap(base)
    assert is_error(err, base)
    assert not is_error(err, ValueError("root"))


def test_as_error_finds_plain_exception_types(recorder):
    base = KeyError("missing")
    err = BizCode("lookup").wrap(base)
    assert as_error(err, KeyError) is base
    assert as_error(err, BizError) is err
    assert as_error(err, OSError) is None


def test_wrapped_standard_error_is_reachable(recorder):
    std = RuntimeError("standard error")
    err = BizCode("test").wrap(std)
    node = as_error(err, BizError)
    assert node is not None
    assert node.key == "test"
    assert node.unwrap() is std


def test_node_is_read_only(recorder):
    err = BizCode("ro").wrap(ValueError("x"))
    with pytest.raises(AttributeError):
        err.key = "other"  # type: ignore[misc]


def test_traceback_renders_cause(recorder):
    err = BizCode("shown").wrap(ValueError("root cause"))
    rendered = "".join(traceback.format_exception(type(err), err, err.__traceback__))
    assert "ValueError: root cause" in rendered
    assert "BizError: shown" in rendered


def test_bare_node_defaults():
    target = BizError("target")
    assert target.cause is None
    assert target.unwrap() is None
    assert target.correlation_id == ""
    assert target.location == ""
    assert "target" in repr(target)
