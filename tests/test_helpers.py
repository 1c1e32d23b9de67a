from __future__ import annotations

import pytest

import errx
from errx import codes
from errx.helpers import get_code, get_message, is_code, wrap, wrap_if_err


def test_is_code_is_false_for_absent_error() -> None:
    assert is_code(None, codes.INTERNAL) is False


def test_is_code_checks_first_typed_error_in_chain() -> None:
    err = wrap(ValueError("bad uuid"), codes.BAD_REQUEST, "invalid id")
    assert is_code(err, codes.BAD_REQUEST)
    assert not is_code(err, codes.NOT_FOUND)


def test_is_code_finds_typed_error_behind_foreign_wrapper() -> None:
    typed = errx.new_timeout().with_message("slow").build()
    try:
        raise RuntimeError("job failed") from typed
    except RuntimeError as exc:
        assert is_code(exc, codes.TIMEOUT)


def test_is_code_is_false_for_foreign_error() -> None:
    assert not is_code(ValueError("x"), codes.INTERNAL)


def test_get_code_defaults() -> None:
    assert get_code(None) == ""
    assert get_code(ValueError("x")) == codes.INTERNAL
    assert get_code(errx.new_conflict().build()) == codes.CONFLICT


def test_get_code_returns_outermost_typed_code() -> None:
    inner = errx.new_not_found().with_message("missing").build()
    outer = wrap(inner, codes.INTERNAL, "lookup failed")
    assert get_code(outer) == codes.INTERNAL
    assert get_code(inner) == codes.NOT_FOUND


def test_get_message_defaults() -> None:
    foreign = LookupError("no such row")
    assert get_message(None) == ""
    assert get_message(foreign) == str(foreign)
    assert get_message(errx.new_not_found().with_message("user not found").build()) == "user not found"


def test_get_message_skips_foreign_links() -> None:
    typed = errx.new_validation().with_message("name too short").build()
    try:
        raise RuntimeError("form rejected") from typed
    except RuntimeError as exc:
        assert get_message(exc) == "name too short"


@pytest.mark.parametrize("code", [codes.INTERNAL, codes.Code("ANYTHING")])
def test_wrap_of_absent_error_is_absent(code) -> None:
    assert wrap(None, code, "context") is None
    assert wrap_if_err(None, code, "context") is None


def test_wrap_preserves_cause() -> None:
    cause = ConnectionError("reset by peer")
    err = wrap(cause, codes.INTERNAL, "fetch failed")

    assert err is not None
    assert err.unwrap() is cause
    assert err.__cause__ is cause
    assert str(err) == "[INTERNAL] fetch failed: reset by peer"


def test_wrap_if_err_delegates_to_wrap() -> None:
    cause = TimeoutError("deadline exceeded")
    err = wrap_if_err(cause, codes.TIMEOUT, "call timed out")

    assert isinstance(err, errx.Error)
    assert str(err) == str(wrap(cause, codes.TIMEOUT, "call timed out"))
    assert is_code(err, codes.TIMEOUT)
