"""Fluent builder for :class:`~errx.errors.Error` and per-code constructors."""
from __future__ import annotations

import logging
from typing import Any

from . import codes
from .codes import Code
from .errors import Error

logger = logging.getLogger(__name__)


class Builder:
    """Stages code, message and cause until ``build()`` is called.

    Single owner; setters mutate in place and return the builder for chaining.
    """

    def __init__(self, code: Code) -> None:
        self.code = code
        self.message = ""
        self.cause: BaseException | None = None

    def with_message(self, msg: str) -> Builder:
        self.message = msg
        return self

    def with_message_formatted(self, fmt: str, *args: Any) -> Builder:
        """Set a printf-style formatted message (``fmt % args``).

        The format is applied even without arguments, so ``"100%%"`` becomes
        ``"100%"``. A format that does not fit its arguments keeps the raw
        format and appends the arguments instead of raising.
        """
        try:
            self.message = fmt % args
        except (TypeError, ValueError, OverflowError):
            logger.warning("Message format %r does not fit %d argument(s)", fmt, len(args))
            self.message = " ".join([fmt, *(str(arg) for arg in args)])
        return self

    def with_cause(self, err: BaseException | None) -> Builder:
        # None clears a previously set cause.
        self.cause = err
        return self

    def build(self) -> Error:
        """Snapshot the current state into a new Error."""
        return Error(code=self.code, message=self.message, cause=self.cause)

    def as_error(self) -> BaseException:
        return self.build()

    # Legacy shortcuts, kept for backward compatibility.
    # Prefer with_message(...).build().

    def with_description(self, desc: str) -> Error:
        return self.with_message(desc).build()

    def with_description_and_cause(self, desc: str, cause: BaseException | None) -> Error:
        return self.with_message(desc).with_cause(cause).build()


def new(code: Code) -> Builder:
    """Start a builder for any code, predefined or caller-defined."""
    return Builder(code)


def new_bad_request() -> Builder:
    return Builder(codes.BAD_REQUEST)


def new_not_found() -> Builder:
    return Builder(codes.NOT_FOUND)


def new_conflict() -> Builder:
    return Builder(codes.CONFLICT)


def new_internal() -> Builder:
    return Builder(codes.INTERNAL)


def new_already_exists() -> Builder:
    return Builder(codes.ALREADY_EXISTS)


def new_unauthorized() -> Builder:
    return Builder(codes.UNAUTHORIZED)


def new_forbidden() -> Builder:
    return Builder(codes.FORBIDDEN)


def new_timeout() -> Builder:
    return Builder(codes.TIMEOUT)


def new_validation() -> Builder:
    return Builder(codes.VALIDATION)
