"""Coded errors with a fluent builder and chain-aware helpers."""
from .builder import (
    Builder,
    new,
    new_already_exists,
    new_bad_request,
    new_conflict,
    new_forbidden,
    new_internal,
    new_not_found,
    new_timeout,
    new_unauthorized,
    new_validation,
)
from .chain import find, is_error, walk
from .codes import (
    ALREADY_EXISTS,
    BAD_REQUEST,
    CONFLICT,
    FORBIDDEN,
    INTERNAL,
    NOT_FOUND,
    PREDEFINED_CODES,
    TIMEOUT,
    UNAUTHORIZED,
    VALIDATION,
    Code,
)
from .errors import Error
from .helpers import get_code, get_message, is_code, wrap, wrap_if_err

__all__ = [
    "ALREADY_EXISTS",
    "BAD_REQUEST",
    "CONFLICT",
    "FORBIDDEN",
    "INTERNAL",
    "NOT_FOUND",
    "PREDEFINED_CODES",
    "TIMEOUT",
    "UNAUTHORIZED",
    "VALIDATION",
    "Builder",
    "Code",
    "Error",
    "find",
    "get_code",
    "get_message",
    "is_code",
    "is_error",
    "new",
    "new_already_exists",
    "new_bad_request",
    "new_conflict",
    "new_forbidden",
    "new_internal",
    "new_not_found",
    "new_timeout",
    "new_unauthorized",
    "new_validation",
    "walk",
    "wrap",
    "wrap_if_err",
]
