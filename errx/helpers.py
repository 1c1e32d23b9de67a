"""Inspection and wrapping helpers that accept any exception.

None of these raise: an absent error yields the documented default.
"""
from __future__ import annotations

from .chain import find
from .codes import INTERNAL, Code
from .errors import Error


def is_code(err: BaseException | None, code: Code) -> bool:
    found = find(err, Error)
    if found is None:
        return False
    return found.code == code


def get_code(err: BaseException | None) -> Code:
    """Return the code of the first Error in the chain.

    Foreign errors fall back to INTERNAL, which treats "unclassified" the
    same as "server fault".
    """
    if err is None:
        return Code("")
    found = find(err, Error)
    if found is None:
        return INTERNAL
    return found.code


def get_message(err: BaseException | None) -> str:
    if err is None:
        return ""
    found = find(err, Error)
    if found is None:
        return str(err)
    return found.message


def wrap(err: BaseException | None, code: Code, message: str) -> Error | None:
    """Wrap ``err`` with a code and message; wrapping nothing yields None."""
    if err is None:
        return None
    return Error(code=code, message=message, cause=err)


def wrap_if_err(err: BaseException | None, code: Code, message: str) -> BaseException | None:
    if err is None:
        return None
    return wrap(err, code, message)
