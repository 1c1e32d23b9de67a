"""Error classification codes."""
from __future__ import annotations

from typing import NewType

# Open domain: any string is a valid code, the constants below are conveniences.
Code = NewType("Code", str)

CONFLICT = Code("CONFLICT")  # resource conflicts with existing data
INTERNAL = Code("INTERNAL")  # internal server or system error
NOT_FOUND = Code("NOT_FOUND")
BAD_REQUEST = Code("BAD_REQUEST")  # invalid input or parameters
ALREADY_EXISTS = Code("ALREADY_EXISTS")
UNAUTHORIZED = Code("UNAUTHORIZED")  # authentication required
FORBIDDEN = Code("FORBIDDEN")  # permission denied
TIMEOUT = Code("TIMEOUT")
VALIDATION = Code("VALIDATION")  # input validation failed

PREDEFINED_CODES: frozenset[Code] = frozenset(
    {
        CONFLICT,
        INTERNAL,
        NOT_FOUND,
        BAD_REQUEST,
        ALREADY_EXISTS,
        UNAUTHORIZED,
        FORBIDDEN,
        TIMEOUT,
        VALIDATION,
    }
)
