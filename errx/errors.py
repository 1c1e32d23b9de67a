"""Typed error carrying a stable code, a message and an optional cause."""
from __future__ import annotations

from dataclasses import dataclass

from .chain import find
from .codes import Code


@dataclass(eq=False)
class Error(Exception):
    """Application error classified by ``code``.

    Two errors are the same kind when their codes are equal; message and
    cause take no part in matching.
    """

    code: Code
    message: str
    cause: BaseException | None = None

    def __post_init__(self) -> None:
        # Positional args let pickle and copy rebuild the error.
        super().__init__(self.code, self.message, self.cause)
        self.__cause__ = self.cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"[{self.code}] {self.message}: {self.cause}"
        return f"[{self.code}] {self.message}"

    def unwrap(self) -> BaseException | None:
        return self.cause

    def matches(self, target: BaseException | None) -> bool:
        found = find(target, Error)
        if found is None:
            return False
        return self.code == found.code
