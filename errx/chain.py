"""Cause-chain walking helpers (the Is/As pattern)."""
from __future__ import annotations

import logging
from typing import Iterator, TypeVar

from .config import settings

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseException)


def _next_link(err: BaseException) -> BaseException | None:
    unwrap = getattr(err, "unwrap", None)
    if callable(unwrap):
        return unwrap()
    return err.__cause__


def walk(err: BaseException | None) -> Iterator[BaseException]:
    """Yield ``err`` and every error reachable from it by unwrapping.

    Links expose their cause through ``unwrap()`` when they define it and
    through ``__cause__`` otherwise. The walk ends at the first link without
    a cause, at a link that was already visited, or after
    ``ERRX_MAX_CHAIN_DEPTH`` links; the last two are logged and never raise.
    """
    seen: set[int] = set()
    depth = 0
    current = err
    while current is not None:
        if id(current) in seen:
            logger.warning("Cycle detected in error chain at %s; stopping walk", type(current).__name__)
            return
        if depth >= settings.ERRX_MAX_CHAIN_DEPTH:
            logger.warning("Error chain deeper than %d links; stopping walk", settings.ERRX_MAX_CHAIN_DEPTH)
            return
        seen.add(id(current))
        depth += 1
        yield current
        current = _next_link(current)


def find(err: BaseException | None, kind: type[E]) -> E | None:
    """Return the first link in ``err``'s chain that is a ``kind``."""
    for link in walk(err):
        if isinstance(link, kind):
            return link
    return None


def is_error(err: BaseException | None, target: BaseException | None) -> bool:
    """Report whether any link in ``err``'s chain is, or matches, ``target``."""
    if err is None or target is None:
        return False
    for link in walk(err):
        if link is target:
            return True
        matches = getattr(link, "matches", None)
        if callable(matches) and matches(target):
            return True
    return False
