"""Runtime settings for paintcolor.

Debug checks guard the preconditions of the trusted constructors (channel
ranges, packed literal range). They follow ``__debug__`` by default, so they
are active normally and disappear under ``python -O``. The
``PAINTCOLOR_DEBUG_CHECKS`` environment variable overrides the default.

``set_debug_checks`` changes the process-wide default. ``debug_checks``
overrides it only for the current thread or asyncio task, through a
``contextvars.ContextVar``.
"""
from __future__ import annotations

import logging
import os
from contextvars import ContextVar
from contextlib import contextmanager
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

DEBUG_CHECKS_ENV = "PAINTCOLOR_DEBUG_CHECKS"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    logger.warning("Ignoring unrecognized %s=%r, using %s", name, raw, default)
    return default


_debug_checks: Optional[bool] = None
_debug_checks_override: ContextVar[Optional[bool]] = ContextVar("paintcolor_debug_checks", default=None)


def debug_checks_enabled() -> bool:
    """Return whether debug-only invariant checks are active."""
    global _debug_checks
    override = _debug_checks_override.get()
    if override is not None:
        return override
    if _debug_checks is None:
        _debug_checks = _env_flag(DEBUG_CHECKS_ENV, __debug__)
    return _debug_checks


def set_debug_checks(enabled: Optional[bool]) -> None:
    """Force debug checks on or off process-wide. ``None`` re-reads the environment."""
    global _debug_checks
    _debug_checks = None if enabled is None else bool(enabled)


@contextmanager
def debug_checks(enabled: bool) -> Iterator[None]:
    """Temporarily enable or disable debug checks in the current context only."""
    token = _debug_checks_override.set(bool(enabled))
    try:
        yield
    finally:
        _debug_checks_override.reset(token)
