"""Environment-variable configuration for Kappa.

KAPPA_UNDEFINED  what reading a not-yet-initialized `define` slot does:
                 "observe" (default) yields the Undef sentinel,
                 "error" raises KappaUnboundSymbol.
LOGLEVEL         standard logging level name used by the command line driver.
"""
from __future__ import annotations

import logging
import os

from kappa.errors import KappaError

UNDEFINED_POLICIES = ("observe", "error")
_DEFAULT_UNDEFINED_POLICY = "observe"


def get_undefined_policy() -> str:
    raw = os.environ.get("KAPPA_UNDEFINED", "").strip().lower()
    if not raw:
        return _DEFAULT_UNDEFINED_POLICY
    if raw not in UNDEFINED_POLICIES:
        raise KappaError(
            f"KAPPA_UNDEFINED must be one of {', '.join(UNDEFINED_POLICIES)}, got {raw!r}"
        )
    return raw


def get_log_level(default: int = logging.WARNING) -> int:
    """
    Determine log level from the LOGLEVEL environment variable.
    Falls back to `default` when unset or not a level name.
    """
    loglevel_env = os.getenv("LOGLEVEL", "").upper()
    if loglevel_env:
        level = getattr(logging, loglevel_env, None)
        if isinstance(level, int):
            return level
    return default
