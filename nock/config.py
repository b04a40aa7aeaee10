from __future__ import annotations
import os
import sys
from typing import Optional


# Defaults
_DEFAULT_RECURSION_LIMIT = 10_000
_DEFAULT_FUEL = 0


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{var} must be non-negative, got {value}")
    return value


def get_recursion_limit() -> int:
    return int_from_env('NOCK_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)


def get_fuel() -> Optional[int]:
    # 0 means ungoverned
    fuel = int_from_env('NOCK_FUEL', _DEFAULT_FUEL)
    return fuel or None


def use_color(stream=None) -> bool:
    raw = os.environ.get('NOCK_COLOR')
    if raw is not None and raw.strip():
        return raw.strip() not in ('0', 'false', 'no', 'off')
    stream = stream or sys.stdout
    return hasattr(stream, 'isatty') and stream.isatty()


def apply_recursion_limit() -> int:
    """Raise Python's recursion limit to NOCK_RECURSION_LIMIT (never lowers it)."""
    limit = get_recursion_limit()
    if limit > sys.getrecursionlimit():
        sys.setrecursionlimit(limit)
    return sys.getrecursionlimit()
