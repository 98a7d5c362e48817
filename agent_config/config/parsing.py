"""agent_config.config.parsing
============================
Coercion of raw environment strings into typed values.

Both helpers treat ``None`` as "not provided" and fall back to the caller's
default. They never raise: malformed input degrades to a defined value, so
callers can feed ``os.environ.get(...)`` straight in.
"""
from __future__ import annotations

import re
from typing import Optional, Union

__all__ = ["parse_number", "parse_boolean", "TRUTHY_TOKENS"]

Number = Union[int, float]

TRUTHY_TOKENS = frozenset({"true", "1", "yes", "y"})

# ASCII-only numeric literals; digit separators and non-ASCII digits are rejected
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_PREFIXED = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)", re.ASCII)
_INFINITY = re.compile(r"([+-]?)Infinity")


def _to_number(raw: str) -> Optional[Number]:
    text = raw.strip()
    if _PREFIXED.fullmatch(text):
        return int(text, 0)
    if _DECIMAL.fullmatch(text):
        if any(c in text for c in ".eE"):
            return float(text)
        return int(text)
    match = _INFINITY.fullmatch(text)
    if match:
        return float(match.group(1) + "inf")
    return None


def parse_number(
    raw: Optional[str],
    default: Number,
    *,
    min: Optional[Number] = None,
    max: Optional[Number] = None,
) -> Number:
    """Parse *raw* as a number, clamped into ``[min, max]``.

    The default is returned as-is (never clamped) when *raw* is ``None`` or
    is not a numeric literal. Out-of-range values are pulled to the nearest
    bound rather than rejected.
    """
    if raw is None:
        return default

    value = _to_number(raw)
    if value is None:
        return default

    if min is not None and value < min:
        return min
    if max is not None and value > max:
        return max
    return value


def parse_boolean(raw: Optional[str], default: bool) -> bool:
    """Interpret *raw* as a flag.

    Only an absent value yields *default*; any present string is ``True``
    when it is one of :data:`TRUTHY_TOKENS` (case-insensitive, trimmed) and
    ``False`` otherwise.
    """
    if raw is None:
        return default
    return raw.strip().lower() in TRUTHY_TOKENS
