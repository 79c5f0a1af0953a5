"""Free-text form field parsing.

Calculator inputs arrive the way a user typed them into a form: numbers,
numeric strings, strings with currency symbols or thousands separators, or
garbage. A field never rejects its input. Anything that does not parse is
replaced with that field's fallback constant, so a malformed field silently
turns into a default instead of surfacing an error.
"""
from __future__ import annotations

import math
from typing import Any

from pydantic import BeforeValidator

_STRIP_CHARS = ("$", ",", "%", "_")


def parse_number(value: Any, fallback: float, *, positive: bool = False) -> float:
    """Parse a form value into a float, returning ``fallback`` on failure.

    Args:
        value: Raw form value (number, string, None).
        fallback: Constant substituted when parsing fails.
        positive: When True, zero and negative results also fall back.
    """
    if isinstance(value, bool) or value is None:
        return float(fallback)

    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        for ch in _STRIP_CHARS:
            text = text.replace(ch, "")
        try:
            number = float(text)
        except ValueError:
            return float(fallback)

    if not math.isfinite(number):
        return float(fallback)
    if positive and number <= 0:
        return float(fallback)
    return number


def parse_int(value: Any, fallback: int, *, positive: bool = False) -> int:
    """Integer variant of parse_number; fractional input is truncated."""
    return int(parse_number(value, fallback, positive=positive))


def form_number(fallback: float, *, positive: bool = False) -> BeforeValidator:
    """Pydantic validator applying parse_number with a per-field fallback."""
    return BeforeValidator(lambda v: parse_number(v, fallback, positive=positive))


def form_int(fallback: int, *, positive: bool = False) -> BeforeValidator:
    return BeforeValidator(lambda v: parse_int(v, fallback, positive=positive))


def form_flag(fallback: bool) -> BeforeValidator:
    """Checkbox-style boolean: accepts bools and the usual string spellings."""

    def _parse(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            text = value.strip().lower()
            if text in ("true", "yes", "on", "1"):
                return True
            if text in ("false", "no", "off", "0"):
                return False
        return fallback

    return BeforeValidator(_parse)
