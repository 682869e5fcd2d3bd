from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from fractions import Fraction
from typing import Iterable, Sequence, Tuple

SCORE_MIN = 0
SCORE_MAX = 5

# (inclusive lower bound, label), evaluated top down
TIERS: Tuple[Tuple[float, str], ...] = (
    (5, "excellent"),
    (4, "good"),
    (3, "average"),
    (2, "needs improvement"),
)
BOTTOM_TIER = "needs strengthening"

_Q1 = Decimal("0.1")


def clamp(n: float, lo: float = SCORE_MIN, hi: float = SCORE_MAX) -> float:
    return max(lo, min(hi, n))


def coerce_value(raw: object) -> float:
    """
    Loose numeric coercion for user input.

    bool -> 1.0/0.0, numbers -> float, numeric strings -> parsed,
    blank or unparsable strings, None, NaN and anything else -> 0.0.
    Infinities are kept; clamping maps them onto the scale ends.
    """
    if isinstance(raw, bool):
        return 1.0 if raw else 0.0

    if isinstance(raw, (int, float, Decimal, Fraction)):
        try:
            value = float(raw)
        except OverflowError:
            # ints and fractions beyond float range are still out-of-range numbers
            return math.inf if raw > 0 else -math.inf
        except (InvalidOperation, ValueError):
            return 0.0
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return 0.0
        try:
            value = float(text)
        except ValueError:
            return 0.0
    else:
        return 0.0

    if math.isnan(value):
        return 0.0
    return value


def normalize_value(raw: object) -> float:
    """Coerce then clamp into [0, 5]; the one way values are read."""
    return float(clamp(coerce_value(raw)))


def tier_label(value: float) -> str:
    for threshold, label in TIERS:
        if value >= threshold:
            return label
    return BOTTOM_TIER


def format_score(value: float) -> str:
    """Shortest exact display: 3.0 -> "3", 3.5 -> "3.5", 1e-05 -> "0.00001"."""
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def format_average(values: Iterable[float]) -> str:
    """
    Mean rendered with exactly one decimal digit.
    Rule: ROUND_HALF_UP on the decimal repr of the float mean.
    """
    avg = mean(list(values))
    return str(Decimal(repr(avg)).quantize(_Q1, rounding=ROUND_HALF_UP))
