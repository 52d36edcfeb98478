from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterable, Union

import pandas as pd

Number = Union[Decimal, float, int, str]

CENT = Decimal("0.01")


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def to_decimal(value: Number) -> Decimal:
    """Coerce to Decimal through the shortest repr so 0.1 stays 0.1."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"Cannot convert non-finite value {value!r} to Decimal")
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Cannot convert {value!r} to Decimal") from exc


def quantize_money(amount: Decimal) -> Decimal:
    """Round to cents, half away from zero (output level only)."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def clamp_probability(p: float) -> float:
    """Clip a per-month event probability into [0, 1]."""
    if p != p:  # NaN
        raise ValueError("Probability is NaN")
    return min(max(p, 0.0), 1.0)
