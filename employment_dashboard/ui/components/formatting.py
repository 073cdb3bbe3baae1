"""
Utility helpers for formatting numeric values, salaries, dates and percentages.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd

SCALE_FACTORS = [
    (1_000_000_000, "B"),
    (1_000_000, "M"),
    (1_000, "K"),
]


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return "–"


def _scale_value(value: float):
    for factor, suffix in SCALE_FACTORS:
        if abs(value) >= factor:
            return value / factor, suffix
    return value, ""


def format_salary(
    value: Optional[float],
    decimals: int = 0,
    compact: bool = False,
) -> str:
    """USD salary, e.g. ``$85,000`` or ``$85K`` when compact."""
    if value is None:
        return "–"
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return "–"

    suffix = ""
    display_value = numeric
    if compact:
        display_value, suffix = _scale_value(numeric)
    sign = "-" if display_value < 0 else ""
    return f"{sign}${abs(display_value):,.{decimals}f}{suffix}"


def format_percent(value: Optional[float], decimals: int = 1) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:.{decimals}f}%"
    except (TypeError, ValueError):
        return "–"


def format_date(value) -> str:
    """``Mar 5, 2024`` style date; dash when missing."""
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return "–"
    try:
        ts = pd.Timestamp(value)
    except (TypeError, ValueError):
        return "–"
    return f"{ts.strftime('%b')} {ts.day}, {ts.year}"
