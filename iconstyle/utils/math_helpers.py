"""Math helpers: number rendering for markup output. No engine imports."""

from __future__ import annotations

import math

# Four decimals is well below a device pixel at any realistic icon size.
_DECIMALS = 4


def format_number(value: float) -> str:
    """Render a number in its shortest markup form.

    Integral values drop the decimal point (4.0 -> "4"), everything else is
    rounded to four decimals with trailing zeros stripped (6.1440000001 -> "6.144").
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot render non-finite number: {value}")
    text = f"{value:.{_DECIMALS}f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def format_percent(value: float) -> str:
    """One-decimal percentage used for gradient endpoints (50 -> "50.0%")."""
    text = f"{value:.1f}"
    if text == "-0.0":
        text = "0.0"
    return f"{text}%"
