"""Terminal progress bar rendering."""

from __future__ import annotations

import math

_BLUE = 34
_YELLOW = 33
_GREEN = 32


def _style(text: str, code: int) -> str:
    return f"\x1b[{code}m{text}\x1b[0m"


def _round_half_away(value: float) -> float:
    if not math.isfinite(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _filled_cells(target: float, barsize: int) -> int:
    if math.isnan(target) or target <= 0.0:
        return 0
    if math.isinf(target):
        return barsize
    return min(int(target), barsize)


def _format_percent(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0.0 and math.copysign(1.0, value) < 0:
        return "-0"
    return str(int(value))


def progress_bar(current: int, maximum: int, barsize: int) -> str:
    """Render ``[===---] N%`` with ANSI colours for ``current`` of ``maximum``."""
    if barsize < 0:
        raise ValueError("barsize must not be negative")
    denominator = float(maximum) - 1.0
    if denominator == 0.0:
        fraction = math.nan if current == 0 else math.copysign(math.inf, current)
    else:
        fraction = current / denominator
    filled = _filled_cells(fraction * barsize, barsize)
    done = "=" * filled
    remaining = "-" * (barsize - filled)
    percent = _round_half_away(fraction * 100.0)
    color = _YELLOW if percent < 100.0 else _GREEN
    return f"[{_style(done, _BLUE)}{remaining}] {_style(_format_percent(percent), color)}%"