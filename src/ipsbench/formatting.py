"""Text formatting helpers for ipsbench reports.

Provides magnitude scaling for the mean column, slowdown ratio cells and
duration formatting used in log messages and CLI output.
"""

from __future__ import annotations

# (upper bound, divisor, value suffix, per-op multiplier, per-op unit)
_TIERS: tuple[tuple[float, float, str, float, str], ...] = (
    (1e3, 1.0, "", 1.0, "s"),
    (1e6, 1e3, "k", 1e3, "ms"),
    (1e9, 1e6, "M", 1e6, "us"),
)
_TOP_TIER = (1e9, "G", 1e9, "ns")


def scale_mean(mean: float) -> tuple[float, str, float, str]:
    """Pick the display tier for *mean*.

    Returns:
        ``(value, suffix, per_op, unit)`` where *value* is *mean* divided
        by a power of 1000 and *per_op* is the matching reciprocal, e.g.
        ``1e3 / mean`` milliseconds for the ``k`` tier.
    """
    for bound, divisor, suffix, multiplier, unit in _TIERS:
        if mean < bound:
            return mean / divisor, suffix, _reciprocal(mean, multiplier), unit
    divisor, suffix, multiplier, unit = _TOP_TIER
    return mean / divisor, suffix, _reciprocal(mean, multiplier), unit


def _reciprocal(mean: float, multiplier: float) -> float:
    if mean == 0:
        return float("inf")
    return multiplier / mean


def format_magnitude(mean: float) -> str:
    """Format the value and per-op columns: ``'  1.50k (  0.67ms)'``."""
    value, suffix, per_op, unit = scale_mean(mean)
    return f"{value:6.2f}{suffix or ' '} ({per_op:6.2f}{unit:<2s})"


def format_rsd(relative_stddev: float) -> str:
    """Format a relative standard deviation: ``'(± 1.25%)'``."""
    return f"(±{relative_stddev:5.2f}%)"


def ratio_width(fastest: int, slowest: int) -> int:
    """Width of the widest slowdown ratio, ``fastest / slowest``."""
    if slowest <= 0:
        return 4
    return len(f"{fastest / slowest:.2f}")


def format_slowdown(fastest: int, sample_count: int, width: int) -> str:
    """Format the last column for one row.

    The row holding the highest sample count is ``'fastest'``; any other
    row shows ``fastest / sample_count`` as an ``'N.NN× slower'`` figure
    right-aligned to *width*.
    """
    if sample_count == fastest:
        return f"{'':>{width}s} fastest"
    if sample_count <= 0:
        return f"{'inf':>{width}s}× slower"
    return f"{fastest / sample_count:>{width}.2f}× slower"


def format_duration(seconds: float) -> str:
    """Format seconds with adaptive units: ``'1.50s'``, ``'250.00ms'``, ``'12us'``."""
    if seconds < 0.001:
        return f"{seconds * 1_000_000:.0f}us"
    if seconds < 1:
        return f"{seconds * 1000:.2f}ms"
    if seconds < 60:
        return f"{seconds:.2f}s"
    minutes = int(seconds // 60)
    secs = seconds % 60
    return f"{minutes}m{secs:.0f}s"
