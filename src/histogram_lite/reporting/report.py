"""Text reports for histograms.

Formats a Histogram's statistics and its most frequent items into
aligned tables for terminal output.
"""
from __future__ import annotations

import math

from histogram_lite.core.histogram import Histogram


def _fmt(value: float) -> str:
    if isinstance(value, float) and math.isnan(value):
        return "n/a"
    if isinstance(value, int):
        return f"{value:,}"
    return f"{value:.4f}"


def top_pairs(hist: Histogram, top: int) -> list[tuple[object, int]]:
    """The `top` most frequent pairs, highest first, ties broken by stored key.

    Uses the keys the entries were stored under, not the current key
    function, which may not accept items added before it was installed.
    """
    rows: list[tuple[object, int, str]] = []
    hist.each(lambda item, freq, k: rows.append((item, freq, k)))
    rows.sort(key=lambda row: (-row[1], row[2]))
    return [(item, freq) for item, freq, _ in rows[:top]]


def format_report(hist: Histogram, label: str = "Histogram", top: int = 10) -> str:
    """Format a histogram's statistics and top items as a report string."""
    lines = [
        f"=== {label} ===",
        f"Distinct:          {_fmt(hist.size())}",
        f"Total:             {_fmt(hist.total())}",
        f"Min frequency:     {_fmt(hist.min())}",
        f"Max frequency:     {_fmt(hist.max())}",
        f"Average:           {_fmt(hist.average())}",
        f"Entropy (bits):    {_fmt(hist.entropy())}",
    ]
    ranked = top_pairs(hist, top)
    if ranked:
        lines.append("")
        lines.append(f"Top {len(ranked)}:")
        for item, freq in ranked:
            lines.append(f"  {item!r:<24} {freq:>8,}")
    return "\n".join(lines)


def format_comparison(a: Histogram, b: Histogram) -> str:
    """Format a side-by-side metric table for two histograms."""
    rows = [
        ("Distinct", a.size(), b.size()),
        ("Total", a.total(), b.total()),
        ("Min frequency", a.min(), b.min()),
        ("Max frequency", a.max(), b.max()),
        ("Average", a.average(), b.average()),
        ("Entropy (bits)", a.entropy(), b.entropy()),
    ]
    lines = [
        f"{'Metric':<20} {'A':>12} {'B':>12}",
        "-" * 46,
    ]
    for name, left, right in rows:
        lines.append(f"{name:<20} {_fmt(left):>12} {_fmt(right):>12}")
    lines.append("-" * 46)
    lines.append(f"{'Equal':<20} {str(a.equals(b)):>12} {str(b.equals(a)):>12}")
    return "\n".join(lines)
