"""Terminal reports for histograms."""

from histogram_lite.reporting.report import format_comparison, format_report, top_pairs

__all__ = [
    "format_comparison",
    "format_report",
    "top_pairs",
]
