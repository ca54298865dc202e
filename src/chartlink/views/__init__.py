"""Chart views linked to a shared selection."""

from .chart_view import ChartView, EmphasisStyle

__all__ = ["ChartView", "EmphasisStyle"]
