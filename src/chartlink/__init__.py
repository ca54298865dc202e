"""Linked charts with click-to-highlight cross-filtering."""

from chartlink.core.enums import ChartKind, Emphasis
from chartlink.core.selection import SelectionController
from chartlink.orchestration.dashboard import Dashboard
from chartlink.processing.aggregator import DataAggregator
from chartlink.views.chart_view import ChartView, EmphasisStyle

__version__ = "0.1.0"

__all__ = [
    "ChartKind",
    "ChartView",
    "Dashboard",
    "DataAggregator",
    "Emphasis",
    "EmphasisStyle",
    "SelectionController",
    "__version__",
]
