"""Data aggregation components."""

from .aggregator import DataAggregator

__all__ = ["DataAggregator"]
