"""Core types, errors and the shared selection."""

from .enums import ChartKind, Emphasis, ErrorCode
from .errors import AggregationError, ChartlinkError
from .selection import SelectionController, Unsubscribe

__all__ = [
    "AggregationError",
    "ChartKind",
    "ChartlinkError",
    "Emphasis",
    "ErrorCode",
    "SelectionController",
    "Unsubscribe",
]
