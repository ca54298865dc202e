"""Enumerations for chartlink core types."""

from enum import Enum


class Emphasis(str, Enum):
    """Visual prominence a view gives to a mark."""

    FULL = "full"
    DIMMED = "dimmed"


class ChartKind(str, Enum):
    """Kinds of linked views a dashboard builds."""

    BAR = "bar"  # Average life expectancy per cluster
    SCATTER = "scatter"  # Population vs. life expectancy per country


class ErrorCode(str, Enum):
    """Application error codes for structured error responses."""

    E422_UNPROCESSABLE = "E422_UNPROCESSABLE"
