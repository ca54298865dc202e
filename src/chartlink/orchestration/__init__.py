"""Dashboard orchestration."""

from .dashboard import Dashboard

__all__ = ["Dashboard"]
