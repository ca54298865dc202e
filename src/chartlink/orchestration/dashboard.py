"""Dashboard wiring: one selection shared by a bar chart and a scatter plot."""

from __future__ import annotations

from chartlink.core.enums import ChartKind
from chartlink.core.models import AggregatedData
from chartlink.core.selection import SelectionController
from chartlink.infra.logging import get_logger
from chartlink.infra.settings import DashboardSettings
from chartlink.processing.aggregator import DataAggregator, RowsLike
from chartlink.views.chart_view import ChartView, EmphasisStyle

logger = get_logger(__name__)


class Dashboard:
    """A linked bar chart and scatter plot over the same year of data.

    Each dashboard owns its own :class:`SelectionController`, so several
    dashboards can coexist without affecting each other.
    """

    def __init__(self, data: AggregatedData, settings: DashboardSettings | None = None) -> None:
        self.settings = settings or DashboardSettings()
        self.data = data
        self.controller = SelectionController()

        style = EmphasisStyle.from_settings(self.settings)
        self.bar = ChartView("bar", ChartKind.BAR, data.clusters, self.controller, style)
        self.scatter = ChartView("scatter", ChartKind.SCATTER, data.countries, self.controller, style)

        logger.info(
            "Dashboard ready",
            year=data.year,
            bars=len(data.clusters),
            points=len(data.countries),
        )

    @classmethod
    def from_data(
        cls,
        data: RowsLike,
        year: int | None = None,
        settings: DashboardSettings | None = None,
    ) -> Dashboard:
        """Aggregate raw rows and build a dashboard over them.

        Args:
            data: Rows already loaded in memory.
            year: Year to show; defaults to the configured year.
            settings: Dashboard settings; read from the environment if omitted.

        Raises:
            AggregationError: If the rows lack a required column.
        """
        settings = settings or DashboardSettings()
        aggregated = DataAggregator(settings).aggregate(data, year=year)
        return cls(aggregated, settings=settings)

    @property
    def views(self) -> tuple[ChartView, ChartView]:
        return (self.bar, self.scatter)

    def close(self) -> None:
        for view in self.views:
            view.close()
