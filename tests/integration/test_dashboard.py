"""Integration tests: rows in, linked views out."""

import polars as pl
import pytest

from chartlink.core.enums import ChartKind, Emphasis
from chartlink.core.errors import AggregationError
from chartlink.infra.settings import DashboardSettings
from chartlink.orchestration.dashboard import Dashboard


@pytest.fixture
def settings() -> DashboardSettings:
    """Settings isolated from the environment."""
    return DashboardSettings(_env_file=None, year=2000, full_opacity=1.0, dimmed_opacity=0.3)


@pytest.fixture
def gapminder() -> pl.DataFrame:
    """A small slice shaped like the gapminder dataset."""
    return pl.DataFrame(
        {
            "year": [2000, 2000, 2000, 2000, 2000, 1995],
            "country": ["Japan", "China", "France", "Germany", "Ghana", "Japan"],
            "cluster": [4, 4, 1, 1, 3, 4],
            "pop": [127e6, 1.26e9, 59e6, 82e6, 19e6, 125e6],
            "life_expect": [81.0, 71.0, 79.0, 78.0, 58.0, 80.0],
            "fertility": [1.3, 1.7, 1.9, 1.4, 4.6, 1.5],
        }
    )


class TestDashboard:
    """End-to-end tests for a linked dashboard."""

    def test_builds_bar_and_scatter(self, gapminder: pl.DataFrame, settings: DashboardSettings) -> None:
        """Test that the dashboard shares one selection between two views."""
        dashboard = Dashboard.from_data(gapminder, settings=settings)

        assert dashboard.bar.kind is ChartKind.BAR
        assert dashboard.scatter.kind is ChartKind.SCATTER
        assert dashboard.bar.controller is dashboard.scatter.controller is dashboard.controller
        assert [mark.record.cluster for mark in dashboard.bar.marks()] == ["4", "1", "3"]
        assert len(dashboard.scatter.marks()) == 5

    def test_bar_click_highlights_countries(self, gapminder: pl.DataFrame, settings: DashboardSettings) -> None:
        """Test cross-filtering from the bar chart to the scatter plot."""
        dashboard = Dashboard.from_data(gapminder, settings=settings)

        dashboard.bar.click(1)

        assert dashboard.bar.opacities() == [0.3, 1.0, 0.3]
        assert dashboard.scatter.opacities() == [0.3, 0.3, 1.0, 1.0, 0.3]

        dashboard.scatter.click(3)

        assert dashboard.controller.current_selection() is None
        assert all(mark.emphasis is Emphasis.FULL for view in dashboard.views for mark in view.marks())

    def test_dashboards_do_not_share_state(self, gapminder: pl.DataFrame, settings: DashboardSettings) -> None:
        """Test that two dashboards keep independent selections."""
        first = Dashboard.from_data(gapminder, settings=settings)
        second = Dashboard.from_data(gapminder, settings=settings)

        first.scatter.click(0)

        assert first.controller.current_selection() == "4"
        assert second.controller.current_selection() is None
        assert second.scatter.refresh_count == 0

    def test_year_override(self, gapminder: pl.DataFrame, settings: DashboardSettings) -> None:
        """Test building a dashboard for another year."""
        dashboard = Dashboard.from_data(gapminder, year=1995, settings=settings)

        assert dashboard.data.year == 1995
        assert len(dashboard.bar.marks()) == 1

    def test_close_detaches_views(self, gapminder: pl.DataFrame, settings: DashboardSettings) -> None:
        """Test that closing the dashboard removes both listeners."""
        dashboard = Dashboard.from_data(gapminder, settings=settings)

        dashboard.close()
        dashboard.controller.toggle("4")

        assert dashboard.controller.listener_count == 0
        assert dashboard.bar.refresh_count == 0

    def test_invalid_rows(self, settings: DashboardSettings) -> None:
        """Test that unusable input surfaces as an aggregation error."""
        with pytest.raises(AggregationError):
            Dashboard.from_data([{"country": "Japan"}], settings=settings)
