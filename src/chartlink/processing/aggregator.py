"""Aggregation of gapminder-style rows into chart records using Polars."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import polars as pl

from chartlink.core.errors import AggregationError
from chartlink.core.models import AggregatedData, ClusterSummary, CountryRecord
from chartlink.infra.logging import get_logger
from chartlink.infra.settings import DashboardSettings

logger = get_logger(__name__)

REQUIRED_COLUMNS: tuple[str, ...] = ("year", "country", "pop", "life_expect", "cluster")
COUNTRY_COLUMNS: tuple[str, ...] = ("country", "pop", "life_expect", "cluster")

RowsLike = pl.DataFrame | Sequence[Mapping[str, Any]]


class DataAggregator:
    """Builds the per-cluster and per-country record sequences for one year."""

    def __init__(self, settings: DashboardSettings | None = None) -> None:
        self.settings = settings or DashboardSettings()

    def aggregate(self, data: RowsLike, year: int | None = None) -> AggregatedData:
        """Aggregate rows already loaded in memory.

        Args:
            data: DataFrame or sequence of row mappings with the columns
                ``year``, ``country``, ``pop``, ``life_expect`` and ``cluster``.
            year: Year to keep; defaults to the configured year.

        Returns:
            AggregatedData with cluster means (ordered by first appearance)
            and country rows (in input order).

        Raises:
            AggregationError: If a required column is missing.
        """
        target_year = self.settings.year if year is None else year
        df = self._to_frame(data)
        self._check_columns(df)

        # NaN counts as missing so incomplete rows share the drop-and-warn path.
        filtered = df.filter(pl.col("year") == target_year).select(
            pl.col("country").cast(pl.Utf8),
            pl.col("pop").cast(pl.Float64).fill_nan(None),
            pl.col("life_expect").cast(pl.Float64).fill_nan(None),
            self._cluster_label(df.schema["cluster"]),
        )

        warnings: list[str] = []
        complete = filtered.drop_nulls()
        dropped = filtered.height - complete.height
        if dropped:
            warnings.append(f"Dropped {dropped} row(s) with missing values for {target_year}")
        if complete.is_empty():
            warnings.append(f"No rows found for year {target_year}")

        for message in warnings:
            logger.warning(message, year=target_year)

        country_rows = complete.select(list(COUNTRY_COLUMNS)).to_dicts()
        result = AggregatedData(
            year=target_year,
            clusters=self._cluster_means(complete),
            countries=[CountryRecord.model_validate(row) for row in country_rows],
            warnings=warnings,
        )
        logger.info(
            "Aggregated dataset",
            year=target_year,
            input_rows=df.height,
            clusters=len(result.clusters),
            countries=len(result.countries),
        )
        return result

    def _cluster_means(self, df: pl.DataFrame) -> list[ClusterSummary]:
        means = df.group_by("cluster", maintain_order=True).agg(pl.col("life_expect").mean())
        return [ClusterSummary.model_validate(row) for row in means.to_dicts()]

    def _cluster_label(self, dtype: pl.DataType) -> pl.Expr:
        """Return an expression rendering ``cluster`` as a string label.

        Float codes that hold whole numbers (``4.0``) are labelled like their
        integer form (``"4"``).
        """
        cluster = pl.col("cluster")
        if not dtype.is_float():
            return cluster.cast(pl.Utf8)

        cluster = cluster.fill_nan(None)
        return (
            pl.when(cluster == cluster.floor())
            .then(cluster.cast(pl.Int64, strict=False).cast(pl.Utf8))
            .otherwise(cluster.cast(pl.Utf8))
            .alias("cluster")
        )

    def _to_frame(self, data: RowsLike) -> pl.DataFrame:
        if isinstance(data, pl.DataFrame):
            return data
        rows = [dict(row) for row in data]
        if not rows:
            return pl.DataFrame(schema={column: pl.Null for column in REQUIRED_COLUMNS})
        return pl.DataFrame(rows, infer_schema_length=None)

    def _check_columns(self, df: pl.DataFrame) -> None:
        missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
        if missing:
            logger.error("Input is missing required columns", missing=missing, columns=df.columns)
            raise AggregationError(
                f"Input data is missing required columns: {', '.join(missing)}",
                missing_columns=missing,
            )
