"""Tests for chartlink data models."""

import pytest
from pydantic import ValidationError

from chartlink.core.enums import Emphasis
from chartlink.core.models import AggregatedData, ClusterSummary, CountryRecord, Mark, Record


class TestRecord:
    """Tests for record models."""

    def test_cluster_required(self) -> None:
        """Test that a record without a cluster is rejected."""
        with pytest.raises(ValidationError):
            Record()  # type: ignore[call-arg]

    def test_extra_fields_kept(self) -> None:
        """Test that view-specific fields are preserved."""
        record = Record(cluster="Asia", label="East")

        assert record.cluster == "Asia"
        assert record.model_dump() == {"cluster": "Asia", "label": "East"}

    def test_records_are_immutable(self) -> None:
        """Test that records cannot be mutated after loading."""
        record = ClusterSummary(cluster="Asia", life_expect=70.5)

        with pytest.raises(ValidationError):
            record.cluster = "Europe"  # type: ignore[misc]

    def test_country_record(self) -> None:
        """Test country record fields and population bound."""
        record = CountryRecord(country="Chile", pop=15_000_000, life_expect=77.3, cluster="3")

        assert record.pop == 15_000_000.0
        with pytest.raises(ValidationError):
            CountryRecord(country="Nowhere", pop=-1, life_expect=50.0, cluster="3")


class TestMark:
    """Tests for rendered mark state."""

    def test_opacity_bounds(self) -> None:
        """Test that opacity must lie within [0, 1]."""
        record = Record(cluster="Asia")

        assert Mark(record=record, emphasis=Emphasis.DIMMED, opacity=0.3).opacity == 0.3
        with pytest.raises(ValidationError):
            Mark(record=record, emphasis=Emphasis.FULL, opacity=1.5)


class TestAggregatedData:
    """Tests for aggregated data container."""

    def test_defaults(self) -> None:
        """Test that sequences default to empty."""
        data = AggregatedData(year=2000)

        assert data.clusters == []
        assert data.countries == []
        assert data.warnings == []
