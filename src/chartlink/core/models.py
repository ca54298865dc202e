"""Pydantic models for chartlink data structures."""

from pydantic import BaseModel, ConfigDict, Field

from .enums import Emphasis


class Record(BaseModel):
    """A displayable row. Only ``cluster`` matters to the selection."""

    model_config = ConfigDict(frozen=True, extra="allow")

    cluster: str = Field(..., description="Region/category label grouping the record")


class ClusterSummary(Record):
    """One bar: the mean life expectancy of a cluster."""

    life_expect: float = Field(..., description="Mean life expectancy of the cluster")


class CountryRecord(Record):
    """One scatter point."""

    country: str = Field(..., description="Country name")
    pop: float = Field(..., ge=0, description="Population")
    life_expect: float = Field(..., description="Life expectancy in years")


class Mark(BaseModel):
    """A record together with the emphasis it is currently drawn with."""

    model_config = ConfigDict(frozen=True)

    record: Record = Field(..., description="Record behind the mark")
    emphasis: Emphasis = Field(..., description="Emphasis derived from the selection")
    opacity: float = Field(..., ge=0.0, le=1.0, description="Opacity derived from the emphasis")


class AggregatedData(BaseModel):
    """The two record sequences a dashboard draws, for a single year."""

    year: int = Field(..., description="Year the rows were filtered to")
    clusters: list[ClusterSummary] = Field(default_factory=list, description="Per-cluster means")
    countries: list[CountryRecord] = Field(default_factory=list, description="Per-country rows")
    warnings: list[str] = Field(default_factory=list, description="Aggregation warnings")


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    reason: str | None = Field(default=None, description="Detailed reason for the error")


class ErrorResponse(BaseModel):
    """Serializable form of a chartlink error."""

    code: str = Field(..., description="Error code (e.g., E422_UNPROCESSABLE)")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] | None = Field(default=None, description="Detailed error information")
    hint: str | None = Field(default=None, description="Correction hint for the user")
