"""Headless chart view linked to a shared selection."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field, model_validator

from chartlink.core.enums import ChartKind, Emphasis
from chartlink.core.models import Mark, Record
from chartlink.core.selection import SelectionController
from chartlink.infra.logging import get_logger
from chartlink.infra.settings import DashboardSettings

logger = get_logger(__name__)


class EmphasisStyle(BaseModel):
    """Maps emphasis to mark opacity."""

    model_config = ConfigDict(frozen=True)

    full_opacity: float = Field(default=1.0, ge=0.0, le=1.0)
    dimmed_opacity: float = Field(default=0.3, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def check_opacity_order(self) -> EmphasisStyle:
        """Dimmed marks must not be more opaque than emphasized ones."""
        if self.dimmed_opacity > self.full_opacity:
            raise ValueError("dimmed_opacity must not exceed full_opacity")
        return self

    @classmethod
    def from_settings(cls, settings: DashboardSettings) -> EmphasisStyle:
        return cls(full_opacity=settings.full_opacity, dimmed_opacity=settings.dimmed_opacity)

    def opacity(self, emphasis: Emphasis) -> float:
        return self.full_opacity if emphasis is Emphasis.FULL else self.dimmed_opacity


class ChartView:
    """Keeps one chart's marks in step with a :class:`SelectionController`.

    The view owns no selection state. Clicks are forwarded to the controller
    and every notification recomputes the emphasis of all marks.
    """

    def __init__(
        self,
        name: str,
        kind: ChartKind,
        records: Sequence[Record],
        controller: SelectionController,
        style: EmphasisStyle | None = None,
    ) -> None:
        """Create the view and subscribe it to the controller.

        Args:
            name: Identifier used in logs.
            kind: Kind of chart the marks belong to.
            records: Records drawn as marks, in drawing order.
            controller: Selection shared with the linked views.
            style: Emphasis to opacity mapping; defaults to 1.0/0.3.
        """
        self.name = name
        self.kind = kind
        self.records: tuple[Record, ...] = tuple(records)
        self.style = style or EmphasisStyle()
        self.refresh_count = 0
        self._controller = controller
        self._marks = self._compute_marks()
        self._unsubscribe = controller.subscribe(self._on_selection_changed)

    @property
    def controller(self) -> SelectionController:
        return self._controller

    @property
    def closed(self) -> bool:
        return self._unsubscribe is None

    def marks(self) -> list[Mark]:
        """Return the marks as last refreshed, in record order."""
        return list(self._marks)

    def opacities(self) -> list[float]:
        return [mark.opacity for mark in self._marks]

    def click(self, index: int) -> None:
        """Handle a click on the mark at ``index``.

        Raises:
            IndexError: If no mark exists at ``index``.
        """
        record = self.records[index]
        logger.debug("Mark clicked", view=self.name, index=index, cluster=record.cluster)
        self._controller.toggle(record.cluster)

    def close(self) -> None:
        """Stop following the selection. Safe to call more than once."""
        if self._unsubscribe is None:
            return
        self._unsubscribe()
        self._unsubscribe = None

    def _on_selection_changed(self) -> None:
        self._marks = self._compute_marks()
        self.refresh_count += 1
        logger.debug(
            "View refreshed",
            view=self.name,
            selected=self._controller.current_selection(),
            dimmed=sum(1 for mark in self._marks if mark.emphasis is Emphasis.DIMMED),
        )

    def _compute_marks(self) -> tuple[Mark, ...]:
        marks = []
        for record in self.records:
            emphasis = self._controller.get_emphasis(record.cluster)
            marks.append(Mark(record=record, emphasis=emphasis, opacity=self.style.opacity(emphasis)))
        return tuple(marks)
