"""Shared cluster selection for linked chart views.

The controller is a two-state latch. Nothing is selected initially; toggling a
cluster selects it, toggling the selected cluster again clears the selection
and toggling any other cluster switches to it. Views never mutate the state
directly: they call :meth:`SelectionController.toggle` from their click
handlers and re-read emphasis when notified.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from chartlink.core.enums import Emphasis
from chartlink.infra.logging import get_logger

logger = get_logger(__name__)

Listener = Callable[[], None]
Unsubscribe = Callable[[], None]


class _Subscription:
    """Registration handle; its identity, not the listener's, is what gets removed."""

    __slots__ = ("listener",)

    def __init__(self, listener: Listener) -> None:
        self.listener = listener


class SelectionController:
    """Single source of truth for the selected cluster."""

    def __init__(self) -> None:
        self._selected: str | None = None
        self._subscriptions: list[_Subscription] = []

    def current_selection(self) -> str | None:
        """Return the selected cluster, or ``None`` when nothing is selected."""
        return self._selected

    @property
    def listener_count(self) -> int:
        return len(self._subscriptions)

    def toggle(self, cluster: str) -> None:
        """Select ``cluster``, or clear the selection if it is already selected.

        Any string is accepted, including clusters no view knows about; such
        a selection simply dims every mark. Listeners are notified once,
        after the new state is in place and before this method returns.

        Args:
            cluster: Cluster label of the clicked mark.
        """
        previous = self._selected
        self._selected = None if previous == cluster else cluster
        logger.debug("Selection toggled", clicked=cluster, previous=previous, selected=self._selected)
        self._notify()

    def reset(self) -> None:
        """Clear the selection, notifying listeners only if one was active."""
        if self._selected is None:
            return
        logger.debug("Selection reset", previous=self._selected)
        self._selected = None
        self._notify()

    def get_emphasis(self, record_cluster: str) -> Emphasis:
        """Return the emphasis for a mark belonging to ``record_cluster``.

        Args:
            record_cluster: Cluster label of the record being drawn.

        Returns:
            ``Emphasis.FULL`` when nothing is selected or the cluster matches
            the selection, ``Emphasis.DIMMED`` otherwise.
        """
        if self._selected is None or record_cluster == self._selected:
            return Emphasis.FULL
        return Emphasis.DIMMED

    def emphasis_for(self, record: Any) -> Emphasis:  # noqa: ANN401 - any object carrying a cluster
        """Return the emphasis for a record exposing ``cluster`` as attribute or key.

        Records without a cluster are treated as belonging to no cluster, so
        they are dimmed whenever something is selected.
        """
        if isinstance(record, Mapping):
            cluster = record.get("cluster")
        else:
            cluster = getattr(record, "cluster", None)
        if cluster is None:
            return Emphasis.FULL if self._selected is None else Emphasis.DIMMED
        return self.get_emphasis(cluster)

    def subscribe(self, listener: Listener) -> Unsubscribe:
        """Register ``listener`` to be called after every toggle.

        Subscribing the same callable twice creates two independent
        subscriptions.

        Args:
            listener: Zero-argument callable.

        Returns:
            A callable that removes this subscription. Calling it again has
            no effect.
        """
        subscription = _Subscription(listener)
        self._subscriptions.append(subscription)

        def unsubscribe() -> None:
            try:
                self._subscriptions.remove(subscription)
            except ValueError:
                return
            logger.debug("Listener unsubscribed", listeners=len(self._subscriptions))

        logger.debug("Listener subscribed", listeners=len(self._subscriptions))
        return unsubscribe

    def _notify(self) -> None:
        # Snapshot so listeners can unsubscribe while being notified.
        for subscription in tuple(self._subscriptions):
            subscription.listener()
