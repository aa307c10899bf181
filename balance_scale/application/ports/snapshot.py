"""Ports for the shared balance snapshot read by the widget."""

from typing import Protocol

from balance_scale.domain.models.balance import BalanceSummary


class SnapshotPublisherPort(Protocol):
    """Port writing aggregate totals to the shared snapshot surface."""

    def publish(self, summary: BalanceSummary) -> None:
        """Overwrite the shared snapshot with the given totals."""


class SnapshotReaderPort(Protocol):
    """Port reading aggregate totals from the shared snapshot surface."""

    def read(self) -> BalanceSummary:
        """Return the last published totals, zero when none were published."""


__all__ = ["SnapshotPublisherPort", "SnapshotReaderPort"]
