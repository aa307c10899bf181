"""Use case publishing aggregate totals to the shared widget snapshot."""

from collections.abc import Iterable

from balance_scale.application.ports.snapshot import SnapshotPublisherPort
from balance_scale.domain.errors import PersistenceError
from balance_scale.domain.models.balance import BalanceSummary
from balance_scale.domain.models.entries import Entry
from balance_scale.domain.services.aggregation import summarize
from balance_scale.infrastructure.logging.logger import get_app_logger


class PublishBalanceSnapshotUseCase:
    """Summarize entries and write the totals to the snapshot surface.

    Instances are callable so they can be subscribed to an EntryStore
    directly. Publishing is best effort: failures are logged and the
    widget keeps showing the previous snapshot.
    """

    def __init__(self, publisher: SnapshotPublisherPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            publisher: Port writing the shared snapshot.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._publisher = publisher
        self._logger = logger or get_app_logger()

    def execute(self, entries: Iterable[Entry]) -> BalanceSummary | None:
        """Publish the totals of the given entries.

        Returns:
            BalanceSummary | None: Published totals, None on failure.
        """
        summary = summarize(entries)
        try:
            self._publisher.publish(summary)
        except PersistenceError as exc:
            self._logger.error(f"Failed to publish widget snapshot: {exc}")
            return None
        self._logger.info(
            f"Published widget snapshot: income={summary.total_income}, "
            f"expenses={summary.total_expenses}"
        )
        return summary

    def __call__(self, entries: Iterable[Entry]) -> None:
        self.execute(entries)


__all__ = ["PublishBalanceSnapshotUseCase"]
