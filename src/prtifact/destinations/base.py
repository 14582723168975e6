"""Processor and destination interfaces routed by the Router."""

from abc import ABC, abstractmethod
from typing import Any, Generic, Sequence, TypeVar

R = TypeVar("R")


class ReportProcessor(ABC, Generic[R]):
    """
    Turns a sequence of artifacts into a report.

    Implementations must be safe to call concurrently with other processors.
    Set ``uses_artifacts`` to False when the report does not depend on the
    run's artifacts, so they are not fetched for it.
    """

    uses_artifacts: bool = True

    @abstractmethod
    def generate_report(self, artifacts: Sequence[Any]) -> R:
        """
        Generate a report for the given artifacts.

        Args:
            artifacts: Artifacts of the run, passed through untouched

        Returns:
            The report payload handed to every destination of this processor
        """
        pass


class ReportDestination(ABC, Generic[R]):
    """
    Delivers an already generated report somewhere.

    Implementations must be safe to call concurrently with other destinations
    receiving the same or a different report.
    """

    @abstractmethod
    def upload_report(self, report: R) -> None:
        """Deliver ``report``. Raise on failure; the router aggregates."""
        pass
