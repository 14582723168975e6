"""Router: runs report processors and fans each report out to its destinations."""

import itertools
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Dict, Generic, List, Optional, Sequence, Tuple, Any
from ..destinations.base import R, ReportDestination, ReportProcessor
from ..utils.errors import ReportDeliveryError
from ..utils.logging import get_logger

logger = get_logger("routing.router")


@dataclass
class Route(Generic[R]):
    """One processor and the destinations its report goes to, in registration order."""
    route_id: int
    processor: ReportProcessor[R]
    destinations: List[ReportDestination[R]] = field(default_factory=list)


class Router(Generic[R]):
    """
    Maps processors to destinations and delivers reports concurrently.

    Routes are keyed by a generated route id. A processor instance gets its id
    the first time it is registered; registering the same instance again
    (matched by identity) adds to that route. Destinations are never
    deduplicated.
    """

    def __init__(self, max_workers: Optional[int] = None):
        """
        Args:
            max_workers: Thread pool size for generation and upload tasks
                (default: ThreadPoolExecutor's own default)
        """
        self.max_workers = max_workers
        self._routes: Dict[int, Route[R]] = {}
        self._ids = itertools.count(1)

    def _find_route(self, processor: ReportProcessor[R]) -> Optional[Route[R]]:
        for route in self._routes.values():
            if route.processor is processor:
                return route
        return None

    def register_route(self, processor: ReportProcessor[R], destination: ReportDestination[R]) -> int:
        """
        Send reports from ``processor`` to ``destination``.

        Returns:
            The route id of the processor
        """
        route = self._find_route(processor)
        if route is None:
            route = Route(route_id=next(self._ids), processor=processor)
            self._routes[route.route_id] = route
        route.destinations.append(destination)
        logger.debug(f"Route {route.route_id}: {type(processor).__name__} -> {destination!r}")
        return route.route_id

    def get_route(self, route_id: int) -> Route[R]:
        """Return the route registered under ``route_id`` (KeyError if unknown)."""
        return self._routes[route_id]

    @property
    def routes(self) -> List[Route[R]]:
        """Registered routes in the order their processors were first registered."""
        return list(self._routes.values())

    def upload_report(self, artifacts: Sequence[Any]) -> None:
        """
        Generate every processor's report and upload it to each of its destinations.

        Generation runs one task per processor; each successful report starts one
        upload task per destination. A failing processor skips only its own
        destinations. Returns or raises only after every task has settled.

        Raises:
            ReportDeliveryError: With every underlying error, if any task failed
        """
        snapshot: List[Tuple[int, ReportProcessor[R], Tuple[ReportDestination[R], ...]]] = [
            (route.route_id, route.processor, tuple(route.destinations))
            for route in self._routes.values()
        ]
        errors: List[BaseException] = []
        uploads: Dict[Future, Tuple[int, ReportDestination[R]]] = {}

        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="prtifact") as executor:
            generations: Dict[Future, Tuple[int, Tuple[ReportDestination[R], ...]]] = {
                executor.submit(processor.generate_report, artifacts): (route_id, destinations)
                for route_id, processor, destinations in snapshot
            }

            for future in as_completed(generations):
                route_id, destinations = generations[future]
                try:
                    report = future.result()
                except Exception as e:
                    logger.error(f"Route {route_id}: report generation failed: {e}")
                    errors.append(e)
                    continue
                for destination in destinations:
                    uploads[executor.submit(destination.upload_report, report)] = (route_id, destination)

            for future in as_completed(uploads):
                route_id, destination = uploads[future]
                try:
                    future.result()
                except Exception as e:
                    logger.error(f"Route {route_id}: upload to {destination!r} failed: {e}")
                    errors.append(e)

        if errors:
            raise ReportDeliveryError(errors)

        logger.info(f"Delivered {len(uploads)} report(s) across {len(snapshot)} route(s)")
