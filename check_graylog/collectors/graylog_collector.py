"""Graylog2 cluster health collector."""

from dataclasses import dataclass
import logging
import time
from typing import Iterable, Optional

from ..config.models import ThresholdsConfig
from ..utils.errors import CheckError
from ..utils.status import CheckStatus
from ..utils.metrics import CheckResult, PerformanceData
from .base import BaseCollector, safe_check
from .graylog_client import GraylogClient
from .responses import Collector, SystemStatus


@dataclass
class CollectorStats:
    """Aggregated collector counters for one run."""

    total: int = 0
    failing: int = 0
    offline: int = 0

    @property
    def unhealthy(self) -> int:
        return self.failing + self.offline


def aggregate_collectors(collectors: Iterable[Collector]) -> CollectorStats:
    """
    Count total, offline and failing collectors.

    Inactive collectors are offline whatever their status. Active ones
    are failing for any status code above 0 (1=unknown, 2=failing and
    unrecognised codes alike), or when no status was reported.

    Args:
        collectors: Collector registrations

    Returns:
        CollectorStats: Aggregated counters
    """
    stats = CollectorStats()
    for collector in collectors:
        stats.total += 1
        if not collector.active:
            stats.offline += 1
            continue
        code = collector.status_code
        if code is None or code > 0:
            stats.failing += 1
    return stats


def describe_unhealthy(stats: CollectorStats) -> str:
    """Summarize failing and inactive collectors in one sentence."""
    if stats.failing > 0 and stats.offline > 0:
        return f"{stats.failing} collectors are failing and {stats.offline} are inactive"
    elif stats.failing > 0:
        return f"{stats.failing} collectors are failing"
    return f"{stats.offline} collectors are inactive"


class GraylogCollector(BaseCollector):
    """Collector for Graylog2 node and collector-plugin health."""

    def __init__(
        self,
        client: GraylogClient,
        thresholds: ThresholdsConfig,
        logger: logging.Logger
    ):
        """
        Initialize Graylog2 collector.

        Args:
            client: Open Graylog2 API client
            thresholds: Collector thresholds and expected collector count
            logger: Logger instance
        """
        super().__init__(thresholds, logger)
        self.client = client

    @safe_check
    def collect(self) -> CheckResult:
        """
        Poll the API and evaluate the cluster state.

        Returns:
            CheckResult: First terminal condition found, or OK
        """
        start_time = time.time()

        system = self.client.fetch_system()
        self._check_system(system)

        index_failures = self.client.fetch_indexer_failures()
        throughput = self.client.fetch_throughput()
        inputs = self.client.fetch_inputs()
        total = self.client.fetch_total_count()
        collectors = self.client.fetch_collectors()

        stats = aggregate_collectors(collectors.collectors)
        elapsed = time.time() - start_time

        self.perfdata = PerformanceData(
            time=elapsed,
            total=total.events,
            sources=inputs.total,
            throughput=throughput.throughput,
            index_failures=index_failures.total,
            collectors=stats.total,
            collector_failure=stats.failing,
            collector_offline=stats.offline
        )

        self.logger.debug(
            "Collectors aggregated",
            extra={
                "collectors": stats.total,
                "failing": stats.failing,
                "offline": stats.offline,
                "duration_s": elapsed
            }
        )

        result = self._evaluate_collectors(stats)
        if result is not None:
            return result

        return CheckResult(
            status=CheckStatus.OK,
            message=(
                "Service is running!\n"
                f"{total.events} total events processed\n"
                f"{index_failures.total} index failures\n"
                f"{throughput.throughput:.0f} throughput\n"
                f"{inputs.total} sources\n"
                f"{stats.total} collectors detected\n"
                f"{stats.offline} collectors offline\n"
                f"{stats.failing} collectors failing\n"
                f"Check took {elapsed:.3f}s"
            ),
            perfdata=self.perfdata
        )

    def _check_system(self, system: SystemStatus):
        """
        Check node processing state, lifecycle and load balancer status.

        Raises:
            CheckError: On the first unhealthy value, in that order
        """
        self.logger.debug(
            "System status",
            extra={
                "hostname": system.hostname,
                "version": system.version,
                "lifecycle": system.lifecycle,
                "lb_status": system.lb_status
            }
        )

        if not system.is_processing:
            raise CheckError(CheckStatus.CRITICAL, "Service is not processing")
        if system.lifecycle != "running":
            raise CheckError(CheckStatus.WARNING, f"lifecycle: {system.lifecycle}")
        if system.lb_status != "alive":
            raise CheckError(CheckStatus.WARNING, f"lb_status: {system.lb_status}")

    def _evaluate_collectors(self, stats: CollectorStats) -> Optional[CheckResult]:
        """
        Apply collector thresholds and the expected collector count.

        Args:
            stats: Aggregated collector counters

        Returns:
            CheckResult for a violated rule, None if all rules pass
        """
        status = self._determine_status(stats.unhealthy)
        if status != CheckStatus.OK:
            return CheckResult(
                status=status,
                message=describe_unhealthy(stats),
                perfdata=self.perfdata
            )

        expected = self.thresholds.expected_collectors
        if expected > 0 and expected != stats.total:
            return CheckResult(
                status=CheckStatus.CRITICAL,
                message=f"Expecting {expected} collectors but {stats.total} reported in",
                perfdata=self.perfdata
            )

        return None
