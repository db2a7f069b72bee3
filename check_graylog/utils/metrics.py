"""Check result and performance data structures."""

from dataclasses import dataclass, field
from typing import Optional

from .status import CheckStatus


@dataclass
class PerformanceData:
    """Metrics appended to the plugin output for graphing."""

    time: float = 0.0
    total: float = 0
    sources: float = 0
    throughput: float = 0
    index_failures: float = 0
    collectors: int = 0
    collector_failure: int = 0
    collector_offline: int = 0

    def format(self) -> str:
        """
        Render as a Nagios performance data string.

        Returns:
            str: Space separated ``label=value;;;;`` pairs
        """
        return (
            f"time={self.time:f};;;; "
            f"total={self.total:.0f};;;; "
            f"sources={self.sources:.0f};;;; "
            f"throughput={self.throughput:.0f};;;; "
            f"index_failures={self.index_failures:.0f};;;; "
            f"collectors={self.collectors:.0f};;;; "
            f"collector_failure={self.collector_failure:.0f};;;; "
            f"collector_offline={self.collector_offline:.0f};;;;"
        )


@dataclass
class CheckResult:
    """Outcome of a single check run."""

    status: CheckStatus
    message: str  # Human-readable summary, may span several lines
    perfdata: PerformanceData = field(default_factory=PerformanceData)
    error: Optional[str] = None  # Underlying error, only shown in debug mode

    def render(self) -> str:
        """Format the plugin output line."""
        return f"{self.status.name} - {self.message}|{self.perfdata.format()}"
