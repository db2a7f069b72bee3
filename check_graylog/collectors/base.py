"""Base collector abstract class for Graylog2 checks."""

from abc import ABC, abstractmethod
import logging
from functools import wraps

from ..config.models import ThresholdsConfig
from ..utils.errors import CheckError
from ..utils.status import CheckStatus
from ..utils.metrics import CheckResult, PerformanceData


class BaseCollector(ABC):
    """Abstract base class for all collectors."""

    def __init__(self, thresholds: ThresholdsConfig, logger: logging.Logger):
        """
        Initialize base collector.

        Args:
            thresholds: Warning/critical threshold configuration
            logger: Logger instance
        """
        self.thresholds = thresholds
        self.logger = logger.getChild(self.__class__.__name__)
        # Reported with every result, zeros until a run fills it in
        self.perfdata = PerformanceData()

    @abstractmethod
    def collect(self) -> CheckResult:
        """
        Run the check and return its result.

        Returns:
            CheckResult: Check outcome

        Raises:
            CheckError: Terminal conditions (converted by safe_check)

        Note:
            Implementations should use @safe_check for error handling.
        """
        pass

    def _determine_status(self, value: int) -> CheckStatus:
        """
        Classify a count of unhealthy items against the thresholds.

        Both thresholds are inclusive.

        Args:
            value: Number of unhealthy items

        Returns:
            CheckStatus: CRITICAL, WARNING or OK
        """
        if value >= self.thresholds.critical:
            return CheckStatus.CRITICAL
        elif value >= self.thresholds.warning:
            return CheckStatus.WARNING
        return CheckStatus.OK


def safe_check(func):
    """
    Decorator turning terminal conditions into a CheckResult.

    The first CheckError raised wins. Anything else is reported as
    UNKNOWN. The collector's current performance data is always attached.

    Args:
        func: Collector method to wrap

    Returns:
        Wrapped function that always returns a CheckResult
    """
    @wraps(func)
    def wrapper(self, *args, **kwargs):
        try:
            return func(self, *args, **kwargs)
        except CheckError as e:
            self.logger.debug(
                f"Check aborted: {e.message}",
                extra={"status": e.status.name, "error": e.error}
            )
            return CheckResult(
                status=e.status,
                message=e.message,
                perfdata=self.perfdata,
                error=e.error
            )
        except Exception as e:
            self.logger.error(f"Check failed: {e}", exc_info=True)
            return CheckResult(
                status=CheckStatus.UNKNOWN,
                message=f"Check error: {str(e)}",
                perfdata=self.perfdata,
                error=str(e)
            )
    return wrapper
