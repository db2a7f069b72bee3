"""Monitoring plugin status enumeration."""

from enum import Enum


class CheckStatus(Enum):
    """Nagios-compatible check status. The value is the process exit code."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3

    @property
    def exit_code(self) -> int:
        """
        Exit code expected by the monitoring system.

        Returns:
            int: 0 (OK), 1 (WARNING), 2 (CRITICAL) or 3 (UNKNOWN)
        """
        return self.value
