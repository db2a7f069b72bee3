"""Exception carrying a check classification."""

from typing import Optional

from .status import CheckStatus


class CheckError(Exception):
    """
    Terminal check condition.

    Raised wherever a run cannot continue; the status is what the plugin
    reports and ``error`` keeps the underlying cause for debug output.
    """

    def __init__(self, status: CheckStatus, message: str, error: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.message = message
        self.error = error
