"""Build a validated check configuration from command line arguments."""

import argparse
from typing import Optional

from pydantic import ValidationError

from .models import CheckConfig, TargetConfig, ThresholdsConfig
from .settings import Settings
from ..utils.errors import CheckError
from ..utils.status import CheckStatus


class ConfigLoader:
    """Load and validate check configuration."""

    @staticmethod
    def load_from_args(args: argparse.Namespace, debug: Optional[bool] = None) -> CheckConfig:
        """
        Validate parsed CLI arguments.

        Args:
            args: Namespace produced by the CLI parser
            debug: Override for debug mode (default: read from environment)

        Returns:
            CheckConfig: Validated configuration object

        Raises:
            CheckError: UNKNOWN with the first validation message
        """
        if debug is None:
            debug = Settings.debug_enabled()

        try:
            return CheckConfig(
                target=TargetConfig(
                    url=args.link,
                    username=args.user,
                    password=args.password,
                    insecure=args.insecure,
                ),
                thresholds=ThresholdsConfig(
                    warning=args.warning,
                    critical=args.critical,
                    expected_collectors=args.expected,
                ),
                debug=debug,
            )
        except ValidationError as e:
            raise CheckError(
                CheckStatus.UNKNOWN,
                ConfigLoader._first_message(e),
                error=str(e)
            ) from e

    @staticmethod
    def _first_message(exc: ValidationError) -> str:
        """
        Extract a plain message from the first validation error.

        Errors raised by our own validators carry the original exception
        in ``ctx``; built-in constraint errors only have ``msg``.
        """
        first = exc.errors()[0]
        cause = first.get("ctx", {}).get("error")
        if isinstance(cause, Exception):
            return str(cause)
        field = ".".join(str(part) for part in first["loc"])
        return f"Invalid {field}: {first['msg']}"
