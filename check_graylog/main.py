"""Command line entry point for the Graylog2 check."""

import argparse
import logging
import sys
from typing import List, Optional

import httpx

from . import __author__, __license__, __version__, __year__
from .collectors.graylog_client import GraylogClient
from .collectors.graylog_collector import GraylogCollector
from .config.loader import ConfigLoader
from .config.models import CheckConfig
from .config.settings import Settings
from .utils.errors import CheckError
from .utils.logger import setup_logger
from .utils.metrics import CheckResult, PerformanceData
from .utils.status import CheckStatus


class PluginArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits UNKNOWN on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(CheckStatus.UNKNOWN.exit_code, f"{self.prog}: error: {message}\n")


class GraylogCheckApp:
    """
    Graylog2 check application.

    Opens the API client, runs the collector once and hands back
    the result for reporting.
    """

    def __init__(
        self,
        config: CheckConfig,
        logger: logging.Logger,
        transport: Optional[httpx.BaseTransport] = None
    ):
        """
        Initialize check application.

        Args:
            config: Validated check configuration
            logger: Logger instance
            transport: Optional httpx transport (used by tests)
        """
        self.config = config
        self.logger = logger
        self.transport = transport

    def run(self) -> CheckResult:
        """Execute one check against the configured Graylog2 API."""
        self.logger.debug(f"Checking {self.config.target.url}")

        with GraylogClient(self.config.target, self.logger, transport=self.transport) as client:
            collector = GraylogCollector(client, self.config.thresholds, self.logger)
            return collector.collect()


def build_parser() -> argparse.ArgumentParser:
    """Create the CLI parser."""
    parser = PluginArgumentParser(
        description='Nagios check for Graylog2 node and collector health',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit codes: 0 OK, 1 WARNING, 2 CRITICAL, 3 UNKNOWN

Examples:
  check_graylog2 -l http://graylog.example.com:12900 -u admin -p secret

  # Self-signed certificate, expect 5 collectors
  check_graylog2 -l https://graylog:12900 -u admin -p secret --insecure -ex 5

Set NCG2=debug to print raw API responses and underlying errors.
        """
    )

    parser.add_argument(
        '-l', dest='link',
        default='http://localhost:12900',
        help='Graylog2 API URL (default: http://localhost:12900)'
    )
    parser.add_argument('-u', dest='user', default='', help='API username - REQUIRED')
    parser.add_argument('-p', dest='password', default='', help='API password - REQUIRED')
    parser.add_argument(
        '-insecure', '--insecure',
        action='store_true',
        help='Accept insecure SSL/TLS certificates'
    )
    parser.add_argument(
        '-version', '--version',
        action='store_true',
        help='Display version and license information'
    )
    parser.add_argument(
        '-ex', '--ex', dest='expected',
        type=int, default=0,
        help='Expected number of collectors (default: 0, disabled)'
    )
    parser.add_argument(
        '-wt', '--wt', dest='warning',
        type=int, default=1,
        help='Collector warning threshold (default: 1)'
    )
    parser.add_argument(
        '-ct', '--ct', dest='critical',
        type=int, default=2,
        help='Collector critical threshold (default: 2)'
    )

    return parser


def make_logger(debug: bool) -> logging.Logger:
    """Diagnostics only in debug mode, silent otherwise."""
    return setup_logger("check_graylog", "DEBUG" if debug else "CRITICAL")


def run_check(args: argparse.Namespace) -> CheckResult:
    """
    Validate arguments and run the check.

    Returns:
        CheckResult: Result to report, UNKNOWN on invalid configuration
    """
    try:
        config = ConfigLoader.load_from_args(args)
    except CheckError as e:
        # No configuration to read the debug flag from
        make_logger(Settings.debug_enabled()).debug(f"Invalid configuration: {e.error}")
        return CheckResult(status=e.status, message=e.message, perfdata=PerformanceData(), error=e.error)

    return GraylogCheckApp(config, make_logger(config.debug)).run()


def main(argv: Optional[List[str]] = None):
    """
    CLI entry point.

    Prints exactly one plugin line and exits with its status code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"Version: {__version__} License: {__license__} © {__year__} {__author__}")
        sys.exit(CheckStatus.UNKNOWN.exit_code)

    if not args.user or not args.password:
        parser.print_help()
        sys.exit(CheckStatus.UNKNOWN.exit_code)

    result = run_check(args)

    print(result.render())
    sys.exit(result.status.exit_code)


if __name__ == '__main__':
    main()
