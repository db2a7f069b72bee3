"""Graylog2 REST API client."""

import logging
from typing import Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..config.models import TargetConfig
from ..utils.errors import CheckError
from ..utils.status import CheckStatus
from .responses import (
    CollectorList,
    EventCount,
    IndexerFailures,
    InputsSummary,
    SystemStatus,
    Throughput,
)


M = TypeVar('M', bound=BaseModel)

SYSTEM_PATH = "/system"
INDEXER_FAILURES_PATH = "/system/indexer/failures"
THROUGHPUT_PATH = "/system/throughput"
INPUTS_PATH = "/system/inputs"
TOTAL_COUNT_PATH = "/count/total"
COLLECTORS_PATH = "/plugins/org.graylog.plugins.collector/collectors"


class GraylogClient:
    """
    Blocking client for the Graylog2 REST API.

    Every failure is raised as CheckError with the status the plugin
    should report, so callers never see raw httpx or pydantic errors.
    """

    def __init__(
        self,
        target: TargetConfig,
        logger: logging.Logger,
        transport: Optional[httpx.BaseTransport] = None
    ):
        """
        Initialize Graylog2 client.

        Args:
            target: Validated API URL and credentials
            logger: Logger instance
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = target.url
        self.logger = logger.getChild(self.__class__.__name__)

        if target.insecure:
            self.logger.debug("TLS certificate verification disabled")

        self._client = httpx.Client(
            auth=httpx.BasicAuth(target.username, target.password),
            headers={"Accept": "application/json"},
            # Internal servers with custom certificates need this
            verify=not target.insecure,
            follow_redirects=True,
            transport=transport
        )

    def __enter__(self) -> "GraylogClient":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        """Release pooled connections."""
        self._client.close()

    def fetch(self, path: str, model: Type[M]) -> M:
        """
        GET an API path and decode it into a response model.

        Args:
            path: API path starting with a slash
            model: Pydantic model describing the response body

        Returns:
            Decoded response

        Raises:
            CheckError: CRITICAL on transport or HTTP errors,
                UNKNOWN on undecodable responses
        """
        url = f"{self.base_url}{path}"
        self.logger.debug(f"GET {url}")

        try:
            with self._client.stream("GET", url) as response:
                try:
                    response.read()
                except httpx.RequestError as e:
                    raise CheckError(
                        CheckStatus.CRITICAL,
                        "No response received from Graylog2 API",
                        error=str(e)
                    ) from e
        except httpx.RequestError as e:
            raise CheckError(
                CheckStatus.CRITICAL,
                "Can not connect to Graylog2 API",
                error=str(e)
            ) from e

        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                "Response received",
                extra={"path": path, "status_code": response.status_code, "body": response.text}
            )

        if response.status_code != 200:
            raise CheckError(
                CheckStatus.CRITICAL,
                f"Graylog2 API replied with HTTP code {response.status_code}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise CheckError(
                CheckStatus.UNKNOWN,
                "Can not parse JSON from Graylog2 API",
                error=str(e)
            ) from e

        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise CheckError(
                CheckStatus.UNKNOWN,
                f"Unexpected response from Graylog2 API ({path})",
                error=str(e)
            ) from e

    def fetch_system(self) -> SystemStatus:
        return self.fetch(SYSTEM_PATH, SystemStatus)

    def fetch_indexer_failures(self) -> IndexerFailures:
        return self.fetch(INDEXER_FAILURES_PATH, IndexerFailures)

    def fetch_throughput(self) -> Throughput:
        return self.fetch(THROUGHPUT_PATH, Throughput)

    def fetch_inputs(self) -> InputsSummary:
        return self.fetch(INPUTS_PATH, InputsSummary)

    def fetch_total_count(self) -> EventCount:
        return self.fetch(TOTAL_COUNT_PATH, EventCount)

    def fetch_collectors(self) -> CollectorList:
        return self.fetch(COLLECTORS_PATH, CollectorList)
