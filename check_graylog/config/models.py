"""Pydantic configuration models for the Graylog2 check."""

from urllib.parse import urlsplit, urlunsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator


def parse_base_url(raw: str) -> str:
    """
    Validate and normalize the Graylog2 API base URL.

    Args:
        raw: URL given on the command line

    Returns:
        str: Normalized URL without trailing slash

    Raises:
        ValueError: With the message reported to the monitoring system
    """
    try:
        parts = urlsplit(raw)
    except ValueError as e:
        raise ValueError("Can not parse given URL.") from e

    # Strip credentials, then split host and port. A netloc without
    # an explicit port leaves the host empty.
    hostport = parts.netloc.rpartition("@")[2]
    if hostport.endswith("]") or ":" not in hostport:
        host, port = "", ""
    else:
        host, _, port = hostport.rpartition(":")
    host = host.strip("[]")

    if not host:
        raise ValueError("Hostname is missing.")

    if not (port.isascii() and port.isdigit()):
        raise ValueError("Port is not a number.")

    if not parts.scheme.lower().startswith("http"):
        raise ValueError("Only HTTP/S protocols are supported.")

    url = urlunsplit(parts)
    if url.endswith("/"):
        url = url[:-1]
    return url


class TargetConfig(BaseModel):
    """Graylog2 API endpoint and credentials."""
    model_config = ConfigDict(frozen=True)

    url: str = "http://localhost:12900"
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    insecure: bool = False  # Accept self-signed certificates

    @field_validator('url')
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate URL format and strip the trailing slash."""
        return parse_base_url(v)


class ThresholdsConfig(BaseModel):
    """Collector health thresholds."""
    warning: int = Field(default=1, ge=0)
    critical: int = Field(default=2, ge=0)
    expected_collectors: int = Field(default=0, ge=0)  # 0 disables the check


class CheckConfig(BaseModel):
    """Root configuration for one check run."""
    target: TargetConfig
    thresholds: ThresholdsConfig = Field(default_factory=ThresholdsConfig)
    debug: bool = False
