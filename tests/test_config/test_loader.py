"""Tests for ConfigLoader and Settings."""

import argparse

import pytest

from check_graylog.config.loader import ConfigLoader
from check_graylog.config.settings import DEBUG_ENV, Settings
from check_graylog.utils.errors import CheckError
from check_graylog.utils.status import CheckStatus


def make_args(**overrides):
    values = {
        "link": "http://graylog:12900/",
        "user": "admin",
        "password": "secret",
        "insecure": False,
        "expected": 0,
        "warning": 1,
        "critical": 2,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


def test_load_from_args():
    """Test arguments mapped onto the configuration models."""
    config = ConfigLoader.load_from_args(
        make_args(insecure=True, expected=5, warning=2, critical=4),
        debug=False
    )

    assert config.target.url == "http://graylog:12900"
    assert config.target.username == "admin"
    assert config.target.insecure is True
    assert config.thresholds.warning == 2
    assert config.thresholds.critical == 4
    assert config.thresholds.expected_collectors == 5
    assert config.debug is False


@pytest.mark.parametrize("link,message", [
    ("http://graylog", "Hostname is missing."),
    ("http://graylog:abc", "Port is not a number."),
    ("gopher://graylog:70", "Only HTTP/S protocols are supported."),
    ("http://[graylog:12900", "Can not parse given URL."),
])
def test_invalid_url_is_unknown(link, message):
    """Test URL problems reported as UNKNOWN with a plain message."""
    with pytest.raises(CheckError) as exc_info:
        ConfigLoader.load_from_args(make_args(link=link), debug=False)

    assert exc_info.value.status == CheckStatus.UNKNOWN
    assert exc_info.value.message == message
    assert exc_info.value.error is not None


def test_negative_threshold_is_unknown():
    """Test built-in constraint errors name the offending field."""
    with pytest.raises(CheckError) as exc_info:
        ConfigLoader.load_from_args(make_args(critical=-1), debug=False)

    assert exc_info.value.status == CheckStatus.UNKNOWN
    assert "critical" in exc_info.value.message


def test_debug_read_from_environment(monkeypatch):
    """Test NCG2 enables debug mode when not overridden."""
    monkeypatch.setenv(DEBUG_ENV, "debug")
    assert ConfigLoader.load_from_args(make_args()).debug is True

    monkeypatch.delenv(DEBUG_ENV)
    assert ConfigLoader.load_from_args(make_args()).debug is False


def test_settings_get(monkeypatch):
    monkeypatch.setenv("CHECK_GRAYLOG_TEST", "value")

    assert Settings.get("CHECK_GRAYLOG_TEST") == "value"
    assert Settings.get("CHECK_GRAYLOG_MISSING", "fallback") == "fallback"
    assert Settings.get("CHECK_GRAYLOG_MISSING") == ""


def test_settings_get_required(monkeypatch):
    monkeypatch.delenv("CHECK_GRAYLOG_MISSING", raising=False)

    with pytest.raises(ValueError):
        Settings.get("CHECK_GRAYLOG_MISSING", required=True)
