"""Tests for check result formatting."""

from check_graylog.utils.metrics import CheckResult, PerformanceData
from check_graylog.utils.status import CheckStatus


ZERO_PERFDATA = (
    "time=0.000000;;;; total=0;;;; sources=0;;;; throughput=0;;;; "
    "index_failures=0;;;; collectors=0;;;; collector_failure=0;;;; collector_offline=0;;;;"
)


def test_perfdata_defaults_to_zero():
    assert PerformanceData().format() == ZERO_PERFDATA


def test_perfdata_format():
    perfdata = PerformanceData(
        time=0.1234567,
        total=123456,
        sources=3,
        throughput=41.6,
        index_failures=2,
        collectors=4,
        collector_failure=1,
        collector_offline=1
    )

    assert perfdata.format() == (
        "time=0.123457;;;; total=123456;;;; sources=3;;;; throughput=42;;;; "
        "index_failures=2;;;; collectors=4;;;; collector_failure=1;;;; collector_offline=1;;;;"
    )


def test_render_single_line():
    result = CheckResult(status=CheckStatus.CRITICAL, message="Service is not processing")
    assert result.render() == f"CRITICAL - Service is not processing|{ZERO_PERFDATA}"


def test_render_multi_line_message():
    result = CheckResult(status=CheckStatus.OK, message="Service is running!\n4 collectors detected")
    output = result.render()

    assert output.startswith("OK - Service is running!\n4 collectors detected|time=")


def test_exit_codes():
    assert CheckStatus.OK.exit_code == 0
    assert CheckStatus.WARNING.exit_code == 1
    assert CheckStatus.CRITICAL.exit_code == 2
    assert CheckStatus.UNKNOWN.exit_code == 3
