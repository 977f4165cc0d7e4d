"""Tests for discovery and config error types."""

import dataclasses

import pytest

from pytestmap.core.errors import (
    ConfigError,
    DiscoveryError,
    ErrorCode,
    PytestMapError,
)
from pytestmap.discovery.models import ParseFailure


class TestDiscoveryErrorFactories:
    """Whole-document failures raised while reading reports."""

    @pytest.mark.parametrize(
        ("factory", "code", "kind"),
        [
            (
                DiscoveryError.report_parse_error,
                ErrorCode.DISCOVERY_REPORT_PARSE_ERROR,
                "discovery",
            ),
            (DiscoveryError.junit_parse_error, ErrorCode.DISCOVERY_JUNIT_PARSE_ERROR, "JUnit"),
        ],
    )
    def test_source_and_reason_carried(self, factory, code: ErrorCode, kind: str) -> None:
        error = factory("/ci/out/report", "line 1 column 2")

        assert error.code == code
        assert error.message == f"Failed to parse {kind} report /ci/out/report: line 1 column 2"
        assert error.details == {"source": "/ci/out/report", "reason": "line 1 column 2"}
        assert not error.retryable

    def test_str_leads_with_code_and_name(self) -> None:
        error = DiscoveryError.junit_parse_error("junit.xml", "unclosed token")

        assert str(error) == (
            "[7004] DISCOVERY_JUNIT_PARSE_ERROR: "
            "Failed to parse JUnit report junit.xml: unclosed token"
        )

    def test_to_dict_is_json_ready(self) -> None:
        error = DiscoveryError.report_parse_error("<string>", "expected a list of results, got int")

        assert error.to_dict() == {
            "code": 7003,
            "error": "DISCOVERY_REPORT_PARSE_ERROR",
            "message": "Failed to parse discovery report <string>: "
            "expected a list of results, got int",
            "retryable": False,
            "details": {"source": "<string>", "reason": "expected a list of results, got int"},
        }

    def test_caught_through_base_class(self) -> None:
        """A caller handling PytestMapError also handles report failures."""
        with pytest.raises(PytestMapError) as exc_info:
            raise DiscoveryError.report_parse_error("discovery.json", "Expecting value")

        assert isinstance(exc_info.value, DiscoveryError)
        assert exc_info.value.error_name == "DISCOVERY_REPORT_PARSE_ERROR"

    def test_errors_are_immutable(self) -> None:
        error = DiscoveryError.report_parse_error("discovery.json", "bad")

        with pytest.raises(dataclasses.FrozenInstanceError):
            error.message = "changed"  # type: ignore[misc]


class TestParseFailure:
    """Per-test failures reuse the discovery error codes without raising."""

    def test_to_dict_names_the_code(self) -> None:
        failure = ParseFailure(
            code=ErrorCode.DISCOVERY_MALFORMED_SOURCE,
            runner_id="./tests/test_a.py::test_x",
            source="./tests/test_a.py",
            reason="source has no line number",
            batch_root="/home/dev/proj",
        )

        assert failure.to_dict() == {
            "code": 7001,
            "error": "DISCOVERY_MALFORMED_SOURCE",
            "runner_id": "./tests/test_a.py::test_x",
            "source": "./tests/test_a.py",
            "reason": "source has no line number",
            "batch_root": "/home/dev/proj",
        }

    def test_per_test_codes_share_discovery_range(self) -> None:
        per_test = [ErrorCode.DISCOVERY_MALFORMED_SOURCE, ErrorCode.DISCOVERY_EMPTY_REQUIRED_FIELD]
        per_report = [
            ErrorCode.DISCOVERY_REPORT_PARSE_ERROR,
            ErrorCode.DISCOVERY_JUNIT_PARSE_ERROR,
        ]

        assert all(7000 <= code < 8000 for code in per_test + per_report)
        assert set(per_test).isdisjoint(per_report)


class TestConfigErrorFactories:
    def test_parse_error_points_at_file(self) -> None:
        error = ConfigError.parse_error("/repo/.pytestmap/config.yaml", "mapping values")

        assert error.code == ErrorCode.CONFIG_PARSE_ERROR
        assert error.details["path"] == "/repo/.pytestmap/config.yaml"
        assert "mapping values" in error.message

    def test_invalid_value_stringifies_value(self) -> None:
        error = ConfigError.invalid_value("discovery.is_workspace", ["yes"], "not a boolean")

        assert error.code == ErrorCode.CONFIG_INVALID_VALUE
        assert error.message == "Invalid value for 'discovery.is_workspace': not a boolean"
        assert error.details == {
            "field": "discovery.is_workspace",
            "value": "['yes']",
            "reason": "not a boolean",
        }
