"""Tests for resilient_http/config/"""

import pytest

from resilient_http.config import (
    HTTPOptions,
    aggressive_http_options,
    default_http_options,
    no_retry_http_options,
    parse_config,
    parse_config_data,
    parse_duration,
    validate_options,
)
from resilient_http.transport import BackoffConfig, ConfigError


class TestHTTPOptions:
    def test_defaults(self):
        options = default_http_options()
        assert options.retry_count == 2
        assert options.initial_delay == 0.002
        assert options.max_delay == 0.010
        assert options.exponent_factor == 2.0
        assert options.max_jitter_interval == 0.002
        assert options.user_agent.startswith("resilient-http/")

    def test_backoff(self):
        options = HTTPOptions(initial_delay=0.1, max_delay=2.0, exponent_factor=3.0, max_jitter_interval=0.05)
        assert options.backoff == BackoffConfig(
            initial_delay=0.1, max_delay=2.0, exponent_factor=3.0, max_jitter=0.05,
        )

    def test_backoff_rejects_inconsistent_values(self):
        with pytest.raises(ConfigError):
            HTTPOptions(initial_delay=5.0, max_delay=1.0).backoff

    def test_presets(self):
        assert aggressive_http_options().retry_count == 5
        assert aggressive_http_options().exponent_factor == 1.5
        assert no_retry_http_options().retry_count == 0
        assert not no_retry_http_options().retries_enabled


class TestParseDuration:
    @pytest.mark.parametrize("value, expected", [
        (2, 2.0),
        (0.5, 0.5),
        ("250ms", 0.25),
        ("1.5s", 1.5),
        ("2m", 120.0),
        ("3", 3.0),
    ])
    def test_valid(self, value, expected):
        assert parse_duration(value) == pytest.approx(expected)

    @pytest.mark.parametrize("value", ["fast", "10h", "-1s", True, None, [1]])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_duration(value)


class TestParseConfig:
    def test_camel_case_under_http_key(self):
        options = parse_config_data({
            "http": {
                "retryCount": 3,
                "initialDelay": "50ms",
                "maxDelay": "2s",
                "exponentFactor": 2,
                "maxJitterInterval": "10ms",
            },
        })
        assert options.retry_count == 3
        assert options.initial_delay == pytest.approx(0.05)
        assert options.max_delay == pytest.approx(2.0)
        assert options.exponent_factor == 2.0
        assert options.max_jitter_interval == pytest.approx(0.01)

    def test_snake_case_top_level(self):
        options = parse_config_data({"retry_count": 0, "request_timeout": 12, "user_agent": "me"})
        assert options.retry_count == 0
        assert options.request_timeout == 12.0
        assert options.user_agent == "me"

    def test_unknown_keys_ignored(self):
        options = parse_config_data({"http": {"retryCount": 1, "color": "blue"}})
        assert options.retry_count == 1

    def test_bad_retry_count(self):
        with pytest.raises(ValueError, match="retry_count"):
            parse_config_data({"retryCount": "three"}, source="test.yaml")

    def test_non_mapping_rejected(self):
        with pytest.raises(ValueError):
            parse_config_data(["not", "a", "mapping"])
        with pytest.raises(ValueError, match="'http' must be a mapping"):
            parse_config_data({"http": 3})

    def test_from_file(self, tmp_path):
        path = tmp_path / "client.yaml"
        path.write_text("http:\n  retryCount: 4\n  maxDelay: 1s\n", encoding="utf-8")

        options = parse_config(path)

        assert options.retry_count == 4
        assert options.max_delay == 1.0

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")
        assert parse_config(path) == HTTPOptions()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_config(tmp_path / "missing.yaml")

    def test_wrong_extension(self, tmp_path):
        path = tmp_path / "client.json"
        path.write_text("{}", encoding="utf-8")
        with pytest.raises(ValueError, match=".yaml or .yml"):
            parse_config(path)

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("http: [unclosed\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Malformed YAML"):
            parse_config(path)


class TestValidateOptions:
    def test_defaults_valid(self):
        result = validate_options(default_http_options())
        assert result.valid
        assert result.errors == []

    def test_negative_values(self):
        result = validate_options(HTTPOptions(retry_count=-1, initial_delay=-0.1, max_jitter_interval=-1))
        paths = {e.path for e in result.errors}
        assert {"retry_count", "initial_delay", "max_jitter_interval"} <= paths
        assert not result.valid

    def test_max_below_initial(self):
        result = validate_options(HTTPOptions(initial_delay=2.0, max_delay=1.0))
        assert [e.path for e in result.errors] == ["max_delay"]

    def test_shrinking_factor(self):
        result = validate_options(HTTPOptions(exponent_factor=0.9))
        assert [e.path for e in result.errors] == ["exponent_factor"]

    def test_transport_settings(self):
        result = validate_options(HTTPOptions(request_timeout=0, connect_timeout=-1, max_idle_connections=0, user_agent=""))
        paths = {e.path for e in result.errors}
        assert paths == {"request_timeout", "connect_timeout", "max_idle_connections", "user_agent"}

    def test_warnings(self):
        result = validate_options(HTTPOptions(exponent_factor=1.0, max_jitter_interval=0.0))
        assert result.valid
        assert {w.path for w in result.warnings} == {"exponent_factor", "max_jitter_interval"}
        assert all(w.severity == "warning" for w in result.warnings)
        assert str(result) == "Valid (2 warnings)"

    def test_retry_disabled_warning(self):
        result = validate_options(no_retry_http_options())
        assert [w.path for w in result.warnings] == ["retry_count"]

    def test_high_retry_count_warning(self):
        result = validate_options(HTTPOptions(retry_count=50))
        assert "retry_count" in {w.path for w in result.warnings}

    def test_to_dict(self):
        result = validate_options(HTTPOptions(retry_count=-1))
        data = result.to_dict()
        assert data["valid"] is False
        assert data["errors"][0]["path"] == "retry_count"
        assert str(result).startswith("Invalid: 1 errors")
