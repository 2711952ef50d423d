"""
Unit tests for startup configuration validation.
"""

from types import SimpleNamespace

import pytest

from utils.config_validator import (
    ConfigValidationError,
    validate_api_base_url,
    validate_or_exit,
    validate_language,
    validate_required_config,
    validate_startup_config,
)


def make_config(**overrides):
    values = {"API_BASE_URL": "http://localhost:8080/api", "LANGUAGE": "en", "CURRENCY_SYMBOL": "R"}
    values.update(overrides)
    return SimpleNamespace(**values)


class TestValidateApiBaseUrl:

    @pytest.mark.parametrize("url", ["http://localhost:8080/api", "https://bookstore.example.com/api"])
    def test_valid_urls(self, url):
        validate_api_base_url(url)

    @pytest.mark.parametrize("url", [None, "", "   ", "localhost:8080/api", "ftp://host/api", "http://"])
    def test_invalid_urls(self, url):
        with pytest.raises(ConfigValidationError):
            validate_api_base_url(url)


class TestValidateRequiredConfig:

    def test_missing_value_mentions_example(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            validate_required_config("", "LANGUAGE", "en")

        assert "LANGUAGE=en" in str(exc_info.value)

    def test_present_value(self):
        validate_required_config("R", "CURRENCY_SYMBOL")


class TestStartupValidation:

    def test_valid_config(self):
        validate_startup_config(make_config())

    def test_unknown_language(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            validate_language("xx")

        assert "en" in str(exc_info.value)

    def test_bundled_language(self):
        validate_language("en")

    def test_missing_language(self):
        with pytest.raises(ConfigValidationError):
            validate_startup_config(make_config(LANGUAGE=""))

    def test_validate_or_exit_exits_on_invalid_config(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            validate_or_exit(make_config(API_BASE_URL="not-a-url"))

        assert exc_info.value.code == 1
        assert "API_BASE_URL" in capsys.readouterr().err
