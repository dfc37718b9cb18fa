"""
Tests for djust-tz configuration and system checks.
"""

import logging

import pytest
from django.test import override_settings

from djust_tz.checks import check_configuration
from djust_tz.config import TzConfig, config, get_config
from djust_tz.exceptions import InvalidTimezoneError


class TestTzConfig:
    def test_global_instance(self):
        assert get_config() is config

    def test_defaults(self):
        assert config.get("view_attribute") == "client_timezone"
        assert config.get("cookie_name") == "djust_tz"
        assert config.get("missing_key", "fallback") == "fallback"

    def test_default_timezone_from_time_zone_setting(self):
        with override_settings(TIME_ZONE="Europe/Oslo"):
            assert TzConfig().get_default_timezone() == "Europe/Oslo"

    def test_default_timezone_from_djust_tz_config(self):
        with override_settings(DJUST_TZ_CONFIG={"default_timezone": "Asia/Tokyo"}):
            assert TzConfig().get_default_timezone() == "Asia/Tokyo"

    def test_invalid_configured_default_degrades_to_utc(self, caplog):
        caplog.set_level(logging.WARNING, logger="djust_tz")
        with override_settings(DJUST_TZ_CONFIG={"default_timezone": "Atlantis/Capital"}):
            assert TzConfig().get_default_timezone() == "UTC"
        assert "Atlantis/Capital" in caplog.records[0].getMessage()

    def test_set_rejects_invalid_default_timezone(self):
        with pytest.raises(InvalidTimezoneError) as exc_info:
            config.set("default_timezone", "Not A Zone")
        assert exc_info.value.name == "Not A Zone"
        assert config.get_default_timezone() == "UTC"

    def test_update_rejects_invalid_default_timezone(self):
        with pytest.raises(ValueError):
            config.update({"default_timezone": "utc"})

    def test_reset_restores_defaults(self):
        config.update({"default_timezone": "Asia/Tokyo", "time_format": "%H"})
        config.reset()
        assert config.get("time_format") == "%H:%M:%S"
        assert config.get_default_timezone() == "UTC"

    def test_as_dict_is_a_copy(self):
        snapshot = config.as_dict()
        snapshot["cookie_name"] = "changed"
        assert config.get("cookie_name") == "djust_tz"


class TestSystemChecks:
    def test_valid_settings_pass(self):
        assert check_configuration(None) == []

    def test_invalid_default_timezone(self):
        with override_settings(DJUST_TZ_CONFIG={"default_timezone": "Nope/Nope"}):
            errors = check_configuration(None)
        assert [e.id for e in errors] == ["djust_tz.E001"]

    def test_invalid_time_zone_setting(self):
        with override_settings(TIME_ZONE="Moon/Base"):
            errors = check_configuration(None)
        assert [e.id for e in errors] == ["djust_tz.E002"]

    def test_use_tz_disabled(self):
        with override_settings(USE_TZ=False):
            errors = check_configuration(None)
        assert [e.id for e in errors] == ["djust_tz.W001"]
