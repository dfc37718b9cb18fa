"""
Configuration system for djust-tz

Provides centralized configuration for:
- The default (fallback) timezone
- Where the browser-reported timezone is read from
- Default format strings for the datetime/date/time outputs
- Output container classes and placeholders
"""

import logging
from typing import Dict, Any

logger = logging.getLogger(__name__)

FALLBACK_TIMEZONE = "UTC"


class TzConfig:
    """
    Central configuration for djust-tz behavior.

    Usage:
        # In settings.py
        DJUST_TZ_CONFIG = {
            'default_timezone': 'Europe/Berlin',
            'datetime_format': '%d.%m.%Y %H:%M',
        }

        # Or programmatically
        from djust_tz.config import config
        config.set('default_timezone', 'America/Chicago')
    """

    # Default configuration
    _defaults = {
        # Fallback zone (None = settings.TIME_ZONE, then UTC)
        "default_timezone": None,
        # Where the browser-reported values live
        "view_attribute": "client_timezone",  # LiveView attribute set on WebSocket mount
        "locale_attribute": "client_locale",
        "context_key": "client_timezone",  # Explicit template context variable
        "cookie_name": "djust_tz",  # Set by djust-tz.js for plain HTTP requests
        "locale_cookie_name": "djust_tz_locale",
        "offset_cookie_name": "djust_tz_offset",
        # strftime formats
        "datetime_format": "%Y-%m-%d %H:%M:%S",
        "date_format": "%Y-%m-%d",
        "time_format": "%H:%M:%S",
        # Output containers
        "placeholder": "Loading...",
        "time_placeholder": "--:--:--",
        "output_class": "djust-text-output",
        "css_class_prefix": "djust-tz",
        "script_path": "djust_tz/js/djust-tz.js",
    }

    def __init__(self):
        self._config = self._defaults.copy()
        self._load_from_settings()

    def _load_from_settings(self):
        """Load configuration from Django settings if available"""
        try:
            from django.conf import settings

            if settings.configured and hasattr(settings, "DJUST_TZ_CONFIG"):
                self._config.update(settings.DJUST_TZ_CONFIG)
        except ImportError:
            pass

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value = self._config.get(key)
        return value if value is not None else default

    def set(self, key: str, value: Any):
        """
        Set a configuration value.

        Example:
            config.set('default_timezone', 'Asia/Tokyo')

        Raises:
            InvalidTimezoneError: if ``default_timezone`` is set to an
                unknown zone
        """
        if key == "default_timezone":
            _check_timezone(value)
        self._config[key] = value

    def get_default_timezone(self) -> str:
        """
        Get the zone used whenever no valid client timezone is available.

        Resolution order: ``default_timezone`` from DJUST_TZ_CONFIG, then
        ``settings.TIME_ZONE``, then UTC. A configured name that is not a
        known IANA zone is logged and skipped, so the returned value is
        always safe to pass to ``ZoneInfo``.
        """
        from .utils.timezone import is_valid_timezone

        configured = self.get("default_timezone")
        if configured is None:
            configured = _settings_time_zone()
        if configured is None:
            return FALLBACK_TIMEZONE

        if not is_valid_timezone(configured):
            logger.warning(
                "Invalid default timezone '%s', using %s", configured, FALLBACK_TIMEZONE
            )
            return FALLBACK_TIMEZONE
        return configured

    def reset(self):
        """Reset configuration to defaults"""
        self._config = self._defaults.copy()
        self._load_from_settings()

    def update(self, config_dict: Dict[str, Any]):
        """
        Update multiple configuration values at once.

        Example:
            config.update({
                'default_timezone': 'Europe/London',
                'time_format': '%I:%M %p',
            })
        """
        if "default_timezone" in config_dict:
            _check_timezone(config_dict["default_timezone"])
        self._config.update(config_dict)

    def as_dict(self) -> Dict[str, Any]:
        """Get the entire configuration as a dictionary"""
        return self._config.copy()


def _check_timezone(name):
    from .exceptions import InvalidTimezoneError
    from .utils.timezone import is_valid_timezone

    if name is not None and not is_valid_timezone(name):
        raise InvalidTimezoneError(name)


def _settings_time_zone():
    try:
        from django.conf import settings
    except ImportError:
        return None
    if not settings.configured:
        return None
    return getattr(settings, "TIME_ZONE", None)


# Global configuration instance
config = TzConfig()


def get_config() -> TzConfig:
    """Get the global configuration instance"""
    return config
