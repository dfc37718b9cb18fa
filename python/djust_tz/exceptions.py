"""
Custom exceptions for djust-tz.

Resolution of client timezones never raises; these cover the cases that
are a programming or configuration mistake rather than untrusted input.
"""

from typing import Optional


class DjustTzError(Exception):
    """Base exception for djust-tz errors."""

    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.hint = hint


class TimestampTypeError(DjustTzError, TypeError):
    """Raised when a value that is not a timestamp reaches the formatter."""

    def __init__(self, value, function_name: str = "format_in_tz"):
        type_name = type(value).__name__
        message = f"{function_name} requires a datetime value, got {type_name}"
        hint = (
            "\n    Pass an aware datetime (e.g. django.utils.timezone.now()) "
            "or POSIX epoch seconds."
        )
        super().__init__(message, hint)
        self.value = value
        self.function_name = function_name


class InvalidTimezoneError(DjustTzError, ValueError):
    """Raised when a configured (trusted) timezone name is not an IANA zone."""

    def __init__(self, name: str, setting: str = "default_timezone"):
        message = f"'{name}' is not a known IANA timezone (DJUST_TZ_CONFIG['{setting}'])"
        hint = "\n    Use a name such as 'UTC', 'Europe/London' or 'America/New_York'."
        super().__init__(message, hint)
        self.name = name
        self.setting = setting
