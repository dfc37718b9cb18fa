"""
djust-tz: render datetimes in each viewer's browser timezone.

The bundled script reports the browser's IANA timezone; the server
validates it and formats timestamps in that zone, falling back to the
configured default timezone.

Add to INSTALLED_APPS::

    INSTALLED_APPS = [
        ...
        "djust_tz",
    ]

Then in your base template::

    {% load djust_tz %}
    {% djust_tz_script %}
    {% client_datetime_tag view.updated_at show_tz=True %}
"""

from .formatting import format_in_tz, tz_abbreviation
from .outputs import date_output, datetime_output, time_output
from .renders import TimezoneRenderer, render_date, render_datetime, render_time
from .utils.timezone import (
    ResolvedContext,
    get_browser_locale,
    get_browser_tz,
    get_default_timezone,
    is_valid_timezone,
    resolve_context,
    resolve_timezone,
    to_client_tz,
)

__version__ = "0.1.0"

__all__ = [
    "ResolvedContext",
    "TimezoneRenderer",
    "date_output",
    "datetime_output",
    "format_in_tz",
    "get_browser_locale",
    "get_browser_tz",
    "get_default_timezone",
    "is_valid_timezone",
    "render_date",
    "render_datetime",
    "render_time",
    "resolve_context",
    "resolve_timezone",
    "time_output",
    "to_client_tz",
    "tz_abbreviation",
]
