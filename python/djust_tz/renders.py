"""
Render functions that display timestamps in the viewer's timezone.

Each ``render_*`` factory returns a ``TimezoneRenderer``. Calling it with a
value and the per-viewer source (a LiveView, request or template context)
resolves the viewer's zone and returns plain text for a text output.

Usage:
    from djust_tz import render_datetime, render_time

    last_update = render_datetime(show_tz=True)
    clock = render_time("%I:%M:%S %p")

    class DashboardView(LiveView):
        def get_context_data(self, **kwargs):
            context = super().get_context_data(**kwargs)
            context["last_update"] = last_update(self.updated_at, self)
            context["clock"] = clock(timezone.now(), self)
            return context
"""

from typing import Any, Callable, NamedTuple, Optional

from .config import config
from .exceptions import TimestampTypeError
from .formatting import format_in_tz, is_missing, is_timestamp, tz_abbreviation
from .utils.timezone import get_browser_tz, get_default_timezone, resolve_timezone

Formatter = Callable[[Any, str], str]


def _all_missing(value: Any) -> bool:
    if isinstance(value, (list, tuple)):
        return all(is_missing(item) for item in value)
    return is_missing(value)


def _renderable(value: Any) -> bool:
    if isinstance(value, (list, tuple)):
        return all(is_missing(item) or is_timestamp(item) for item in value)
    return is_timestamp(value)


def _append_abbreviation(text, abbreviation):
    if isinstance(abbreviation, list):
        if isinstance(text, list):
            return [f"{t} {a}" if t else "" for t, a in zip(text, abbreviation)]
        abbreviation = " ".join(a for a in abbreviation if a)
    return f"{_as_text(text)} {abbreviation}"


def _as_text(text) -> str:
    if isinstance(text, (list, tuple)):
        return " ".join(t for t in text if t)
    return text


class RenderResult(NamedTuple):
    text: str
    error: bool = False
    timezone: Optional[str] = None


class TimezoneRenderer:
    """
    Formats a value for one output, in the zone of whoever is viewing it.

    Args:
        name: Name used in the message shown for wrong value types.
        fmt: strftime format string.
        formatter: Optional ``formatter(value, tz_name) -> str``. Replaces
            ``fmt`` entirely when given.
        tz: Fixed IANA zone overriding the browser zone.
        locale: Reserved; currently has no effect.
        show_tz: Append the zone abbreviation (e.g. "EST") to the text.
    """

    def __init__(
        self,
        name: str,
        fmt: str,
        formatter: Optional[Formatter] = None,
        tz: Optional[str] = None,
        locale: Optional[str] = None,
        show_tz: bool = False,
    ):
        self.name = name
        self.fmt = fmt
        self.formatter = formatter
        self.tz = tz
        self.locale = locale
        self.show_tz = show_tz

    def __repr__(self):
        return f"<TimezoneRenderer {self.name} fmt={self.fmt!r}>"

    @property
    def type_error_message(self) -> str:
        return f"{self.name} requires a datetime value"

    def target_timezone(self, source: Any = None) -> str:
        """Zone this renderer writes in for ``source``'s viewer."""
        default = get_default_timezone()
        target = self.tz or get_browser_tz(source, fallback=default)
        # An explicit tz is caller-supplied and has not been validated yet
        return resolve_timezone(target, default)

    def render(self, value: Any, source: Any = None) -> RenderResult:
        """
        Render ``value`` and report whether the text is an error message.

        Lists and tuples render as their formatted elements joined by a
        space, skipping missing elements.
        """
        if _all_missing(value):
            return RenderResult("")
        if not _renderable(value):
            return RenderResult(self.type_error_message, error=True)

        zone = self.target_timezone(source)

        try:
            if self.formatter is not None:
                text = self.formatter(value, zone)
            else:
                text = format_in_tz(value, self.fmt, tz=zone, locale=self.locale)

            if self.show_tz:
                text = _append_abbreviation(text, tz_abbreviation(value, zone))
        except (TimestampTypeError, OverflowError):
            # e.g. datetime.max moved east of UTC
            return RenderResult(self.type_error_message, error=True)

        return RenderResult(_as_text(text), timezone=zone)

    def __call__(self, value: Any, source: Any = None) -> str:
        return self.render(value, source).text


def render_datetime(
    fmt: Optional[str] = None,
    formatter: Optional[Formatter] = None,
    tz: Optional[str] = None,
    locale: Optional[str] = None,
    show_tz: bool = False,
) -> TimezoneRenderer:
    """
    Render a datetime in the viewer's browser timezone.

    Example:
        render_datetime("%B %d, %Y at %I:%M %p")

        def business_hours(dt, tz_name):
            local = dt.astimezone(ZoneInfo(tz_name))
            label = "Business Hours" if 9 <= local.hour < 17 else "After Hours"
            return f"{local:%Y-%m-%d %I:%M %p} ({label})"

        render_datetime(formatter=business_hours)
    """
    return TimezoneRenderer(
        "render_datetime",
        fmt or config.get("datetime_format"),
        formatter=formatter,
        tz=tz,
        locale=locale,
        show_tz=show_tz,
    )


def render_date(
    fmt: Optional[str] = None,
    tz: Optional[str] = None,
    locale: Optional[str] = None,
    show_tz: bool = False,
) -> TimezoneRenderer:
    """Render the date part of a timestamp in the viewer's timezone."""
    return TimezoneRenderer(
        "render_date",
        fmt or config.get("date_format"),
        tz=tz,
        locale=locale,
        show_tz=show_tz,
    )


def render_time(
    fmt: Optional[str] = None,
    tz: Optional[str] = None,
    show_tz: bool = False,
) -> TimezoneRenderer:
    """Render the time part of a timestamp in the viewer's timezone."""
    return TimezoneRenderer(
        "render_time",
        fmt or config.get("time_format"),
        tz=tz,
        show_tz=show_tz,
    )
