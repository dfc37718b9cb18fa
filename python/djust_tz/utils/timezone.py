"""
Timezone utilities for resolving the client's browser timezone.

Browser-reported zone names are untrusted input. Everything in here
validates them against the IANA database before they reach ``ZoneInfo``
and degrades to a fallback zone instead of raising.
"""

import datetime
import functools
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional
from zoneinfo import ZoneInfo, available_timezones

from django.http import HttpRequest
from django.template.context import BaseContext

from ..config import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedContext:
    """Outcome of resolving a candidate timezone."""

    timezone: str
    fallback_used: bool = False


@functools.lru_cache(maxsize=1)
def _timezone_names() -> frozenset:
    # available_timezones() walks the tz database on every call
    return frozenset(available_timezones())


def is_valid_timezone(name: Any) -> bool:
    """
    Check whether ``name`` is a canonical IANA timezone name.

    The check is verbatim: no stripping and no case folding, so
    ``" UTC "`` and ``"utc"`` are both rejected.
    """
    if not isinstance(name, str) or not name:
        return False
    return name in _timezone_names()


def get_default_timezone() -> str:
    """Return the configured fallback timezone (always a valid IANA name)."""
    return config.get_default_timezone()


def resolve_context(candidate: Optional[str], fallback: str) -> ResolvedContext:
    """
    Turn an untrusted timezone candidate into a validated zone.

    Args:
        candidate: Zone name reported by the browser, or None/"" when the
            client did not report one.
        fallback: Zone used when the candidate is unusable. Trusted, not
            re-validated.

    Returns:
        ResolvedContext with the zone to use and whether the fallback won.
    """
    if candidate is None or candidate == "":
        return ResolvedContext(fallback, fallback_used=True)

    if not is_valid_timezone(candidate):
        logger.warning("Invalid timezone '%s', using fallback %s", candidate, fallback)
        return ResolvedContext(fallback, fallback_used=True)

    return ResolvedContext(candidate)


def resolve_timezone(candidate: Optional[str], fallback: str) -> str:
    """
    Validate ``candidate`` and return it, or ``fallback`` if it is unusable.

    Never raises. A warning is logged only when a non-empty candidate is
    not a known IANA zone.

    Example:
        resolve_timezone("America/New_York", "UTC")  # "America/New_York"
        resolve_timezone("Invalid/Timezone", "UTC")  # "UTC" (+ warning)
        resolve_timezone(None, "UTC")                # "UTC"
    """
    return resolve_context(candidate, fallback).timezone


def _cookie_value(request: HttpRequest, key: str) -> Optional[str]:
    return request.COOKIES.get(config.get(key))


def _view_value(view: Any, attr_key: str, cookie_key: str) -> Optional[str]:
    value = getattr(view, config.get(attr_key), None)
    if value:
        return value
    # First HTTP render happens before the WebSocket mount reports the zone
    request = getattr(view, "request", None)
    if isinstance(request, HttpRequest):
        return _cookie_value(request, cookie_key)
    return None


def _read_client_value(source: Any, attr_key: str, context_key: Optional[str], cookie_key: str):
    if isinstance(source, HttpRequest):
        return _cookie_value(source, cookie_key)

    if isinstance(source, (Mapping, BaseContext)):
        view = source.get("view")
        if view is not None:
            value = _view_value(view, attr_key, cookie_key)
            if value:
                return value
        if context_key is not None:
            value = source.get(config.get(context_key))
            if value:
                return value
        request = source.get("request")
        if isinstance(request, HttpRequest):
            return _cookie_value(request, cookie_key)
        return None

    return _view_value(source, attr_key, cookie_key)


def get_browser_tz(source: Any = None, fallback: Optional[str] = None) -> str:
    """
    Get the timezone detected from the viewer's browser.

    Args:
        source: Where the browser-reported zone lives. One of:
            a LiveView (its ``client_timezone`` attribute, set on WebSocket
            mount), an ``HttpRequest`` (the cookie written by djust-tz.js),
            or a template context / dict (its ``view`` or
            ``client_timezone`` entry). None means there is no active
            session.
        fallback: Zone used when detection is unavailable or invalid.
            Defaults to the configured default timezone.

    Returns:
        A validated IANA timezone name, e.g. "America/New_York".

    Example:
        class ClockView(LiveView):
            def get_context_data(self, **kwargs):
                context = super().get_context_data(**kwargs)
                context["user_tz"] = get_browser_tz(self)
                return context
    """
    if fallback is None:
        fallback = get_default_timezone()

    if source is None:
        logger.warning("No active session, using fallback timezone %s", fallback)
        return fallback

    candidate = _read_client_value(source, "view_attribute", "context_key", "cookie_name")
    return resolve_timezone(candidate, fallback)


def get_browser_locale(source: Any = None) -> Optional[str]:
    """
    Get the locale (BCP 47 tag, e.g. "en-US") reported by the browser.

    Returned as reported, or None. Informational only: formatting is not
    locale-aware.
    """
    if source is None:
        return None
    value = _read_client_value(source, "locale_attribute", None, "locale_cookie_name")
    return value or None


def get_browser_utc_offset(source: Any = None) -> Optional[int]:
    """
    Get the browser's UTC offset in minutes, as reported by
    ``Date.getTimezoneOffset()`` (positive west of UTC), or None.
    """
    if source is None:
        return None
    if isinstance(source, HttpRequest):
        request = source
    else:
        request = getattr(source, "request", None)
        if request is None and isinstance(source, (Mapping, BaseContext)):
            request = source.get("request")
    if not isinstance(request, HttpRequest):
        return None

    raw = _cookie_value(request, "offset_cookie_name")
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def to_client_tz(dt, view_or_tz=None):
    """
    Convert a datetime to the client's timezone.

    Args:
        dt: A datetime object (naive or aware).
        view_or_tz: A LiveView instance (with client_timezone attr),
                     an IANA timezone string, or None for the default zone.

    Returns:
        An aware datetime in the client's timezone,
        or in the default timezone if the client TZ is not available.
    """
    if dt is None:
        return None

    default = get_default_timezone()
    if isinstance(view_or_tz, str):
        tz_name = resolve_timezone(view_or_tz, default)
    elif view_or_tz is None:
        tz_name = default
    else:
        tz_name = resolve_timezone(_view_value(view_or_tz, "view_attribute", "cookie_name"), default)

    # Make naive datetimes aware (assume the default timezone)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=ZoneInfo(default))

    return dt.astimezone(ZoneInfo(tz_name))


def utc_from_timestamp(seconds) -> datetime.datetime:
    """Aware UTC datetime for POSIX epoch seconds."""
    return datetime.datetime.fromtimestamp(seconds, tz=datetime.timezone.utc)
