"""
Output containers for timezone-aware text.

Each helper returns a safe HTML element carrying the output id, the text
output class and a placeholder shown until the server sends the value.
"""

import re
from typing import Optional

from django.utils.html import format_html
from django.utils.safestring import SafeString

from .config import config

_TAG_NAME_RE = re.compile(r"^[a-z][a-z0-9-]*$")


def _output(
    kind: str,
    output_id: str,
    inline: bool,
    placeholder: str,
    tz_display: Optional[bool],
    container: Optional[str],
) -> SafeString:
    tag = container or ("span" if inline else "div")
    if not _TAG_NAME_RE.match(tag):
        raise ValueError(f"Invalid container tag name: {tag!r}")

    css_class = "%s %s-%s" % (config.get("output_class"), config.get("css_class_prefix"), kind)

    if tz_display is None:
        return format_html(
            '<{0} id="{1}" class="{2}">{3}</{0}>', tag, output_id, css_class, placeholder
        )
    return format_html(
        '<{0} id="{1}" class="{2}" data-tz-display="{3}">{4}</{0}>',
        tag,
        output_id,
        css_class,
        "true" if tz_display else "false",
        placeholder,
    )


def datetime_output(
    output_id: str,
    inline: bool = False,
    placeholder: Optional[str] = None,
    tz_display: bool = True,
    container: Optional[str] = None,
) -> SafeString:
    """
    Container for a datetime rendered with ``render_datetime``.

    Args:
        output_id: Element id
        inline: Use a ``<span>`` instead of a ``<div>``
        placeholder: Text shown before the value arrives
        tz_display: Value of the ``data-tz-display`` attribute
        container: Explicit tag name, overrides ``inline``

    Example:
        datetime_output("last_update")
        # <div id="last_update" class="djust-text-output djust-tz-datetime"
        #      data-tz-display="true">Loading...</div>
    """
    if placeholder is None:
        placeholder = config.get("placeholder")
    return _output("datetime", output_id, inline, placeholder, tz_display, container)


def date_output(
    output_id: str,
    inline: bool = False,
    placeholder: Optional[str] = None,
    container: Optional[str] = None,
) -> SafeString:
    """Container for a date rendered with ``render_date``."""
    if placeholder is None:
        placeholder = config.get("placeholder")
    return _output("date", output_id, inline, placeholder, None, container)


def time_output(
    output_id: str,
    inline: bool = False,
    placeholder: Optional[str] = None,
    tz_display: bool = True,
    container: Optional[str] = None,
) -> SafeString:
    """Container for a time rendered with ``render_time``."""
    if placeholder is None:
        placeholder = config.get("time_placeholder")
    return _output("time", output_id, inline, placeholder, tz_display, container)
