"""
Template tags for rendering datetimes in the client's browser timezone.

Usage:
    {% load djust_tz %}

    <!-- Once per page, loads the timezone detection script -->
    {% djust_tz_script %}

    <!-- Context-aware: view.client_timezone, client_timezone or the cookie -->
    {% client_datetime_tag timestamp %}
    {% client_time_tag timestamp "%I:%M %p" show_tz=True %}
    {% client_date_tag timestamp "%B %d, %Y" %}
    {% client_timezone %}

    <!-- Filters have no context, so they use the default timezone -->
    {{ timestamp|client_datetime }}
    {{ timestamp|client_time:"%H:%M" }}

    <!-- Output containers -->
    {% datetime_output "last_update" %}
    {% time_output "clock" inline=True %}

Formats use strftime syntax (%Y-%m-%d %H:%M:%S), not Django's date format
characters.
"""

from django import template
from django.templatetags.static import static
from django.utils.html import format_html

from .. import outputs
from ..config import config
from ..renders import render_date, render_datetime, render_time
from ..utils.timezone import get_browser_tz, get_default_timezone

register = template.Library()

_SCRIPT_FLAG = "djust_tz_script_rendered"


def _render_tag(renderer, value, context):
    result = renderer.render(value, context)
    if result.error:
        return format_html(
            '<span class="{}-error">{}</span>', config.get("css_class_prefix"), result.text
        )
    return result.text


# Filters (no context access)


@register.filter(name="client_datetime")
def client_datetime(value, fmt=None):
    """
    Format a datetime in the default timezone.

    Use {% client_datetime_tag %} for the viewer's timezone.
    """
    return render_datetime(fmt, tz=get_default_timezone())(value)


@register.filter(name="client_date")
def client_date(value, fmt=None):
    """Format the date part of a datetime in the default timezone."""
    return render_date(fmt, tz=get_default_timezone())(value)


@register.filter(name="client_time")
def client_time(value, fmt=None):
    """Format the time part of a datetime in the default timezone."""
    return render_time(fmt, tz=get_default_timezone())(value)


# Simple tags that have access to context for full client_timezone support


@register.simple_tag(takes_context=True)
def client_datetime_tag(context, dt, fmt=None, show_tz=False):
    """
    Format a datetime in the client's timezone (context-aware).

    Usage: {% client_datetime_tag my_datetime "%Y-%m-%d %H:%M" show_tz=True %}
    """
    return _render_tag(render_datetime(fmt, show_tz=show_tz), dt, context)


@register.simple_tag(takes_context=True)
def client_date_tag(context, dt, fmt=None, show_tz=False):
    """Usage: {% client_date_tag my_datetime "%B %d, %Y" %}"""
    return _render_tag(render_date(fmt, show_tz=show_tz), dt, context)


@register.simple_tag(takes_context=True)
def client_time_tag(context, dt, fmt=None, show_tz=False):
    """Usage: {% client_time_tag my_datetime "%I:%M %p" %}"""
    return _render_tag(render_time(fmt, show_tz=show_tz), dt, context)


@register.simple_tag(takes_context=True)
def client_timezone(context):
    """
    The viewer's resolved timezone name.

    Usage: Your timezone: {% client_timezone %}
    """
    return get_browser_tz(context)


@register.simple_tag(takes_context=True)
def djust_tz_script(context):
    """
    Output the <script> tag that reports the browser timezone to the server.

    Renders once per page, included templates included; later calls
    return an empty string.
    """
    # render_context is isolated per {% include %}; the bottom context dict is not
    page_state = context.dicts[0]
    if page_state.get(_SCRIPT_FLAG):
        return ""
    page_state[_SCRIPT_FLAG] = True
    return format_html(
        '<script src="{}" data-cookie="{}" data-locale-cookie="{}" data-offset-cookie="{}" defer></script>',
        static(config.get("script_path")),
        config.get("cookie_name"),
        config.get("locale_cookie_name"),
        config.get("offset_cookie_name"),
    )


@register.simple_tag
def datetime_output(output_id, inline=False, placeholder=None, tz_display=True):
    return outputs.datetime_output(
        output_id, inline=inline, placeholder=placeholder, tz_display=tz_display
    )


@register.simple_tag
def date_output(output_id, inline=False, placeholder=None):
    return outputs.date_output(output_id, inline=inline, placeholder=placeholder)


@register.simple_tag
def time_output(output_id, inline=False, placeholder=None, tz_display=True):
    return outputs.time_output(
        output_id, inline=inline, placeholder=placeholder, tz_display=tz_display
    )
