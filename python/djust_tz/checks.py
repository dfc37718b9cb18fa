"""
Django system checks for djust-tz.

Registers checks with Django's check framework that also run via
``python manage.py check``:

- djust_tz.E001 -- DJUST_TZ_CONFIG['default_timezone'] is not an IANA zone
- djust_tz.E002 -- settings.TIME_ZONE is not an IANA zone (used as default)
- djust_tz.W001 -- USE_TZ is disabled
"""

from django.core.checks import Error, Warning, register

from .utils.timezone import is_valid_timezone


@register("djust_tz")
def check_configuration(app_configs, **kwargs):
    """Validate the settings djust-tz reads its default timezone from."""
    from django.conf import settings

    errors = []
    tz_config = getattr(settings, "DJUST_TZ_CONFIG", {}) or {}
    configured = tz_config.get("default_timezone")

    # E001 -- invalid explicit default timezone
    if configured is not None and not is_valid_timezone(configured):
        errors.append(
            Error(
                "DJUST_TZ_CONFIG['default_timezone'] = %r is not a known IANA timezone." % configured,
                hint="Use a name such as 'UTC' or 'Europe/London'. Invalid values fall back to UTC.",
                id="djust_tz.E001",
            )
        )

    # E002 -- TIME_ZONE is the default when no explicit one is configured
    time_zone = getattr(settings, "TIME_ZONE", None)
    if configured is None and time_zone is not None and not is_valid_timezone(time_zone):
        errors.append(
            Error(
                "TIME_ZONE = %r is not a known IANA timezone." % time_zone,
                hint="Set TIME_ZONE or DJUST_TZ_CONFIG['default_timezone'] to an IANA name.",
                id="djust_tz.E002",
            )
        )

    # W001 -- naive datetimes from the ORM make every conversion a guess
    if not getattr(settings, "USE_TZ", False):
        errors.append(
            Warning(
                "USE_TZ is disabled.",
                hint=(
                    "djust-tz reads naive datetimes as wall-clock time in the default "
                    "timezone. Set USE_TZ = True so model datetimes are aware."
                ),
                id="djust_tz.W001",
            )
        )

    return errors
