from django.apps import AppConfig


class DjustTzConfig(AppConfig):
    name = "djust_tz"
    verbose_name = "djust timezone"

    def ready(self):
        # Import checks module so @register() decorators are executed
        import djust_tz.checks  # noqa: F401

        # DJUST_TZ_CONFIG may not have been readable when config was imported
        from djust_tz.config import config

        config.reset()
