import logging

from django.core.exceptions import ImproperlyConfigured

LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def resolve_log_level(value, default="INFO"):
    """Return the canonical level name for ``value``, in any letter case."""
    name = (value or default).strip().upper()
    if name == "WARN":
        name = "WARNING"
    if name not in LEVEL_NAMES:
        raise ImproperlyConfigured(
            f"Unknown log level {value!r}; expected one of {', '.join(LEVEL_NAMES)}"
        )
    return name


def level_number(name):
    return logging.getLevelName(resolve_log_level(name))
