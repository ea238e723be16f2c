"""Configuration helpers backed by Django settings."""

from __future__ import annotations

from typing import Any, Mapping

from django.conf import settings

from capability_dispatch.logging import get_logger

_SETTINGS_KEY = "CAPABILITY_DISPATCH"

_RESULT_POLICIES = {"skip", "log", "abort"}

logger = get_logger("config")


def _config(django_settings: Any = settings) -> Mapping[str, Any]:
    if not getattr(django_settings, "configured", True):
        return {}
    value = getattr(django_settings, _SETTINGS_KEY, {})
    if isinstance(value, Mapping):
        return value
    return {}


def _setting(key: str, default: Any, django_settings: Any) -> Any:
    fallback = default
    if getattr(django_settings, "configured", True):
        fallback = getattr(django_settings, key, default)
    return _config(django_settings).get(key, fallback)


def copy_count(django_settings: Any = settings) -> int:
    """
    Number of values the copy driver transfers when no count is given.

    A negative configured value is logged as a warning and treated as 0.
    """
    raw = _setting("COPY_COUNT", 10, django_settings)
    try:
        count = int(raw)
    except (TypeError, ValueError):
        return 10
    if count < 0:
        logger.warning(
            "negative copy count configured",
            context={"setting": "COPY_COUNT", "value": count},
        )
        return 0
    return count


def observability_enabled(django_settings: Any = settings) -> bool:
    return bool(_setting("OBSERVABILITY", False, django_settings))


def signature_checks_enabled(django_settings: Any = settings) -> bool:
    return bool(_setting("SIGNATURE_CHECKS", True, django_settings))


def result_policy(django_settings: Any = settings) -> str:
    """Default policy drivers apply to unsupported or failed operation results."""
    value = _setting("RESULT_POLICY", "log", django_settings)
    policy = str(value).strip().lower()
    if policy not in _RESULT_POLICIES:
        return "log"
    return policy


def max_workers(django_settings: Any = settings) -> int:
    raw = _setting("MAX_WORKERS", 4, django_settings)
    try:
        return max(1, int(raw))
    except (TypeError, ValueError):
        return 4
