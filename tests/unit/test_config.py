"""Tests for the settings-backed configuration helpers."""

from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest
from django.test.utils import override_settings

from capability_dispatch import config


def test_defaults_when_nothing_is_configured() -> None:
    """Test the defaults used when no setting is present."""
    empty = SimpleNamespace()

    assert config.copy_count(empty) == 10
    assert config.observability_enabled(empty) is False
    assert config.signature_checks_enabled(empty) is True
    assert config.result_policy(empty) == "log"
    assert config.max_workers(empty) == 4


def test_namespaced_mapping_takes_precedence() -> None:
    """Test that the namespaced mapping wins over top-level settings."""
    django_settings = SimpleNamespace(
        COPY_COUNT=3,
        CAPABILITY_DISPATCH={"COPY_COUNT": 7, "RESULT_POLICY": "Abort"},
    )

    assert config.copy_count(django_settings) == 7
    assert config.result_policy(django_settings) == "abort"


def test_top_level_setting_is_used_as_fallback() -> None:
    """Test falling back to top-level settings."""
    django_settings = SimpleNamespace(COPY_COUNT=3, OBSERVABILITY=True)

    assert config.copy_count(django_settings) == 3
    assert config.observability_enabled(django_settings) is True


def test_invalid_values_fall_back_to_defaults() -> None:
    """Test that unparsable values fall back to defaults."""
    django_settings = SimpleNamespace(
        CAPABILITY_DISPATCH={
            "COPY_COUNT": "many",
            "RESULT_POLICY": "retry",
            "MAX_WORKERS": None,
        }
    )

    assert config.copy_count(django_settings) == 10
    assert config.result_policy(django_settings) == "log"
    assert config.max_workers(django_settings) == 4


def test_numeric_values_are_clamped(caplog: pytest.LogCaptureFixture) -> None:
    """Test that out-of-range numbers are clamped and a negative copy count is reported."""
    django_settings = SimpleNamespace(
        CAPABILITY_DISPATCH={"COPY_COUNT": -5, "MAX_WORKERS": 0}
    )

    with caplog.at_level(logging.WARNING, logger="capability_dispatch.config"):
        assert config.copy_count(django_settings) == 0
    assert config.max_workers(django_settings) == 1

    (record,) = caplog.records
    assert record.getMessage() == "negative copy count configured"
    assert record.context == {"setting": "COPY_COUNT", "value": -5}


def test_non_mapping_namespace_is_ignored() -> None:
    """Test that a non-mapping namespace is ignored."""
    django_settings = SimpleNamespace(CAPABILITY_DISPATCH="COPY_COUNT=2")

    assert config.copy_count(django_settings) == 10


def test_unconfigured_lazy_settings_are_treated_as_empty() -> None:
    """Test that unconfigured settings behave as empty."""
    django_settings = SimpleNamespace(configured=False, COPY_COUNT=99)

    assert config.copy_count(django_settings) == 10


@override_settings(CAPABILITY_DISPATCH={"COPY_COUNT": 4, "OBSERVABILITY": True})
def test_reads_django_settings_by_default() -> None:
    """Test reading the Django settings object by default."""
    assert config.copy_count() == 4
    assert config.observability_enabled() is True
