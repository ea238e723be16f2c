"""Tests for explicit operation results and driver policies."""

from __future__ import annotations

import logging

import pytest

from capability_dispatch.capabilities.exceptions import OperationAbortedError
from capability_dispatch.capabilities.result import (
    OperationResult,
    OperationStatus,
    ResultPolicy,
    apply_policy,
)


def test_success_result():
    """Test a successful result."""
    result = OperationResult.success(42)

    assert result.ok
    assert result.status is OperationStatus.OK
    assert result.unwrap() == 42


def test_unsupported_and_failed_results_are_not_ok():
    """Test that unsupported and failed results are not ok."""
    unsupported = OperationResult.unsupported("read-only")
    failed = OperationResult.failure("disk full")

    assert not unsupported.ok
    assert unsupported.status is OperationStatus.UNSUPPORTED
    assert not failed.ok
    assert failed.reason == "disk full"


def test_unwrap_of_unsuccessful_result_raises():
    """Test that unwrapping an unsuccessful result raises."""
    with pytest.raises(ValueError, match="cannot unwrap unsupported result"):
        OperationResult.unsupported("read-only").unwrap()


def test_results_are_immutable():
    """Test that results cannot be modified."""
    result = OperationResult.success(1)

    with pytest.raises(AttributeError):
        result.value = 2  # type: ignore[misc]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("skip", ResultPolicy.SKIP),
        (" LOG ", ResultPolicy.LOG),
        (ResultPolicy.ABORT, ResultPolicy.ABORT),
    ],
)
def test_policy_coerce(raw, expected):
    """Test coercing strings and members to a policy."""
    assert ResultPolicy.coerce(raw) is expected


def test_policy_coerce_rejects_unknown_values():
    """Test that unknown policy names are rejected."""
    with pytest.raises(ValueError):
        ResultPolicy.coerce("retry")


@pytest.mark.parametrize("policy", list(ResultPolicy))
def test_successful_results_pass_every_policy(policy):
    """Test that ok results are accepted under every policy."""
    assert apply_policy(OperationResult.success(), policy, operation="load") is True


def test_skip_policy_is_silent(caplog: pytest.LogCaptureFixture):
    """Test that the skip policy logs nothing."""
    with caplog.at_level(logging.DEBUG, logger="capability_dispatch"):
        handled = apply_policy(
            OperationResult.failure("boom"), "skip", operation="persist"
        )

    assert handled is False
    assert not caplog.records


def test_log_policy_records_warning(caplog: pytest.LogCaptureFixture):
    """Test the warning recorded by the log policy."""
    with caplog.at_level(logging.WARNING, logger="capability_dispatch"):
        handled = apply_policy(
            OperationResult.unsupported("read-only"),
            ResultPolicy.LOG,
            operation="persist",
            target="SpecialSettings",
        )

    assert handled is False
    record = caplog.records[0]
    assert record.getMessage() == "operation did not succeed"
    assert record.context["status"] == "unsupported"
    assert record.context["target"] == "SpecialSettings"


def test_abort_policy_raises():
    """Test that the abort policy raises OperationAbortedError."""
    result = OperationResult.failure("boom")

    with pytest.raises(OperationAbortedError) as exc_info:
        apply_policy(result, ResultPolicy.ABORT, operation="persist")

    assert exc_info.value.result is result
    assert exc_info.value.operation == "persist"
