"""The copy program: move values from any readable source to any writable sink."""

from __future__ import annotations

from typing import Any

from django.conf import settings

from capability_dispatch.capabilities.builtin import Readable, Writable
from capability_dispatch.config import copy_count
from capability_dispatch.dispatch.dispatcher import CapabilityDispatcher
from capability_dispatch.logging import get_logger

logger = get_logger("drivers.copy")


def copy(
    source: Any,
    sink: Any,
    count: int | None = None,
    *,
    dispatcher: CapabilityDispatcher | None = None,
    django_settings: Any = settings,
) -> int:
    """
    Read a value from ``source`` and write it to ``sink``, ``count`` times.

    Both sides are bound before the first read, so a source or sink that does
    not satisfy its capability fails without any value being moved. The same
    combined device may be passed as source and sink.

    Parameters:
        source: Variant (or handle) satisfying ``Readable``.
        sink: Variant (or handle) satisfying ``Writable``.
        count: Number of values to copy; defaults to the configured ``COPY_COUNT``.

    Returns:
        int: Number of values copied.

    Raises:
        ValueError: If ``count`` is negative.
        CapabilityBindingError: If either side does not satisfy its capability.
    """
    total = copy_count(django_settings) if count is None else count
    if total < 0:
        raise ValueError("count must be non-negative")
    active = dispatcher or CapabilityDispatcher(django_settings=django_settings)
    reader = active.bind(source, Readable)
    writer = active.bind(sink, Writable)
    for _ in range(total):
        writer.write(reader.read())
    logger.debug("copy finished", context={"count": total})
    return total
