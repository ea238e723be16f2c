"""Run one operation across many handles on a thread pool."""

from __future__ import annotations

import concurrent.futures
from typing import Any, Iterable

from django.conf import settings

from capability_dispatch.config import max_workers as configured_max_workers

from .dispatcher import CapabilityDispatcher
from .handle import CapabilityHandle


def invoke_concurrently(
    handles: Iterable[CapabilityHandle[Any]],
    operation: str,
    *args: Any,
    max_workers: int | None = None,
    dispatcher: CapabilityDispatcher | None = None,
    django_settings: Any = settings,
) -> list[Any]:
    """
    Invoke ``operation`` on every handle in parallel.

    Results are returned in the order of ``handles``. The first exception
    raised, in handle order, propagates once all submitted calls have finished.
    """
    active = dispatcher or CapabilityDispatcher(django_settings=django_settings)
    workers = max_workers or configured_max_workers(django_settings)
    targets = list(handles)
    if not targets:
        return []
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [
            executor.submit(active.invoke, handle, operation, *args)
            for handle in targets
        ]
        return [future.result() for future in futures]


__all__ = ["invoke_concurrently"]
