"""Input and output devices for the copy program."""

from __future__ import annotations

import random
import sys
from collections import deque
from typing import Any, Callable, Generic, Iterable, TextIO, TypeVar

from capability_dispatch.capabilities.builtin import Readable, Writable
from capability_dispatch.capabilities.conformance import implements
from capability_dispatch.logging import get_logger

ValueT = TypeVar("ValueT")

logger = get_logger("variants.devices")


@implements(Readable)
class Keyboard:
    """Keyboard producing digits from an injected random source."""

    def __init__(self, rng: random.Random | None = None, *, seed: int | None = None) -> None:
        self._rng = rng or random.Random(seed)

    def read(self) -> int:
        return self._rng.randrange(10)


@implements(Readable)
class TapeReader:
    """Paper tape reader; replays the punched tape from the start once it runs out."""

    def __init__(self, tape: Iterable[int]) -> None:
        self._tape = tuple(tape)
        if not self._tape:
            raise ValueError("a tape reader needs a non-empty tape")
        self._position = 0

    def read(self) -> int:
        value = self._tape[self._position]
        self._position = (self._position + 1) % len(self._tape)
        return value


@implements(Readable)
class SequenceSource(Generic[ValueT]):
    """Deterministic source yielding a fixed sequence of values."""

    def __init__(self, values: Iterable[ValueT]) -> None:
        self._pending: deque[ValueT] = deque(values)
        self.calls = 0

    @property
    def remaining(self) -> int:
        return len(self._pending)

    def read(self) -> ValueT:
        if not self._pending:
            raise EOFError("sequence source is exhausted")
        self.calls += 1
        return self._pending.popleft()


@implements(Writable)
class RecordingSink(Generic[ValueT]):
    """Sink that keeps every written value in order."""

    def __init__(self) -> None:
        self.values: list[ValueT] = []

    @property
    def calls(self) -> int:
        return len(self.values)

    def write(self, value: ValueT) -> None:
        self.values.append(value)


@implements(Writable)
class Printer:
    """Line printer writing one value per line to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream or sys.stdout

    def write(self, value: Any) -> None:
        self._stream.write(f"{value}\n")


@implements(Writable)
class NetworkPrinter:
    """Printer reached through a transport callable accepting encoded payloads."""

    def __init__(self, transport: Callable[[bytes], None], *, encoding: str = "utf-8") -> None:
        self._transport = transport
        self._encoding = encoding

    def write(self, value: Any) -> None:
        payload = str(value).encode(self._encoding)
        logger.debug("network print", context={"bytes": len(payload)})
        self._transport(payload)


@implements(Readable, Writable)
class EchoDevice(Generic[ValueT]):
    """Combined device: reads from a preloaded feed and records what is written to it."""

    def __init__(self, feed: Iterable[ValueT]) -> None:
        self._feed = SequenceSource(feed)
        self.recorded: list[ValueT] = []

    def read(self) -> ValueT:
        return self._feed.read()

    def write(self, value: ValueT) -> None:
        self.recorded.append(value)


__all__ = [
    "EchoDevice",
    "Keyboard",
    "NetworkPrinter",
    "Printer",
    "RecordingSink",
    "SequenceSource",
    "TapeReader",
]
