# infrastructure/filesystem/tokens.py
from __future__ import annotations
import time
import uuid
from typing import Callable, Protocol

from domain.errors import InvalidArgument


def epoch_millis() -> int:
    return time.time_ns() // 1_000_000


class TokenSource(Protocol):
    def next(self) -> str: ...


class TimeHexTokens:
    """
    Hex of the current epoch milliseconds. Two calls inside the same
    millisecond return the same token.
    """
    def __init__(self, clock: Callable[[], int] = epoch_millis) -> None:
        self.clock = clock

    def next(self) -> str:
        return format(self.clock(), "x")


class UuidTokens:
    def next(self) -> str:
        return uuid.uuid4().hex


def token_source_for(mode: str) -> TokenSource:
    m = (mode or "").strip().lower()
    if m == "uuid":
        return UuidTokens()
    if m == "time":
        return TimeHexTokens()
    raise InvalidArgument(f"Unknown unique token mode: {mode!r} (expected 'uuid' or 'time')")
