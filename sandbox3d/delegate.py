"""Multicast delegates with persistent and one-shot callbacks."""

from __future__ import annotations

import enum
import itertools
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


class CallbackKind(enum.Enum):
    PERSISTENT = "persistent"
    ONE_SHOT = "one_shot"


@dataclass
class _Entry:
    handle_id: int
    func: Callable[..., Any] | None
    kind: CallbackKind


class DelegateHandle:
    """Owns one connection; closing it disconnects the callback."""

    def __init__(self, delegate: Delegate, handle_id: int) -> None:
        self._delegate = delegate
        self.handle_id = handle_id
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._delegate.unregister(self.handle_id)

    def __enter__(self) -> DelegateHandle:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class Delegate:
    """Calls every connected callback, in connection order, on broadcast."""

    def __init__(self) -> None:
        self._entries: list[_Entry] = []
        self._ids = itertools.count()

    def connect(
        self, func: Callable[..., Any], kind: CallbackKind = CallbackKind.PERSISTENT
    ) -> DelegateHandle:
        if not callable(func):
            raise TypeError("callback must be callable")
        handle_id = next(self._ids)
        self._entries.append(_Entry(handle_id, func, CallbackKind(kind)))
        return DelegateHandle(self, handle_id)

    def broadcast(self, *args: Any, **kwargs: Any) -> None:
        """Invoke callbacks; one-shot callbacks are dropped after their call."""
        for entry in list(self._entries):
            func = entry.func
            if func is None:
                continue
            if entry.kind is CallbackKind.ONE_SHOT:
                entry.func = None
            func(*args, **kwargs)
        self._entries = [e for e in self._entries if e.func is not None]

    def unregister(self, handle_id: int) -> bool:
        """Disconnect a callback; return whether it was still connected."""
        for entry in self._entries:
            if entry.handle_id == handle_id and entry.func is not None:
                entry.func = None
                self._entries.remove(entry)
                return True
        return False

    def __len__(self) -> int:
        return sum(1 for e in self._entries if e.func is not None)