"""Observable request lifecycle state: idle, loading, success, error."""
from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

from jobhub.errors import ErrorKind
from jobhub.log import get_logger

log = get_logger(__name__)

T = TypeVar("T")


class Status(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class RequestState(Generic[T]):
    status: Status
    value: T | None = None
    message: str = ""
    kind: ErrorKind | None = None

    @classmethod
    def idle(cls) -> RequestState[Any]:
        return cls(Status.IDLE)

    @classmethod
    def loading(cls) -> RequestState[Any]:
        return cls(Status.LOADING)

    @classmethod
    def success(cls, value: T) -> RequestState[T]:
        return cls(Status.SUCCESS, value=value)

    @classmethod
    def failure(cls, message: str, kind: ErrorKind) -> RequestState[Any]:
        return cls(Status.ERROR, message=message, kind=kind)

    @property
    def is_loading(self) -> bool:
        return self.status is Status.LOADING

    @property
    def is_error(self) -> bool:
        return self.status is Status.ERROR

    @property
    def is_success(self) -> bool:
        return self.status is Status.SUCCESS


Listener = Callable[[RequestState], None]


class StateStore:
    """Holds one RequestState and notifies subscribers on every transition."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._state: RequestState = RequestState.idle()
        self._listeners: list[Listener] = []
        self._lock = threading.RLock()

    @property
    def state(self) -> RequestState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def set(self, state: RequestState, *, when: Callable[[], bool] | None = None) -> bool:
        """Replace the state and notify listeners; returns False if ``when`` vetoed it.

        ``when`` is evaluated under the store lock, so the check and the
        update cannot be split by another writer.
        """
        with self._lock:
            if when is not None and not when():
                return False
            previous, self._state = self._state, state
            listeners = list(self._listeners)
            log.debug("%s: %s -> %s", self.name, previous.status.value, state.status.value)
            for listener in listeners:
                try:
                    listener(state)
                except Exception:
                    log.exception("%s: state listener %r failed", self.name, listener)
            return True
