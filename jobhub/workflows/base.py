"""Shared request lifecycle for the search and detail workflows.

A request is split in two halves: ``_begin`` takes a generation number and
publishes ``loading`` on the calling thread, ``_complete`` does the network
work (possibly on a pool thread) and publishes the outcome. Both publishes
are conditional on the generation still being the latest one.
"""
from __future__ import annotations

import itertools
import threading
from abc import ABC, abstractmethod
from concurrent.futures import Executor, Future
from typing import Any, Callable

from jobhub.errors import GatewayError, MalformedResponse
from jobhub.gateway import JSearchGateway
from jobhub.log import get_logger
from jobhub.state import Listener, RequestState, StateStore

log = get_logger(__name__)


class RequestWorkflow(ABC):
    """One request/response lifecycle with its own state store.

    Every call takes a new generation number; a completion is applied only
    if no newer call was issued in the meantime, so the visible state always
    belongs to the most recently issued request. The workflow lock only
    guards the counter, listeners run without it and may start new requests.
    """

    name: str = "workflow"
    failure_message: str = "Request failed. Please try again."

    def __init__(self, gateway: JSearchGateway) -> None:
        self.gateway = gateway
        self.store = StateStore(self.name)
        self._lock = threading.Lock()
        self._generations = itertools.count(1)
        self._latest = 0

    @property
    def state(self) -> RequestState:
        return self.store.state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self.store.subscribe(listener)

    def _publish(self, generation: int, state: RequestState) -> bool:
        applied = self.store.set(state, when=lambda: generation == self._latest)
        if not applied:
            log.debug(
                "%s: dropping stale %s from request #%d (latest #%d)",
                self.name, state.status.value, generation, self._latest,
            )
        return applied

    def _begin(self) -> int:
        with self._lock:
            self._latest = generation = next(self._generations)
        self._publish(generation, RequestState.loading())
        return generation

    def _complete(self, generation: int, *args: Any) -> RequestState:
        try:
            value = self._fetch(*args)
        except (GatewayError, MalformedResponse) as exc:
            log.error("%s request #%d failed: %s", self.name, generation, exc)
            state = RequestState.failure(self.failure_message, exc.kind)
        else:
            state = RequestState.success(value)
        self._publish(generation, state)
        return state

    def _run(self, *args: Any) -> RequestState:
        return self._complete(self._begin(), *args)

    def _submit(self, executor: Executor, *args: Any) -> Future:
        # ordering is fixed here, on the caller's thread, not when the pool gets to it
        return executor.submit(self._complete, self._begin(), *args)

    @abstractmethod
    def _fetch(self, *args: Any) -> Any:
        """Call the gateway and return the parsed success payload."""
