"""Which tab is showing, and which job id is handed from search to detail."""
from __future__ import annotations

import threading
from enum import Enum
from typing import Callable

from jobhub.log import get_logger

log = get_logger(__name__)


class View(str, Enum):
    SEARCH = "search"
    DETAIL = "detail"


class ViewController:
    """Transient hand-off state; switching views never touches workflow results."""

    def __init__(self) -> None:
        self.active_view: View = View.SEARCH
        self.selected_job_id: str = ""
        self._listeners: list[Callable[["ViewController"], None]] = []
        self._lock = threading.Lock()

    def subscribe(self, listener: Callable[["ViewController"], None]) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def select_job(self, job_id: str) -> None:
        """Hand a search result over to the detail view. Does not fetch."""
        with self._lock:
            self.selected_job_id = job_id
            self.active_view = View.DETAIL
        log.debug("Selected job %s", job_id)
        self._notify()

    def set_selected_job_id(self, job_id: str) -> None:
        with self._lock:
            self.selected_job_id = job_id
        self._notify()

    def show(self, view: View | str) -> None:
        with self._lock:
            self.active_view = View(view)
        self._notify()

    def _notify(self) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(self)
