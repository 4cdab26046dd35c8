"""JobHub coordinator. Owns the gateway, both workflows and the view state.

Presentation code talks only to this object: ``search``, ``fetch_detail``,
``select_job`` and ``show``, plus the ``submit_*`` variants that run a
request on the worker pool and return a Future.
"""
from __future__ import annotations

from concurrent.futures import Executor, Future, ThreadPoolExecutor

from jobhub.config import Settings
from jobhub.gateway import JSearchGateway
from jobhub.log import get_logger
from jobhub.models import JobDetail, JobSummary
from jobhub.state import RequestState
from jobhub.view import View, ViewController
from jobhub.workflows import DetailWorkflow, SearchWorkflow

log = get_logger(__name__)


class JobHub:
    def __init__(
        self,
        settings: Settings,
        gateway: JSearchGateway | None = None,
        *,
        max_workers: int | None = None,
        executor: Executor | None = None,
    ) -> None:
        self.settings = settings
        self.gateway = gateway or JSearchGateway(settings)
        self.searcher = SearchWorkflow(
            self.gateway,
            country=settings.search_country,
            date_posted=settings.date_posted,
            initial_query=settings.default_query,
        )
        self.details = DetailWorkflow(self.gateway, country=settings.detail_country)
        self.view = ViewController()
        # a shared executor stays open when this hub is closed
        self._owns_pool = executor is None
        self._pool = executor or ThreadPoolExecutor(
            max_workers=max_workers or settings.max_workers,
            thread_name_prefix="jobhub",
        )

    # ── state ────────────────────────────────────────────────────────────

    @property
    def search_state(self) -> RequestState:
        return self.searcher.state

    @property
    def detail_state(self) -> RequestState:
        return self.details.state

    @property
    def jobs(self) -> list[JobSummary]:
        return self.searcher.jobs

    @property
    def detail(self) -> JobDetail | None:
        return self.details.detail

    # ── actions ──────────────────────────────────────────────────────────

    def start(self) -> Future:
        """Kick off the initial search so results show up without user input."""
        log.info("Initial search for %r", self.searcher.initial_query)
        return self.searcher.submit(self._pool, self.searcher.initial_query)

    def search(self, text: str) -> RequestState:
        return self.searcher.search(text)

    def fetch_detail(self, job_id: str | None = None) -> RequestState:
        return self.details.fetch_detail(self.view.selected_job_id if job_id is None else job_id)

    def submit_search(self, text: str) -> Future:
        return self.searcher.submit(self._pool, text)

    def submit_detail(self, job_id: str | None = None) -> Future:
        if job_id is None:
            job_id = self.view.selected_job_id
        return self.details.submit(self._pool, job_id)

    def select_job(self, job_id: str) -> None:
        self.view.select_job(job_id)

    def show(self, view: View | str) -> None:
        self.view.show(view)

    def close(self) -> None:
        if self._owns_pool:
            self._pool.shutdown(wait=True)

    def __enter__(self) -> JobHub:
        return self

    def __exit__(self, *exc) -> None:
        self.close()
