"""Search workflow: one page of /search results for a free-text query."""
from __future__ import annotations

from concurrent.futures import Executor, Future
from typing import Any

from jobhub.errors import MalformedResponse
from jobhub.gateway import JSearchGateway
from jobhub.log import get_logger
from jobhub.models import JobSummary, SearchQuery
from jobhub.state import RequestState
from jobhub.workflows.base import RequestWorkflow

log = get_logger(__name__)


def parse_search_results(payload: Any) -> list[JobSummary]:
    """``{"data": [...]}`` -> summaries in response order; null/missing data is empty."""
    if not isinstance(payload, dict):
        raise MalformedResponse("body", f"expected an object, got {type(payload).__name__}")
    data = payload.get("data")
    if data is None:
        return []
    if not isinstance(data, list):
        raise MalformedResponse("data", f"expected a list, got {type(data).__name__}")
    return [JobSummary.from_api(hit) for hit in data]


class SearchWorkflow(RequestWorkflow):
    name = "search"
    failure_message = "Failed to fetch jobs. Please try again."

    def __init__(
        self,
        gateway: JSearchGateway,
        *,
        country: str = "in",
        date_posted: str = "all",
        initial_query: str = "",
    ) -> None:
        super().__init__(gateway)
        self.country = country
        self.date_posted = date_posted
        self.initial_query = initial_query

    @property
    def jobs(self) -> list[JobSummary]:
        """Current results; empty unless the latest search succeeded."""
        state = self.state
        return list(state.value) if state.is_success else []

    def make_query(self, text: str) -> SearchQuery:
        return SearchQuery(text=text, country=self.country, date_posted=self.date_posted)

    def _coerce(self, query: SearchQuery | str) -> SearchQuery:
        if isinstance(query, str):
            query = self.make_query(query)
        log.info("Searching jobs for %r (country=%s)", query.text, query.country)
        return query

    def search(self, query: SearchQuery | str) -> RequestState:
        return self._run(self._coerce(query))

    def submit(self, executor: Executor, query: SearchQuery | str) -> Future:
        """Like ``search`` but the network call runs on ``executor``.

        The request is ordered and marked loading before this returns.
        """
        return self._submit(executor, self._coerce(query))

    def load_initial(self) -> RequestState:
        return self.search(self.initial_query)

    def _fetch(self, query: SearchQuery) -> list[JobSummary]:
        jobs = parse_search_results(self.gateway.search(query))
        log.info("Search %r returned %d jobs", query.text, len(jobs))
        return jobs
