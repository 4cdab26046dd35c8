"""Detail workflow: the full /job-details record for one job id."""
from __future__ import annotations

from concurrent.futures import Executor, Future
from typing import Any

from jobhub.errors import MalformedResponse
from jobhub.gateway import JSearchGateway
from jobhub.log import get_logger
from jobhub.models import JobDetail
from jobhub.state import RequestState
from jobhub.workflows.base import RequestWorkflow

log = get_logger(__name__)


def parse_job_detail(payload: Any, job_id: str) -> JobDetail | None:
    """First record of ``data``, or None when the API found nothing.

    A record keyed by a different id than the one requested is rejected.
    """
    if not isinstance(payload, dict):
        raise MalformedResponse("body", f"expected an object, got {type(payload).__name__}")
    data = payload.get("data")
    if data is None:
        return None
    if not isinstance(data, list):
        raise MalformedResponse("data", f"expected a list, got {type(data).__name__}")
    if not data:
        return None
    detail = JobDetail.from_api(data[0])
    if detail.id != job_id:
        raise MalformedResponse("job_id", f"requested {job_id!r}, got {detail.id!r}")
    return detail


class DetailWorkflow(RequestWorkflow):
    name = "detail"
    failure_message = "Failed to fetch job details. Please try again."

    def __init__(self, gateway: JSearchGateway, *, country: str = "us") -> None:
        super().__init__(gateway)
        self.country = country

    @property
    def detail(self) -> JobDetail | None:
        """Current record; None while loading, on error, or when nothing was found."""
        state = self.state
        return state.value if state.is_success else None

    @staticmethod
    def _clean_id(job_id: str | None) -> str:
        return (job_id or "").strip()

    def fetch_detail(self, job_id: str) -> RequestState:
        job_id = self._clean_id(job_id)
        if not job_id:
            log.debug("fetch_detail called without a job id, ignoring")
            return self.state
        log.info("Fetching details for job %s", job_id)
        return self._run(job_id)

    def submit(self, executor: Executor, job_id: str) -> Future:
        """Like ``fetch_detail`` but the network call runs on ``executor``."""
        job_id = self._clean_id(job_id)
        if not job_id:
            done: Future = Future()
            done.set_result(self.state)
            return done
        log.info("Fetching details for job %s", job_id)
        return self._submit(executor, job_id)

    def _fetch(self, job_id: str) -> JobDetail | None:
        detail = parse_job_detail(self.gateway.job_details(job_id, self.country), job_id)
        if detail is None:
            log.info("No details found for job %s", job_id)
        return detail
