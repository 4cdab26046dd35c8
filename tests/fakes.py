"""Canned JSearch payloads and an in-memory gateway for workflow tests."""
from __future__ import annotations

from concurrent.futures import Executor, Future
from typing import Callable

from jobhub.errors import GatewayError


def summary_record(job_id: str, **overrides) -> dict:
    record = {
        "job_id": job_id,
        "employer_name": "Acme Labs",
        "job_title": "Python Developer",
        "job_description": "Build APIs.",
        "job_apply_link": f"https://example.com/apply/{job_id}",
        "job_city": "Kochi",
        "job_state": "Kerala",
        "job_country": "IN",
        "job_employment_type": "FULLTIME",
        "job_posted_at_datetime_utc": "2024-03-15T00:00:00.000Z",
        "job_salary_min": 50000,
        "job_salary_max": 70000,
        "job_salary_currency": "USD",
        "job_benefits": ["health_insurance"],
        "job_required_skills": ["Python", "SQL"],
        "job_highlights": {
            "Qualifications": ["3+ years of Python"],
            "Responsibilities": ["Own the search API"],
            "Benefits": [],
        },
    }
    record.update(overrides)
    return record


def detail_record(job_id: str, **overrides) -> dict:
    record = summary_record(job_id)
    record.update({
        "job_description_html": "<p>Build APIs.</p>",
        "job_google_link": f"https://www.google.com/search?q={job_id}",
        "job_offer_expiration_datetime_utc": "2024-04-15T00:00:00.000Z",
        "job_required_experience": {
            "no_experience_required": False,
            "required_experience_in_months": 30,
            "experience_mentioned": True,
            "experience_preferred": False,
        },
    })
    record.update(overrides)
    return record


class FakeGateway:
    """Returns queued payloads (or raises queued errors) and records calls."""

    def __init__(self, search=None, details=None) -> None:
        # a dict maps query text to its payload
        self.search_payloads = search if isinstance(search, dict) else list(search or [])
        self.detail_payloads = list(details or [])
        self.search_calls: list = []
        self.detail_calls: list[tuple[str, str]] = []

    @staticmethod
    def _next(queue):
        item = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(item, Exception):
            raise item
        return item

    def search(self, query):
        self.search_calls.append(query)
        if isinstance(self.search_payloads, dict):
            return self.search_payloads[query.text]
        return self._next(self.search_payloads)

    def job_details(self, job_id: str, country: str):
        self.detail_calls.append((job_id, country))
        return self._next(self.detail_payloads)


def http_error(status: int = 500, text: str = "Internal Server Error") -> GatewayError:
    return GatewayError(status, text, cause="http")


class DeferredExecutor(Executor):
    """Holds submitted calls until ``run_all`` so tests choose the order."""

    def __init__(self) -> None:
        self.pending: list[tuple[Future, Callable[[], object]]] = []
        self.shut_down = False

    def submit(self, fn, /, *args, **kwargs):
        future: Future = Future()
        self.pending.append((future, lambda: fn(*args, **kwargs)))
        return future

    def run_all(self, *, reverse: bool = False) -> None:
        pending, self.pending = self.pending, []
        for future, call in reversed(pending) if reverse else pending:
            future.set_result(call())

    def shutdown(self, wait: bool = True, *, cancel_futures: bool = False) -> None:
        self.shut_down = True
