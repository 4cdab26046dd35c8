"""JSearch API (RapidAPI) gateway, the only module that talks HTTP."""
from __future__ import annotations

from typing import Any, Mapping

import requests

from jobhub.config import Settings
from jobhub.errors import GatewayError, MalformedResponse
from jobhub.log import get_logger
from jobhub.models import SearchQuery

log = get_logger(__name__)

SEARCH_ENDPOINT = "/search"
DETAIL_ENDPOINT = "/job-details"


class JSearchGateway:
    """Issues single GET requests against JSearch and classifies the reply.

    No retries and no caching: one call is one HTTP exchange, bounded by
    ``settings.timeout``. The JSON body is returned as-is; checking its
    shape is left to the caller.
    """

    def __init__(self, settings: Settings) -> None:
        self.base_url = settings.base_url.rstrip("/")
        self.timeout = settings.timeout
        self._headers = {
            "X-RapidAPI-Key": settings.api_key,
            "X-RapidAPI-Host": settings.api_host,
        }

    def request(self, endpoint: str, params: Mapping[str, str]) -> Any:
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        log.debug("GET %s params=%s", url, dict(params))
        try:
            r = requests.get(url, params=dict(params), headers=self._headers, timeout=self.timeout)
        except requests.Timeout as exc:
            log.warning("JSearch %s timed out after %.1fs", endpoint, self.timeout)
            raise GatewayError(cause="timeout", status_text=str(exc)) from exc
        except requests.RequestException as exc:
            log.warning("JSearch %s network error: %s", endpoint, exc)
            raise GatewayError(cause="network", status_text=str(exc)) from exc

        if not 200 <= r.status_code < 300:
            if r.status_code == 403:
                log.warning("JSearch 403 — check the RapidAPI subscription for this key")
            log.warning("JSearch %s returned %d %s", endpoint, r.status_code, r.reason)
            raise GatewayError(r.status_code, r.reason or "", cause="http")

        try:
            return r.json()
        except ValueError as exc:
            raise MalformedResponse("body", f"not valid JSON: {exc}") from exc

    def search(self, query: SearchQuery) -> Any:
        return self.request(SEARCH_ENDPOINT, query.to_params())

    def job_details(self, job_id: str, country: str) -> Any:
        return self.request(DETAIL_ENDPOINT, {"job_id": job_id, "country": country})
