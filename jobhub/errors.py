"""Error types raised between the gateway, the models and the workflows."""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    NETWORK = "network"
    HTTP_STATUS = "http_status"
    MALFORMED = "malformed"


class JobHubError(Exception):
    """Base class for everything this package raises on purpose."""


class ConfigError(JobHubError):
    pass


class GatewayError(JobHubError):
    """The API could not be reached or answered with a non-2xx status.

    ``cause`` is ``"http"`` when a response arrived, ``"network"`` when the
    transport failed and ``"timeout"`` when no response arrived in time.
    """

    def __init__(
        self,
        status: int | None = None,
        status_text: str = "",
        *,
        cause: str = "http",
    ) -> None:
        self.status = status
        self.status_text = status_text
        self.cause = cause
        if status is None:
            msg = f"API request failed: {cause}"
            if status_text:
                msg += f" ({status_text})"
        else:
            msg = f"API request failed: {status} {status_text}".rstrip()
        super().__init__(msg)

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind.HTTP_STATUS if self.cause == "http" else ErrorKind.NETWORK


class MalformedResponse(JobHubError):
    """The API answered, but the payload does not have the expected shape."""

    kind = ErrorKind.MALFORMED

    def __init__(self, field: str, detail: str) -> None:
        self.field = field
        self.detail = detail
        super().__init__(f"Malformed response at {field!r}: {detail}")
