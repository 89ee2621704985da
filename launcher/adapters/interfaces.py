"""Typed result contracts for adapter-layer operations."""

from dataclasses import dataclass

from launcher.domain import STEP_STATUS_SUCCESS


@dataclass(frozen=True)
class SearchIndexRebuildResult:
    """Outcome of one search index rebuild trigger.

    Attributes:
        request_url: Endpoint the rebuild request was sent to.
        status: Final trigger state (`success`, `failed`, `skipped`).
        status_code: HTTP status returned by the service, when one was received.
        error_message: Optional failure reason.
    """

    request_url: str
    status: str
    status_code: int | None = None
    error_message: str | None = None

    @property
    def succeeded(self) -> bool:
        """Return whether the service accepted the rebuild request."""

        return self.status == STEP_STATUS_SUCCESS


@dataclass(frozen=True)
class ServiceReadinessResult:
    """Outcome of waiting for the web application to accept HTTP requests.

    Attributes:
        ready: Whether any HTTP response was received.
        attempts: Number of probe attempts issued.
        status_code: Status of the response that ended the wait, if any.
        error_message: Last transport failure when the service never answered.
    """

    ready: bool
    attempts: int
    status_code: int | None = None
    error_message: str | None = None
