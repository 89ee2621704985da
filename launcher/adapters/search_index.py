"""Web application adapters used after the service has started.

`SearchIndexRebuildAdapter` asks the running service to rebuild its search
index. `ServiceReadinessProbe` waits until the service answers HTTP at all.
Both report failures through result contracts and never raise them.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Final

import httpx

from launcher.domain import STEP_STATUS_FAILED, STEP_STATUS_SUCCESS

from .errors import (
    ServiceAdapterConnectionError,
    ServiceAdapterError,
    ServiceAdapterTimeoutError,
    ServiceUnexpectedStatusError,
)
from .interfaces import SearchIndexRebuildResult, ServiceReadinessResult

_LOGGER = logging.getLogger(__name__)

_USER_AGENT: Final[str] = "openmrs-standalone-launcher/1.0 (Python/httpx)"


def _adapter_map_transport_error(error: Exception, url: str) -> ServiceAdapterError:
    """Map an httpx failure to a project-native adapter exception."""

    if isinstance(error, httpx.TimeoutException):
        return ServiceAdapterTimeoutError(f"Request to {url} timed out")
    if isinstance(error, httpx.TransportError):
        return ServiceAdapterConnectionError(f"Request to {url} failed: {error}")
    return ServiceAdapterError(f"Request to {url} could not be issued: {error}")


class SearchIndexRebuildAdapter:
    """Adapter for the `searchindexupdate` REST resource."""

    REBUILD_PATH: Final[str] = "/ws/rest/v1/searchindexupdate"
    _EXPECTED_STATUS: Final[int] = httpx.codes.NO_CONTENT
    _REQUEST_BODY: Final[bytes] = b"{}"

    def __init__(
        self,
        username: str = "admin",
        password: str = "test",
        request_timeout_seconds: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize search index rebuild adapter.

        Args:
            username: Basic-auth user for the REST resource.
            password: Basic-auth password for the REST resource.
            request_timeout_seconds: HTTP request timeout in seconds.
            transport: Optional httpx transport, used by tests.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when required config values are invalid.
        """

        if not username.strip():
            raise ValueError("username must not be blank")
        if request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be > 0")

        self._username = username
        self._password = password
        self._request_timeout_seconds = request_timeout_seconds
        self._transport = transport

    def adapter_build_rebuild_url(self, base_resource_url: str) -> str:
        """Return the rebuild endpoint under a base resource URL.

        Args:
            base_resource_url: Web application base URL.

        Returns:
            str: Full rebuild endpoint URL.

        Raises:
            ValueError: Raised when the base URL is blank.
        """

        normalized_base_url = base_resource_url.strip()
        if not normalized_base_url:
            raise ValueError("base_resource_url must not be blank")
        return f"{normalized_base_url.rstrip('/')}{self.REBUILD_PATH}"

    def adapter_trigger_rebuild(self, base_resource_url: str) -> SearchIndexRebuildResult:
        """Issue exactly one rebuild request and report its outcome.

        Args:
            base_resource_url: Web application base URL.

        Returns:
            SearchIndexRebuildResult: `success` on HTTP 204, otherwise `failed`.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        try:
            request_url = self.adapter_build_rebuild_url(base_resource_url)
        except ValueError as error:
            _LOGGER.error("Failed to trigger search index rebuild: %s", error)
            return SearchIndexRebuildResult(
                request_url=base_resource_url,
                status=STEP_STATUS_FAILED,
                error_message=str(error),
            )

        try:
            status_code = self._adapter_http_post_json(url=request_url)
        except ServiceAdapterError as error:
            _LOGGER.error("Failed to trigger search index rebuild at %s: %s", request_url, error)
            return SearchIndexRebuildResult(
                request_url=request_url,
                status=STEP_STATUS_FAILED,
                status_code=error.status_code,
                error_message=str(error),
            )

        _LOGGER.info("Search index rebuild triggered successfully on startup.")
        return SearchIndexRebuildResult(request_url=request_url, status=STEP_STATUS_SUCCESS, status_code=status_code)

    def _adapter_http_post_json(self, url: str) -> int:
        """Execute one authenticated JSON POST and return the response status.

        Args:
            url: Endpoint URL.

        Returns:
            int: HTTP status code, always the expected no-content status.

        Raises:
            ServiceAdapterConnectionError: Raised for transport failures.
            ServiceAdapterTimeoutError: Raised when the request times out.
            ServiceUnexpectedStatusError: Raised for any other response status.
        """

        try:
            with httpx.Client(
                auth=httpx.BasicAuth(self._username, self._password),
                headers={"User-Agent": _USER_AGENT},
                timeout=self._request_timeout_seconds,
                transport=self._transport,
            ) as client:
                response = client.post(
                    url,
                    content=self._REQUEST_BODY,
                    headers={"Content-Type": "application/json"},
                )
        except (httpx.HTTPError, httpx.InvalidURL) as error:
            raise _adapter_map_transport_error(error, url) from error

        if response.status_code != self._EXPECTED_STATUS:
            raise ServiceUnexpectedStatusError(
                f"Failed to trigger rebuild. Status: {response.status_code}",
                status_code=response.status_code,
            )
        return response.status_code


class ServiceReadinessProbe:
    """Poll a web application URL until it answers any HTTP response."""

    def __init__(
        self,
        attempts: int = 30,
        interval_seconds: float = 2.0,
        request_timeout_seconds: float = 30.0,
        transport: httpx.BaseTransport | None = None,
        sleep: Callable[[float], None] | None = None,
    ):
        """Initialize readiness probe.

        Args:
            attempts: Number of probe attempts.
            interval_seconds: Delay between consecutive attempts.
            request_timeout_seconds: Per-attempt HTTP timeout in seconds.
            transport: Optional httpx transport, used by tests.
            sleep: Optional sleep function, used by tests.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when config values are invalid.
        """

        if attempts < 1:
            raise ValueError("attempts must be >= 1")
        if interval_seconds < 0:
            raise ValueError("interval_seconds must be >= 0")
        if request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be > 0")

        self._attempts = attempts
        self._interval_seconds = interval_seconds
        self._request_timeout_seconds = request_timeout_seconds
        self._transport = transport
        self._sleep = sleep or time.sleep

    def adapter_wait_until_ready(self, url: str) -> ServiceReadinessResult:
        """Probe the URL until it responds or attempts are exhausted.

        Args:
            url: URL expected to answer once the service listens.

        Returns:
            ServiceReadinessResult: Readiness outcome with attempt count.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        last_error: ServiceAdapterError | None = None
        with httpx.Client(
            headers={"User-Agent": _USER_AGENT},
            timeout=self._request_timeout_seconds,
            transport=self._transport,
        ) as client:
            for attempt_index in range(self._attempts):
                if attempt_index > 0 and self._interval_seconds > 0:
                    self._sleep(self._interval_seconds)
                try:
                    response = client.get(url)
                except (httpx.HTTPError, httpx.InvalidURL) as error:
                    last_error = _adapter_map_transport_error(error, url)
                    _LOGGER.debug("Service not ready (attempt %d): %s", attempt_index + 1, last_error)
                    continue

                _LOGGER.info("Service at %s is listening (HTTP %d)", url, response.status_code)
                return ServiceReadinessResult(
                    ready=True,
                    attempts=attempt_index + 1,
                    status_code=response.status_code,
                )

        _LOGGER.warning("Service at %s did not respond after %d attempts", url, self._attempts)
        return ServiceReadinessResult(
            ready=False,
            attempts=self._attempts,
            error_message=str(last_error) if last_error is not None else None,
        )
