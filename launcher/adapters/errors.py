"""Project-native typed exceptions for web application adapter failures."""

from __future__ import annotations


class ServiceAdapterError(Exception):
    """Base exception for adapter-level web application failures.

    Attributes:
        status_code: Optional HTTP status returned by the service.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ServiceAdapterConnectionError(ServiceAdapterError, ConnectionError):
    """Transport-level connectivity failure while calling the service."""


class ServiceAdapterTimeoutError(ServiceAdapterError, TimeoutError):
    """Transport timeout while calling the service."""


class ServiceUnexpectedStatusError(ServiceAdapterError, RuntimeError):
    """Service answered with a status other than the expected one."""
