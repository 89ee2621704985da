"""Adapter layer package for web application integration boundaries."""

from .errors import (
	ServiceAdapterConnectionError,
	ServiceAdapterError,
	ServiceAdapterTimeoutError,
	ServiceUnexpectedStatusError,
)
from .interfaces import SearchIndexRebuildResult, ServiceReadinessResult
from .search_index import SearchIndexRebuildAdapter, ServiceReadinessProbe

__all__ = [
	"SearchIndexRebuildAdapter",
	"SearchIndexRebuildResult",
	"ServiceAdapterConnectionError",
	"ServiceAdapterError",
	"ServiceAdapterTimeoutError",
	"ServiceReadinessProbe",
	"ServiceReadinessResult",
	"ServiceUnexpectedStatusError",
]
