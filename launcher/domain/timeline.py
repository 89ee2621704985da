"""Startup stage timeline helper."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any


def domain_build_stage_event(
    stage: str,
    status: str,
    details: dict[str, Any] | None = None,
    error_message: str | None = None,
) -> dict[str, object]:
    """Build one structured startup timeline event.

    Args:
        stage: Bootstrap stage name (`locate_config`, `import_sql`, ...).
        status: Stage status marker.
        details: Optional structured details object.
        error_message: Optional failure reason for failed stages.

    Returns:
        dict[str, object]: Structured timeline event.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    event_payload: dict[str, object] = {
        "stage": stage,
        "status": status,
        "at_utc": datetime.now(timezone.utc).isoformat(),
    }
    if details:
        event_payload["details"] = details
    if error_message is not None:
        event_payload["error_message"] = error_message
    return event_payload
