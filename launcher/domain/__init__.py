"""Domain contracts shared across launcher layers."""

from .models import STEP_STATUS_FAILED, STEP_STATUS_SKIPPED, STEP_STATUS_SUCCESS
from .timeline import domain_build_stage_event

__all__ = [
	"STEP_STATUS_FAILED",
	"STEP_STATUS_SKIPPED",
	"STEP_STATUS_SUCCESS",
	"domain_build_stage_event",
]
