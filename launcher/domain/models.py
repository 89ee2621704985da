"""Status markers shared by bootstrap step results.

Optional bootstrap steps report their outcome through result contracts using
these markers instead of raising, so the caller decides whether to continue
startup.
"""

STEP_STATUS_SUCCESS = "success"
STEP_STATUS_FAILED = "failed"
STEP_STATUS_SKIPPED = "skipped"
