"""Audit hooks: records every calculator run, accepted or rejected."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

logger = logging.getLogger(__name__)


def log_calculation(
    kind: str,
    inputs: dict[str, Any] | None = None,
    result: Any = None,
    error: str | None = None,
) -> dict[str, Any]:
    """Record a calculation in the audit log.

    Returns the audit entry dict for downstream persistence.
    """
    entry = {
        "kind": kind,
        "inputs": inputs or {},
        "timestamp": datetime.now(tz=timezone.utc).isoformat(),
        "accepted": error is None,
        "error": error,
        "result_summary": str(result)[:500] if result is not None else None,
    }
    if error is None:
        logger.info("Calculation audit: %s accepted", kind)
    else:
        logger.warning("Calculation audit: %s rejected: %s", kind, error)
    return entry
