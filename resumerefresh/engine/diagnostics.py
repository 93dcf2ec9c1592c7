"""On-failure diagnostic capture."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


async def capture_failure_screenshot(page: Any, path: str) -> str | None:
    """
    Save a full-page screenshot to ``path``.

    Returns the path written, or None when the capture itself failed. Never
    raises: the failure being diagnosed stays the one reported.
    """
    try:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        await page.screenshot(path=str(target), full_page=True)
    except Exception as exc:
        logger.warning("Could not save failure screenshot to %s: %s", path, exc)
        return None
    logger.info("Failure screenshot saved to %s", path)
    return str(path)
