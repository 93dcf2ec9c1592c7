"""Picks the resume file to upload from an assets directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Sequence

from resumerefresh import config

logger = logging.getLogger(__name__)


def find_resume_file(
    assets_dir: str | Path,
    extensions: Sequence[str] = config.SUPPORTED_RESUME_EXTENSIONS,
) -> Path | None:
    """Return the first file (by name) with a supported suffix, or None."""
    directory = Path(assets_dir)
    if not directory.is_dir():
        logger.error("Assets folder not found: %s", directory)
        return None

    allowed = {ext.lower() for ext in extensions}
    for entry in sorted(directory.iterdir()):
        if entry.is_file() and entry.suffix.lower() in allowed:
            logger.info("Auto-detected resume file: %s", entry.name)
            return entry

    logger.error(
        "No resume file in %s (supported: %s)", directory, ", ".join(sorted(allowed))
    )
    return None


def resume_locator(assets_dir: str | Path) -> Callable[[], Path | None]:
    """Defer the directory scan until the upload step asks for the file."""

    def locate() -> Path | None:
        return find_resume_file(assets_dir)

    return locate
