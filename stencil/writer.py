from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)


class WriteResult(str, Enum):
    CREATED = "created"
    SKIPPED = "skipped"


def write_if_absent(path: str | Path, text: str) -> WriteResult:
    """
    Create ``path`` holding ``text`` unless something already lives there.

    The existence check and the create are separate steps; the create is
    exclusive, so a writer that loses a race reports SKIPPED instead of
    overwriting. Callers that need ordering across writers serialize them.
    """
    target = Path(path)
    if target.exists():
        logger.info("Skipped %s (already exists)", target)
        return WriteResult.SKIPPED
    target.parent.mkdir(parents=True, exist_ok=True)
    try:
        # newline="" keeps the rendered line terminators untouched.
        with target.open("x", encoding="utf-8", newline="") as fh:
            fh.write(text)
    except FileExistsError:
        logger.info("Skipped %s (created concurrently)", target)
        return WriteResult.SKIPPED
    logger.info("Created %s", target)
    return WriteResult.CREATED
