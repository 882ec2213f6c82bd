"""Maximum count filter."""

import logging
from typing import List, Optional

from ...core.entities import UploadedPart, SkippedFile, SkipReason

logger = logging.getLogger(__name__)


def filter_by_max_count(
    max_count: Optional[int],
    parts: List[UploadedPart],
    skipped: Optional[List[SkippedFile]] = None,
) -> List[UploadedPart]:
    """Truncate parts in place to the first max_count entries."""
    if not max_count or max_count <= 0:
        return parts

    for part in parts[max_count:]:
        logger.debug(f"Skipping '{part.original_name}': more than {max_count} files submitted")
        if skipped is not None:
            skipped.append(SkippedFile(part.original_name, part.field_name, SkipReason.MAX_FILES_EXCEEDED))

    del parts[max_count:]
    return parts
