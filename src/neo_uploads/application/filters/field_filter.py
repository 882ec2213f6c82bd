"""Field name filter.

Keeps, for each allowed field name in allow-list order, the first part
submitted under that name.
"""

import logging
from typing import List, Optional, Sequence

from ...core.entities import UploadedPart, SkippedFile, SkipReason

logger = logging.getLogger(__name__)


def filter_by_field_name(
    allowed: Optional[Sequence[str]],
    parts: List[UploadedPart],
    skipped: Optional[List[SkippedFile]] = None,
) -> List[UploadedPart]:
    if not allowed:
        return parts

    selected: List[UploadedPart] = []
    for name in allowed:
        match = next((part for part in parts if part.field_name == name), None)
        if match is not None and not any(match is kept for kept in selected):
            selected.append(match)

    _record_dropped(parts, selected, skipped)
    return selected


def _record_dropped(
    parts: List[UploadedPart],
    selected: List[UploadedPart],
    skipped: Optional[List[SkippedFile]],
) -> None:
    for part in parts:
        if any(part is kept for kept in selected):
            continue
        logger.debug(f"Skipping '{part.original_name}': field '{part.field_name}' not allowed")
        if skipped is not None:
            skipped.append(SkippedFile(part.original_name, part.field_name, SkipReason.FIELD_NOT_ALLOWED))
