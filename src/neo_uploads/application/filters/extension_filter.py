"""Extension filter.

Keeps, for each allowed extension in allow-list order, the first part whose
filename carries that extension. Extensions are compared lowercased and
taken from the last dot; dot-free names never match.
"""

import logging
from typing import List, Optional, Sequence

from ...core.entities import UploadedPart, SkippedFile, SkipReason
from ...core.value_objects import extension_of

logger = logging.getLogger(__name__)


def filter_by_extension(
    allowed: Optional[Sequence[str]],
    parts: List[UploadedPart],
    skipped: Optional[List[SkippedFile]] = None,
) -> List[UploadedPart]:
    if not allowed:
        return parts

    extensions = [(part, extension_of(part.original_name)) for part in parts]
    selected: List[UploadedPart] = []
    for wanted in allowed:
        wanted = wanted.lstrip(".").lower()
        for part, ext in extensions:
            if ext and ext == wanted:
                if not any(part is kept for kept in selected):
                    selected.append(part)
                break

    for part, ext in extensions:
        if any(part is kept for kept in selected):
            continue
        logger.debug(f"Skipping '{part.original_name}': extension '{ext}' not allowed")
        if skipped is not None:
            skipped.append(SkippedFile(part.original_name, part.field_name, SkipReason.EXTENSION_NOT_ALLOWED))

    return selected
