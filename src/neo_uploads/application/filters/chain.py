"""Selection filter chain: field name, then extension, then count."""

from typing import List, Tuple

from ...core.entities import UploadedPart, SkippedFile
from ...core.value_objects import UploadOptions
from .field_filter import filter_by_field_name
from .extension_filter import filter_by_extension
from .count_filter import filter_by_max_count


def apply_filters(
    options: UploadOptions,
    parts: List[UploadedPart],
) -> Tuple[List[UploadedPart], List[SkippedFile]]:
    """Run the three selection filters in order.

    Returns:
        The surviving parts and a record of every dropped part
    """
    skipped: List[SkippedFile] = []
    selected = filter_by_field_name(options.files, list(parts), skipped)
    selected = filter_by_extension(options.exts, selected, skipped)
    selected = filter_by_max_count(options.max_file, selected, skipped)
    return selected, skipped
