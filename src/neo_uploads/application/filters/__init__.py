"""Selection filters applied before any file is processed."""

from .field_filter import filter_by_field_name
from .extension_filter import filter_by_extension
from .count_filter import filter_by_max_count
from .chain import apply_filters

__all__ = [
    "filter_by_field_name",
    "filter_by_extension",
    "filter_by_max_count",
    "apply_filters",
]
