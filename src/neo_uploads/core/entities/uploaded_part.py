"""Uploaded part entity.

A single file part as produced by the multipart decoder. Read-only to the
pipeline.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class UploadedPart:
    """File part submitted in a multipart form.

    Either temp_path (spooled to disk) or content (kept in memory) is set.
    """

    field_name: str
    original_name: str
    temp_path: Optional[Path] = None
    content: Optional[bytes] = None
    content_type: Optional[str] = None

    def __post_init__(self):
        if self.temp_path is None and self.content is None:
            raise ValueError(
                f"Uploaded part '{self.field_name}' has neither a temp path nor content"
            )
        if self.temp_path is not None and not isinstance(self.temp_path, Path):
            object.__setattr__(self, "temp_path", Path(self.temp_path))

    @property
    def in_memory(self) -> bool:
        return self.temp_path is None
