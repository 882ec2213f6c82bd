"""Accepted file entity."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional


BYTES_PER_MEGABYTE = 1048576


@dataclass(frozen=True)
class AcceptedFile:
    """A file that passed every check and now lives in the upload directory.

    file_name is name + "." + ext, or just name when there is no extension.
    path is absolute, url is relative to the configured upload path.
    """

    original_name: str
    name: str
    ext: str
    file_name: str
    size: float  # megabytes
    size_bytes: int
    tmp_path: Optional[Path]
    path: Path
    url: str
    field_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "originalName": self.original_name,
            "name": self.name,
            "ext": self.ext,
            "fileName": self.file_name,
            "size": self.size,
            "tmpUrl": str(self.tmp_path) if self.tmp_path is not None else None,
            "url": self.url,
            "path": str(self.path),
        }
