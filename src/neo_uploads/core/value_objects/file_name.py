"""Client filename value object.

Splits an uploaded filename into base name and extension on the last dot.
Names without a dot, and dotfiles such as ".env", have no extension.
"""

import os
import posixpath
from dataclasses import dataclass


def sanitize_filename(filename: str) -> str:
    """Drop any directory components a client put into the filename."""
    # Windows clients may send backslash separated paths
    name = (filename or "").replace("\\", "/")
    return posixpath.basename(name)


@dataclass(frozen=True)
class FileName:
    """Base name and lowercased extension of a client filename."""

    name: str
    ext: str

    @classmethod
    def parse(cls, filename: str) -> "FileName":
        root, ext = os.path.splitext(sanitize_filename(filename))
        return cls(name=root, ext=ext[1:].lower())

    @property
    def has_extension(self) -> bool:
        return bool(self.ext)

    def with_prefix(self, prefix: str, separator: str = "-") -> "FileName":
        return FileName(name=f"{prefix}{separator}{self.name}", ext=self.ext)

    def __str__(self) -> str:
        if self.ext:
            return f"{self.name}.{self.ext}"
        return self.name


def extension_of(filename: str) -> str:
    """Lowercased extension of a filename, or an empty string."""
    return FileName.parse(filename).ext
