"""Environment-backed upload settings.

Process-wide defaults for services that mount the upload middleware without
passing options explicitly. Values come from UPLOAD_* environment variables
or a .env file.
"""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.value_objects import UploadOptions, DEFAULT_MAX_FILE_SIZE


def _split_list(value: Optional[str]) -> Optional[List[str]]:
    if value is None:
        return None
    items = [item.strip() for item in value.split(",") if item.strip()]
    return items or None


class UploadSettings(BaseSettings):
    """Upload configuration read from the environment.

    List options (UPLOAD_FILES, UPLOAD_EXTS) are comma separated.
    """

    model_config = SettingsConfigDict(
        env_prefix="UPLOAD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    dir: str = Field(default="uploads", description="Upload path, relative to base_dir")
    base_dir: Path = Field(default_factory=Path.cwd, description="Root the upload path is resolved against")
    temp_dir: Optional[Path] = Field(default=None, description="Where multipart parts are spooled")

    max_file_size: Optional[int] = Field(default=DEFAULT_MAX_FILE_SIZE, ge=0)
    random_name: bool = True
    max_file: Optional[int] = Field(default=None, ge=0)
    files: Optional[str] = None
    exts: Optional[str] = None

    @property
    def upload_directory(self) -> Path:
        """Absolute directory files are moved into."""
        return (self.base_dir / self.dir).resolve()

    def to_options(self) -> UploadOptions:
        return UploadOptions(
            max_file_size=self.max_file_size,
            random_name=self.random_name,
            max_file=self.max_file,
            files=_split_list(self.files),
            exts=_split_list(self.exts),
        )


@lru_cache()
def get_upload_settings() -> UploadSettings:
    """Get cached upload settings instance."""
    return UploadSettings()
