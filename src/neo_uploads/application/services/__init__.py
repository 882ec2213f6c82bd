"""Upload application services."""

from .upload_processor import UploadProcessor
from .upload_pipeline import UploadPipeline

__all__ = ["UploadProcessor", "UploadPipeline"]
