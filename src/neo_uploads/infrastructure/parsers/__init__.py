"""Multipart body parsers."""

from .starlette_parser import StarletteMultipartParser, CHUNK_SIZE

__all__ = ["StarletteMultipartParser", "CHUNK_SIZE"]
