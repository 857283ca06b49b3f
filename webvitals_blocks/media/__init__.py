"""Médiathèque — protocol, implémentations et resolver srcset."""
from .base import AttachmentMetadata, ImageSize, MediaCatalog, ResponsiveBackground
from .memory import InMemoryMediaCatalog
from .resolver import (
    DEFAULT_SIZE_LABELS, FULL_SIZE, VIEWPORT_SIZES,
    clean_url, resolve_responsive_background,
)
from .rest import RestMediaCatalog
from .sql import SqlMediaCatalog

__all__ = [
    "AttachmentMetadata", "ImageSize", "MediaCatalog", "ResponsiveBackground",
    "InMemoryMediaCatalog", "RestMediaCatalog", "SqlMediaCatalog",
    "DEFAULT_SIZE_LABELS", "FULL_SIZE", "VIEWPORT_SIZES",
    "clean_url", "resolve_responsive_background",
]
