"""Catalogue en mémoire — utile pour les tests et les previews hors CMS."""
from typing import Dict, Optional

from .base import AttachmentMetadata, ImageSize


class InMemoryMediaCatalog:
    """
    Médiathèque dict-based.

    Usage:
        >>> catalog = InMemoryMediaCatalog()
        >>> catalog.add(42, url="/up/hero.jpg", width=1600, sizes={
        ...     "medium": ImageSize(url="/up/hero-400.jpg", width=400),
        ... })
        >>> catalog.get_url(42, "medium")
        '/up/hero-400.jpg'
    """

    def __init__(self):
        self._urls: Dict[int, Dict[str, str]] = {}
        self._meta: Dict[int, AttachmentMetadata] = {}

    def add(
        self,
        image_id: int,
        url: Optional[str] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        sizes: Optional[Dict[str, ImageSize]] = None,
    ) -> None:
        """Ajoute (ou remplace) une image. `url` = taille "full"."""
        sizes = dict(sizes or {})
        urls = {label: s.url for label, s in sizes.items() if s.url}
        if url:
            urls["full"] = url
        self._urls[image_id] = urls
        self._meta[image_id] = AttachmentMetadata(width=width, height=height, sizes=sizes)

    def remove(self, image_id: int) -> None:
        self._urls.pop(image_id, None)
        self._meta.pop(image_id, None)

    def get_url(self, image_id: int, size: str) -> Optional[str]:
        return self._urls.get(image_id, {}).get(size)

    def get_metadata(self, image_id: int) -> Optional[AttachmentMetadata]:
        return self._meta.get(image_id)
