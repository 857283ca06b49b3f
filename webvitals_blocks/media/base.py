"""
Protocol MediaCatalog — interface pluggable pour la médiathèque (mémoire, SQL, REST…).
Les métadonnées suivent la forme des attachments du CMS hôte.
"""
from typing import Dict, Optional, Protocol, runtime_checkable
from pydantic import BaseModel, Field


class ImageSize(BaseModel):
    """Variante pré-calculée d'une image (thumbnail, medium, large…)."""
    width: Optional[int] = None
    height: Optional[int] = None
    file: Optional[str] = None
    url: Optional[str] = None


class AttachmentMetadata(BaseModel):
    width: Optional[int] = None
    height: Optional[int] = None
    file: Optional[str] = None
    sizes: Dict[str, ImageSize] = Field(default_factory=dict)

    def size_width(self, label: str) -> Optional[int]:
        size = self.sizes.get(label)
        return size.width if size else None


class ResponsiveBackground(BaseModel):
    """Résultat éphémère du resolver — jamais persisté."""
    srcset: str = ""
    sizes: str = ""
    src: str = ""

    @classmethod
    def empty(cls) -> "ResponsiveBackground":
        return cls()


@runtime_checkable
class MediaCatalog(Protocol):
    def get_url(self, image_id: int, size: str) -> Optional[str]: ...
    def get_metadata(self, image_id: int) -> Optional[AttachmentMetadata]: ...
