"""Catalogue SQL — lit la médiathèque SQLite (tables attachments / attachment_sizes)."""
from typing import Optional

from sqlalchemy.orm import Session

from ..database import db_get_attachment, db_get_attachment_size
from .base import AttachmentMetadata, ImageSize
from .resolver import FULL_SIZE


class SqlMediaCatalog:
    """La taille "full" est l'attachment lui-même ; les autres viennent de attachment_sizes."""

    def __init__(self, db: Session):
        self.db = db

    def get_url(self, image_id: int, size: str) -> Optional[str]:
        size_row = db_get_attachment_size(self.db, image_id, size)
        if size_row:
            return size_row.url
        if size == FULL_SIZE:
            attachment = db_get_attachment(self.db, image_id)
            return attachment.url if attachment else None
        return None

    def get_metadata(self, image_id: int) -> Optional[AttachmentMetadata]:
        attachment = db_get_attachment(self.db, image_id)
        if not attachment:
            return None
        return AttachmentMetadata(
            width=attachment.width,
            height=attachment.height,
            file=attachment.file,
            sizes={
                s.label: ImageSize(width=s.width, height=s.height, file=s.file, url=s.url)
                for s in attachment.sizes
            },
        )
