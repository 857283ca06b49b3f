"""
Data models — Attachment, AttachmentSize
SQLAlchemy (SQLite) + Pydantic v2
"""
from datetime import datetime
from typing import Dict, List, Optional

import sqlalchemy as sa
from pydantic import BaseModel, Field
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


# ── ORM ────────────────────────────────────────────────────────────────

class Base(DeclarativeBase):
    pass


class AttachmentDB(Base):
    """Image de la médiathèque — url/width/height = taille "full"."""
    __tablename__ = "attachments"
    attachment_id: Mapped[int]           = mapped_column(sa.Integer, primary_key=True, autoincrement=True)
    url:           Mapped[str]           = mapped_column(sa.String, nullable=False)
    alt:           Mapped[str]           = mapped_column(sa.String, default="")
    file:          Mapped[Optional[str]] = mapped_column(sa.String, nullable=True)
    width:         Mapped[Optional[int]] = mapped_column(sa.Integer, nullable=True)
    height:        Mapped[Optional[int]] = mapped_column(sa.Integer, nullable=True)
    created_at:    Mapped[datetime]      = mapped_column(sa.DateTime, default=datetime.utcnow)

    sizes: Mapped[List["AttachmentSizeDB"]] = relationship(
        "AttachmentSizeDB", back_populates="attachment", cascade="all, delete-orphan",
    )


class AttachmentSizeDB(Base):
    """Variante pré-calculée (medium, large…) d'un attachment."""
    __tablename__ = "attachment_sizes"
    __table_args__ = (sa.UniqueConstraint("attachment_id", "label"),)
    size_id:       Mapped[int]           = mapped_column(sa.Integer, primary_key=True, autoincrement=True)
    attachment_id: Mapped[int]           = mapped_column(sa.Integer, sa.ForeignKey("attachments.attachment_id"), nullable=False)
    label:         Mapped[str]           = mapped_column(sa.String, nullable=False)
    url:           Mapped[str]           = mapped_column(sa.String, nullable=False)
    file:          Mapped[Optional[str]] = mapped_column(sa.String, nullable=True)
    width:         Mapped[Optional[int]] = mapped_column(sa.Integer, nullable=True)
    height:        Mapped[Optional[int]] = mapped_column(sa.Integer, nullable=True)

    attachment: Mapped["AttachmentDB"] = relationship("AttachmentDB", back_populates="sizes")


# ── PYDANTIC SCHEMAS ────────────────────────────────────────────────────

class AttachmentSizeInput(BaseModel):
    url:    str
    file:   Optional[str] = None
    width:  Optional[int] = Field(default=None, gt=0)
    height: Optional[int] = Field(default=None, gt=0)


class AttachmentInput(BaseModel):
    url:    str
    alt:    str                            = ""
    file:   Optional[str]                  = None
    width:  Optional[int]                  = Field(default=None, gt=0)
    height: Optional[int]                  = Field(default=None, gt=0)
    sizes:  Dict[str, AttachmentSizeInput] = Field(default_factory=dict)
