"""SQLite — init + session + CRUD helpers (médiathèque)"""
import os
from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from .models import AttachmentDB, AttachmentInput, AttachmentSizeDB, Base

DATA_DIR = Path(os.getenv("WEBVITALS_DATA_DIR", str(Path.cwd() / "data")))

DB_PATH      = os.getenv("WEBVITALS_DB_PATH", str(DATA_DIR / "webvitals_blocks.db"))
ENGINE       = create_engine(f"sqlite:///{DB_PATH}", connect_args={"check_same_thread": False})
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=ENGINE)


def init_db(engine=None):
    engine = engine or ENGINE
    if engine is ENGINE:
        Path(DB_PATH).parent.mkdir(parents=True, exist_ok=True)
    Base.metadata.create_all(bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ── Attachment ──
def db_create_attachment(db: Session, data: AttachmentInput) -> AttachmentDB:
    obj = AttachmentDB(
        url=data.url, alt=data.alt, file=data.file,
        width=data.width, height=data.height,
        sizes=[
            AttachmentSizeDB(label=label, url=s.url, file=s.file, width=s.width, height=s.height)
            for label, s in data.sizes.items()
        ],
    )
    db.add(obj); db.commit(); db.refresh(obj); return obj

def db_get_attachment(db: Session, attachment_id: int) -> Optional[AttachmentDB]:
    return db.query(AttachmentDB).filter_by(attachment_id=attachment_id).first()

def db_get_attachment_size(db: Session, attachment_id: int, label: str) -> Optional[AttachmentSizeDB]:
    return db.query(AttachmentSizeDB).filter_by(attachment_id=attachment_id, label=label).first()

def db_delete_attachment(db: Session, attachment_id: int) -> bool:
    obj = db_get_attachment(db, attachment_id)
    if not obj:
        return False
    db.delete(obj); db.commit(); return True
