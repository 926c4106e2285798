import uuid
from sqlalchemy import func, ForeignKey
from app.extensions import db

class Note(db.Model):
    __tablename__ = "notes"

    # identifiant opaque: la couche web ne le génère ni ne l'interprète
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = db.Column(db.String(100), nullable=False)
    content = db.Column(db.Text, nullable=False)

    owner_id = db.Column(db.String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    owner = db.relationship("User", back_populates="notes", lazy="joined")

    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
