"""
Model: RagDocument
Table: rag_documents

One uploaded or API-added document: its extracted text, labels, tags
and the embedding vector computed when it was stored.
"""

# Python Packages
import uuid
from datetime import datetime, timezone
from sqlalchemy import func

# Database
from ..config.database import db





def _new_document_id() -> str:
    return str(uuid.uuid4())


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)





class RagDocument(db.Model):
    """ A stored document with its embedding... """

    # Table Name
    __tablename__ = "rag_documents"

    id = db.Column(db.String(36), primary_key = True, default = _new_document_id)

    content = db.Column(db.Text, nullable = False)

    file_name = db.Column(db.String(255), nullable = False, index = True)

    file_size = db.Column(
        db.Integer,
        nullable = False,
        default = 0,
        doc = "Size of the raw upload in bytes. 0 for documents added as JSON."
    )

    file_type = db.Column(db.String(255), nullable = False, default = "text/plain")

    storage_path = db.Column(
        db.String(500),
        nullable = False,
        default = "",
        doc = "S3 key of the raw file. Empty when no file was uploaded."
    )

    source = db.Column(db.String(255), nullable = False)

    tags = db.Column(db.JSON, nullable = False, default = list)

    embedding = db.Column(
        db.JSON,
        nullable = True,
        doc = "Embedding vector as a JSON float array (E5-Mistral, 4096 dims)."
    )

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = _utc_now,
        server_default = func.now()
    )

    updated_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = _utc_now,
        server_default = func.now(),
        onupdate = _utc_now
    )

    def __repr__(self):
        return f"<RagDocument {self.file_name}>"
