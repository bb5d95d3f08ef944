"""
Document Store

Handles:
    - Reading documents (newest first) as immutable DocumentRecords
    - Inserting documents with their embedding vectors
    - Deleting one / all documents

The database is the source of truth; DocumentCache sits on top of it.
"""

# Python Packages
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple
from loguru import logger

# Database
from ...config.database import db

# Models
from ...models.rag_document import RagDocument

# Exceptions
from ...util.exceptions import ServiceException

# App Messages
from ...util import messages





@dataclass(frozen = True)
class DocumentRecord:
    """ Read-only snapshot of one stored document... """

    id: str
    name: str
    source: str
    content: str
    tags: Tuple[str, ...] = ()
    embedding: Optional[Tuple[float, ...]] = field(default = None, repr = False)
    file_size: int = 0
    file_type: str = "text/plain"
    storage_path: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_model(cls, document: RagDocument) -> "DocumentRecord":
        return cls(
            id = document.id,
            name = document.file_name,
            source = document.source,
            content = document.content,
            tags = tuple(document.tags or ()),
            embedding = tuple(document.embedding) if document.embedding is not None else None,
            file_size = document.file_size or 0,
            file_type = document.file_type,
            storage_path = document.storage_path or "",
            created_at = document.created_at,
            updated_at = document.updated_at
        )





class DocumentStore:

    def list_all(self) -> Tuple[DocumentRecord, ...]:
        """
        All documents, newest first
        """

        documents = RagDocument.query.order_by(RagDocument.created_at.desc()).all()
        return tuple(DocumentRecord.from_model(document) for document in documents)



    def fingerprint(self) -> Tuple:
        """
        (row count, newest updated_at). Any insert, delete or ORM edit
        changes it; DocumentCache compares it to spot writes made elsewhere.
        """

        count, latest = db.session.query(
            db.func.count(RagDocument.id),
            db.func.max(RagDocument.updated_at)
        ).one()

        return count, latest



    def get_by_id(self, document_id: str) -> Optional[DocumentRecord]:
        document = db.session.get(RagDocument, document_id)
        return DocumentRecord.from_model(document) if document else None



    def exists(self, document_id: str) -> bool:
        return db.session.get(RagDocument, document_id) is not None



    def insert(self, fields: Dict, vector: Optional[Sequence[float]]) -> DocumentRecord:
        """
        Insert one document

        Args:
            fields (dict): RagDocument column values (content, file_name, source, tags, ...)
            vector (list[float]): Embedding of fields["content"]

        Returns:
            DocumentRecord: The stored row
        """

        return self.insert_many([(fields, vector)])[0]



    def insert_many(self, rows: List[Tuple[Dict, Optional[Sequence[float]]]]) -> List[DocumentRecord]:
        """
        Insert several documents in one transaction; all or nothing
        """

        try:
            documents = []

            for fields, vector in rows:
                document = RagDocument(
                    **fields,
                    embedding = list(vector) if vector is not None else None
                )
                db.session.add(document)
                documents.append(document)

            db.session.commit()

            return [DocumentRecord.from_model(document) for document in documents]

        except Exception as error:
            db.session.rollback()
            logger.error(f"❌ Document insert failed: {error}")

            raise ServiceException(
                error_code = "DOCUMENTS_ADD_FAILED",
                message = messages.ERROR["DOCUMENTS_ADD_FAILED"],
                details = str(error),
                status_code = 500
            )



    def delete_by_id(self, document_id: str) -> bool:
        """
        Delete one document

        Returns:
            bool: False when the id does not exist
        """

        try:
            document = db.session.get(RagDocument, document_id)

            if not document:
                return False

            db.session.delete(document)
            db.session.commit()
            return True

        except Exception as error:
            db.session.rollback()

            raise ServiceException(
                error_code = "DOCUMENT_DELETE_FAILED",
                message = messages.ERROR["DOCUMENT_DELETE_FAILED"],
                details = str(error),
                status_code = 500
            )



    def clear_all(self) -> int:
        """
        Delete every document

        Returns:
            int: Number of rows removed
        """

        try:
            deleted = RagDocument.query.delete()
            db.session.commit()
            return deleted

        except Exception as error:
            db.session.rollback()

            raise ServiceException(
                error_code = "DOCUMENTS_CLEAR_FAILED",
                message = messages.ERROR["DOCUMENTS_CLEAR_FAILED"],
                details = str(error),
                status_code = 500
            )
