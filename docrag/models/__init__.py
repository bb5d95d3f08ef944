"""
Models Package
Registers the SQLAlchemy ORM models so Flask-SQLAlchemy and Flask-Migrate see them.
"""

from .rag_document import RagDocument

__all__ = [
    "RagDocument",
]
