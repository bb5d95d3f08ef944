"""
Shared fixtures.

The environment is filled in before docrag is imported: constants are read
at import time and a missing required key is a startup error.
"""

import os

os.environ.update({
    "APP_ENV": "testing",
    "APP_SECRET_KEY": "test-secret",
    "DATABASE_URL": "sqlite://",
    "AWS_ACCESS_KEY_ID": "test",
    "AWS_SECRET_ACCESS_KEY": "test",
    "AWS_REGION": "us-east-1",
    "AWS_S3_BUCKET_NAME": "docrag-test",
    "SAMBANOVA_API_KEY": "test-key",
    "AI_PROVIDER": "sambanova",
    "RATE_LIMIT_DELAY_MS": "0",
    "MAX_REQUESTS_PER_MINUTE": "1000",
    "ALLOW_KNOWLEDGE_ONLY_ANSWERS": "False",
    "LOG_LEVEL": "WARNING",
})

from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest

from docrag.documents.services.document_store import DocumentRecord


# ---------------------------------------------------------------------------
# EMBEDDINGS
# ---------------------------------------------------------------------------

# Each keyword owns one axis; a text's vector is the sum of its keywords.
KEYWORD_AXES = ["revenue", "employee", "weather"]


def keyword_vector(text):
    lowered = text.lower()
    return [1.0 if keyword in lowered else 0.0 for keyword in KEYWORD_AXES]


@pytest.fixture
def embedding_service():
    """Mock embedding provider with deterministic keyword vectors."""
    service = MagicMock()
    service.embed.side_effect = lambda texts: [keyword_vector(text) for text in texts]
    service.generate_embedding.side_effect = keyword_vector
    return service


@pytest.fixture
def chat_service():
    """Mock generation provider."""
    service = MagicMock()
    service.generate.return_value = "Revenue is 100."
    return service


# ---------------------------------------------------------------------------
# DOCUMENTS
# ---------------------------------------------------------------------------

_BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def make_document(document_id, name, tags=(), content="", source=None, embedding=None, file_size=0):
    """Build a DocumentRecord; embedding defaults to the keyword vector of content."""
    if embedding is None:
        embedding = keyword_vector(content)

    return DocumentRecord(
        id=document_id,
        name=name,
        source=source if source is not None else name,
        content=content,
        tags=tuple(tags),
        embedding=tuple(embedding),
        file_size=file_size,
        created_at=_BASE_TIME + timedelta(minutes=int(document_id) if document_id.isdigit() else 0),
    )


@pytest.fixture
def sample_documents():
    return [
        make_document("1", "income_statement.csv", ["financial"], "Revenue: 100, Profit: 20"),
        make_document("2", "balance_sheet.csv", ["financial"], "Assets: 500"),
        make_document("3", "Team Roster.md", ["hr"], "Employee count: 42", source="people/roster"),
        make_document("4", "forecast.txt", ["weather", "ops"], "Weather tomorrow: rain"),
    ]


# ---------------------------------------------------------------------------
# FLASK APP
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def app():
    from docrag.app import app as flask_app

    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture
def database(app):
    """Fresh tables and an empty document cache for every test."""
    from docrag.config.database import db
    from docrag.documents.services.document_cache import document_cache

    with app.app_context():
        db.drop_all()
        db.create_all()
        document_cache.invalidate()

        yield db

        db.session.remove()
        db.drop_all()

    document_cache.invalidate()


@pytest.fixture
def s3_uploader():
    uploader = MagicMock()
    uploader.upload_bytes.side_effect = lambda data, key, content_type=None: f"s3://docrag-test/{key}"
    return uploader


@pytest.fixture
def s3_deleter():
    return MagicMock()


@pytest.fixture
def client(app, database, monkeypatch, embedding_service, chat_service, s3_uploader, s3_deleter):
    """Test client with every external provider replaced by a mock."""
    from docrag.query.services import query_service
    from docrag.documents.services import (
        add_documents_service,
        delete_document_service,
        upload_document_service,
    )

    monkeypatch.setattr(query_service, "EmbeddingService", lambda: embedding_service)
    monkeypatch.setattr(query_service, "ChatService", lambda: chat_service)
    monkeypatch.setattr(upload_document_service, "EmbeddingService", lambda: embedding_service)
    monkeypatch.setattr(upload_document_service, "S3Uploader", lambda: s3_uploader)
    monkeypatch.setattr(upload_document_service, "S3DeleteService", lambda: s3_deleter)
    monkeypatch.setattr(add_documents_service, "EmbeddingService", lambda: embedding_service)
    monkeypatch.setattr(delete_document_service, "S3DeleteService", lambda: s3_deleter)

    return app.test_client()
