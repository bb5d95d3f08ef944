"""
End-to-end tests through the Flask test client.

Storage, embedding and generation providers are mocks (see conftest.client);
the database is an in-memory sqlite.
"""

from io import BytesIO

import pytest


NO_RELEVANT = "I couldn't find relevant information in the uploaded documents to answer your question."


def upload(client, content, file_name, tags=None, content_type=None):
    file_part = (BytesIO(content), file_name, content_type) if content_type else (BytesIO(content), file_name)
    data = {"file": file_part}
    if tags is not None:
        data["tags"] = tags

    return client.post("/documents/upload", data=data, content_type="multipart/form-data")


def add_documents(client, *documents):
    return client.post("/documents", json={"documents": list(documents)})


# ---------------------------------------------------------------------------
# UPLOAD
# ---------------------------------------------------------------------------


class TestUpload:
    def test_upload_then_query_by_tag(self, client, chat_service, s3_uploader):
        response = upload(client, b"Revenue: 100", "income.txt", tags='["financial"]')

        assert response.status_code == 201
        body = response.get_json()
        assert body["status"] == "success"
        assert body["data"]["document"]["tags"] == ["financial"]
        assert body["data"]["document"]["fileName"] == "income.txt"
        assert body["data"]["contentPreview"] == "Revenue: 100"

        key = s3_uploader.upload_bytes.call_args.args[1]
        assert key.startswith("documents/")
        assert key.endswith("-income.txt")

        response = client.post("/query", json={"prompt": "What is revenue?", "tags": ["financial"]})

        assert response.status_code == 200
        data = response.get_json()["data"]
        assert data["selectedCount"] == 1
        assert any("Tags" in description for description in data["selectionDescriptions"])
        assert data["responseText"] == "Revenue is 100."
        assert data["confidence"] == 0.8
        assert "Revenue: 100" in chat_service.generate.call_args.args[0]

    def test_comma_separated_tags(self, client):
        response = upload(client, b"Assets: 500", "balance.txt", tags="financial, 2024")

        assert response.get_json()["data"]["document"]["tags"] == ["financial", "2024"]

    def test_missing_file(self, client, s3_uploader):
        response = client.post("/documents/upload", data={"tags": "x"}, content_type="multipart/form-data")

        assert response.status_code == 400
        assert response.get_json()["message"] == "No file uploaded"
        s3_uploader.upload_bytes.assert_not_called()

    def test_unsupported_type(self, client, s3_uploader):
        response = upload(client, b"\x7fELF", "tool.exe", content_type="application/x-msdownload")

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "FILE_TYPE_NOT_SUPPORTED"
        s3_uploader.upload_bytes.assert_not_called()

    def test_file_over_size_limit(self, client, monkeypatch, s3_uploader):
        from docrag.base import constants

        monkeypatch.setattr(constants, "MAX_UPLOAD_SIZE_BYTES", 10)

        response = upload(client, b"x" * 20, "big.txt")

        assert response.status_code == 413
        assert response.get_json()["error_code"] == "FILE_TOO_LARGE"
        s3_uploader.upload_bytes.assert_not_called()

    def test_invalid_tags(self, client):
        response = upload(client, b"x", "a.txt", tags='[1, 2]')

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "INVALID_TAGS"

    def test_extraction_failure_removes_raw_file(self, client, s3_uploader, s3_deleter):
        response = upload(client, b"not a zip file", "broken.docx")

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "TEXT_EXTRACTION_FAILED"
        key = s3_uploader.upload_bytes.call_args.args[1]
        s3_deleter.delete_file.assert_called_once_with(key)
        assert client.get("/documents").get_json()["data"]["totalDocuments"] == 0

    def test_embedding_failure_is_bad_gateway(self, client, embedding_service):
        embedding_service.generate_embedding.side_effect = RuntimeError("embedding endpoint down")

        response = upload(client, b"Revenue: 100", "income.txt")

        assert response.status_code == 502
        assert response.get_json()["error_code"] == "EMBEDDING_FAILED"

    def test_blank_file_is_stored_without_embedding(self, client, embedding_service):
        response = upload(client, b"   ", "blank.txt")

        assert response.status_code == 201
        embedding_service.generate_embedding.assert_not_called()
        view = client.get("/documents/view").get_json()["data"]
        assert view["documents"][0]["has_embedding"] is False


# ---------------------------------------------------------------------------
# JSON ADD
# ---------------------------------------------------------------------------


class TestAddDocuments:
    def test_add_then_query_by_name(self, client, embedding_service):
        response = add_documents(
            client,
            {"id": "doc-1", "content": "Employee count: 42", "metadata": {"source": "hr/roster.md", "tags": ["hr"]}},
            {"content": "Weather tomorrow: rain", "metadata": {"source": "forecast.txt"}},
        )

        assert response.status_code == 201
        data = response.get_json()["data"]
        assert data["documentsAdded"] == 2
        assert data["documentIds"][0] == "doc-1"
        assert data["totalDocuments"] == 2
        embedding_service.embed.assert_called_once_with(["Employee count: 42", "Weather tomorrow: rain"])

        response = client.post("/query", json={"prompt": "How many employees?", "documentNames": ["ROSTER"]})

        data = response.get_json()["data"]
        assert data["selectedCount"] == 1
        assert data["selectedPreview"][0]["id"] == "doc-1"

    def test_short_embedding_batch_adds_nothing(self, client, embedding_service):
        embedding_service.embed.side_effect = lambda texts: [[1.0, 0.0, 0.0]]

        response = add_documents(
            client,
            {"content": "Revenue: 100", "metadata": {"source": "income.csv"}},
            {"content": "Weather tomorrow: rain", "metadata": {"source": "forecast.txt"}},
        )

        assert response.status_code == 502
        assert response.get_json()["error_code"] == "EMBEDDING_FAILED"
        assert client.get("/documents").get_json()["data"]["totalDocuments"] == 0

    def test_duplicate_id_is_rejected(self, client):
        document = {"id": "doc-1", "content": "a", "metadata": {"source": "a.txt"}}
        add_documents(client, document)

        response = add_documents(client, document)

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "DOCUMENT_ID_EXISTS"

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"documents": []},
            {"documents": [{"content": "", "metadata": {"source": "a"}}]},
            {"documents": [{"content": "a", "metadata": {}}]},
            {"documents": [{"content": "a", "metadata": {"source": "a", "tags": "x"}}]},
        ],
    )
    def test_invalid_body(self, client, embedding_service, body):
        response = client.post("/documents", json=body)

        assert response.status_code == 400
        embedding_service.embed.assert_not_called()


# ---------------------------------------------------------------------------
# LIST / VIEW / GET
# ---------------------------------------------------------------------------


class TestReadDocuments:
    def test_list_view_and_get(self, client):
        add_documents(
            client,
            {"id": "doc-1", "content": "Revenue: 100", "metadata": {"source": "income.csv", "tags": ["financial"]}},
        )

        listing = client.get("/documents").get_json()["data"]
        assert listing["totalDocuments"] == 1
        assert listing["availableTags"] == ["financial"]
        assert listing["documents"][0]["name"] == "income.csv"

        view = client.get("/documents/view").get_json()["data"]
        assert view["summary"]["total_documents"] == 1
        assert view["documents"][0]["content_info"]["length"] == len("Revenue: 100")

        document = client.get("/documents/doc-1").get_json()["data"]
        assert document["content"] == "Revenue: 100"
        assert document["tags"] == ["financial"]

    def test_get_unknown_document(self, client):
        response = client.get("/documents/missing")

        assert response.status_code == 404
        assert response.get_json()["message"] == "Document not found"


# ---------------------------------------------------------------------------
# DELETE / CLEAR
# ---------------------------------------------------------------------------


class TestDelete:
    def test_delete_removes_row_and_file(self, client, s3_uploader, s3_deleter):
        document_id = upload(client, b"Revenue: 100", "income.txt").get_json()["data"]["document"]["id"]
        key = s3_uploader.upload_bytes.call_args.args[1]

        response = client.delete(f"/documents/{document_id}")

        assert response.status_code == 200
        assert response.get_json()["data"]["document_id"] == document_id
        s3_deleter.delete_file.assert_called_once_with(key)
        assert client.get(f"/documents/{document_id}").status_code == 404

    def test_storage_failure_still_deletes_row(self, client, s3_deleter):
        document_id = upload(client, b"Revenue: 100", "income.txt").get_json()["data"]["document"]["id"]
        s3_deleter.delete_file.side_effect = RuntimeError("AccessDenied")

        response = client.delete(f"/documents/{document_id}")

        assert response.status_code == 200
        assert client.get("/documents").get_json()["data"]["totalDocuments"] == 0

    def test_delete_unknown_document(self, client):
        response = client.delete("/documents/missing")

        assert response.status_code == 404

    def test_clear(self, client, s3_deleter):
        add_documents(
            client,
            {"content": "a", "metadata": {"source": "a.txt"}},
            {"content": "b", "metadata": {"source": "b.txt"}},
        )

        response = client.delete("/documents")

        assert response.status_code == 200
        assert response.get_json()["data"]["deleted"] == 2
        s3_deleter.delete_prefix.assert_called_once_with("documents/")
        assert client.get("/documents").get_json()["data"]["totalDocuments"] == 0


# ---------------------------------------------------------------------------
# QUERY
# ---------------------------------------------------------------------------


class TestQuery:
    def test_use_all_with_no_documents(self, client, chat_service):
        response = client.post("/query", json={"prompt": "Anything?", "useAllDocuments": True})

        assert response.status_code == 200
        data = response.get_json()["data"]
        assert data["selectedCount"] == 0
        assert data["responseText"] == NO_RELEVANT
        chat_service.generate.assert_not_called()

    @pytest.mark.parametrize(
        "body",
        [
            None,
            {"prompt": ""},
            {"prompt": "   "},
            {"prompt": 42},
            {"prompt": "q", "tags": "financial"},
            {"prompt": "q", "useAllDocuments": "yes"},
            {"prompt": "q", "outputFormatDirective": ["json"]},
        ],
    )
    def test_invalid_query_makes_no_provider_calls(self, client, chat_service, embedding_service, body):
        response = client.post("/query", json=body)

        assert response.status_code == 400
        assert response.get_json()["status"] == "error"
        chat_service.generate.assert_not_called()
        embedding_service.generate_embedding.assert_not_called()

    def test_provider_failure_is_degraded_not_an_error(self, client, chat_service):
        add_documents(client, {"content": "Revenue: 100", "metadata": {"source": "income.csv"}})
        chat_service.generate.side_effect = RuntimeError("provider down")

        response = client.post("/query", json={"prompt": "What is revenue?"})

        assert response.status_code == 200
        data = response.get_json()["data"]
        assert data["outcome"] == "degraded"
        assert data["confidence"] == 0.0
        assert "provider down" in data["responseText"]

    def test_ranked_query(self, client, chat_service):
        add_documents(
            client,
            {"id": "r", "content": "Revenue: 100", "metadata": {"source": "income.csv"}},
            {"id": "w", "content": "Weather tomorrow: rain", "metadata": {"source": "forecast.txt"}},
        )

        response = client.post("/query", json={"prompt": "What was revenue?", "rankBySimilarity": True})

        data = response.get_json()["data"]
        assert data["ranked"] is True
        assert [match["id"] for match in data["matches"]] == ["r"]
        assert "forecast.txt" not in chat_service.generate.call_args.args[0]

    def test_empty_tag_list_selects_nothing(self, client, chat_service):
        add_documents(client, {"content": "Revenue: 100", "metadata": {"source": "income.csv", "tags": ["financial"]}})

        response = client.post("/query", json={"prompt": "What is revenue?", "tags": []})

        data = response.get_json()["data"]
        assert data["selectedCount"] == 0
        assert data["responseText"] == NO_RELEVANT
        chat_service.generate.assert_not_called()

    def test_out_of_band_insert_becomes_visible(self, client, monkeypatch):
        from docrag.documents.services.document_cache import document_cache
        from docrag.documents.services.document_store import DocumentStore

        add_documents(client, {"content": "Revenue: 100", "metadata": {"source": "income.csv"}})
        monkeypatch.setattr(document_cache, "max_age_seconds", 3600)
        assert client.get("/documents").get_json()["data"]["totalDocuments"] == 1

        # Written straight to the database, as another worker would
        DocumentStore().insert(
            {"content": "Employee count: 42", "file_name": "roster.md", "source": "roster.md", "tags": ["hr"]},
            [0.0, 1.0, 0.0],
        )
        assert client.get("/documents").get_json()["data"]["totalDocuments"] == 1

        monkeypatch.setattr(document_cache, "max_age_seconds", 0)

        assert client.get("/documents").get_json()["data"]["totalDocuments"] == 2
        response = client.post("/query", json={"prompt": "How many employees?", "tags": ["hr"]})
        assert response.get_json()["data"]["selectedCount"] == 1


# ---------------------------------------------------------------------------
# SYSTEM
# ---------------------------------------------------------------------------


class TestSystem:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.get_json()["data"]
        assert data["message"] == "DocRAG API"
        assert data["models"]["provider"] == "sambanova"

    def test_stats(self, client):
        add_documents(client, {"content": "Revenue: 100", "metadata": {"source": "income.csv"}})

        data = client.get("/stats").get_json()["data"]

        assert data["documents"]["documentCount"] == 1
        assert data["documents"]["embeddedCount"] == 1
        assert set(data["rate_limiting"]) >= {"min_delay_ms", "max_requests_per_minute", "current_request_count"}


class TestStartup:
    @pytest.mark.parametrize("provider, api_key, error_code", [
        ("cohere", "", "UNSUPPORTED_AI_PROVIDER"),
        ("anthropic", "", "ANTHROPIC_KEY_MISSING"),
    ])
    def test_bad_provider_settings_stop_the_app(self, app, monkeypatch, provider, api_key, error_code):
        from docrag.app import create_app
        from docrag.base import constants
        from docrag.util.exceptions import ConfigurationException

        monkeypatch.setattr(constants, "AI_PROVIDER", provider)
        monkeypatch.setattr(constants, "ANTHROPIC_API_KEY", api_key)

        with pytest.raises(ConfigurationException) as error:
            create_app()

        assert error.value.error_code == error_code
