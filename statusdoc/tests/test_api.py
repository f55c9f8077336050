import logging
from pathlib import Path
from uuid import UUID, uuid4

import pytest
from fastapi import Depends
from fastapi.testclient import TestClient

from statusdoc.app.api.deps import get_application_store, get_document_generator
from statusdoc.app.config import get_settings
from statusdoc.app.main import app
from statusdoc.app.schemas.application import ApplicationState
from statusdoc.app.services.generator import ApplicationDocumentGenerator
from statusdoc.app.services.store import InMemoryApplicationStore
from statusdoc.app.utils.hashing import compute_document_hash
from statusdoc.tests.fixtures.applications import make_application, make_settings
from statusdoc.tests.fixtures.fakes import (
    FailingViewGenerator,
    FakePdfGenerator,
    FakeViewGenerator,
    RecordingTemplatePaths,
)

PDF_PAYLOAD = b"%PDF-1.7 fake"

FIXTURES = Path(__file__).parent / "fixtures"
ACTIVATED_ID = UUID("6f1c2a9e-4b0d-4c57-9a0e-2f4b8d6c1a02")


@pytest.fixture
def applications():
    return [
        make_application(state=ApplicationState.PENDING),
        make_application(state=ApplicationState.REJECTED),
    ]


@pytest.fixture
def client(applications):
    settings = make_settings(template_dir="/srv/templates")
    generator = ApplicationDocumentGenerator(
        store=InMemoryApplicationStore(applications),
        template_paths=RecordingTemplatePaths(),
        view_generator=FakeViewGenerator(),
        settings=settings,
        pdf_generator=FakePdfGenerator(PDF_PAYLOAD),
        logger=logging.getLogger("statusdoc.tests.api"),
    )

    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_document_generator] = lambda: generator
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_document_is_streamed_as_pdf(client, applications):
    application_id = applications[0].id

    response = client.get(f"/applications/{application_id}/document")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.content == PDF_PAYLOAD
    assert response.headers["x-document-hash"] == compute_document_hash(PDF_PAYLOAD)
    assert f"application-{application_id}.pdf" in response.headers["content-disposition"]


def test_unknown_application_is_404(client):
    response = client.get(f"/applications/{uuid4()}/document")

    assert response.status_code == 404


def test_unsupported_state_is_404(client, applications):
    response = client.get(f"/applications/{applications[1].id}/document")

    assert response.status_code == 404


def test_invalid_application_id_is_422(client):
    response = client.get("/applications/not-a-uuid/document")

    assert response.status_code == 422


def test_collaborator_failure_is_500(applications):
    settings = make_settings()
    generator = ApplicationDocumentGenerator(
        store=InMemoryApplicationStore(applications),
        template_paths=RecordingTemplatePaths(),
        view_generator=FailingViewGenerator(RuntimeError("renderer down")),
        settings=settings,
        pdf_generator=FakePdfGenerator(),
        logger=logging.getLogger("statusdoc.tests.api"),
    )
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_document_generator] = lambda: generator

    try:
        response = TestClient(app).get(f"/applications/{applications[0].id}/document")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert "renderer down" not in response.text


def test_templates_are_listed(client):
    response = client.get("/templates")

    assert response.status_code == 200
    names = {item["name"] for item in response.json()}
    assert names == {
        "PendingApplication",
        "ActivatedApplication",
        "InReviewApplication",
    }


def test_template_schema_describes_the_view_model(client):
    response = client.get("/templates/schema/InReviewApplication")

    assert response.status_code == 200
    schema = response.json()
    assert schema["title"] == "InReviewApplicationViewModel"
    assert schema["additionalProperties"] is False
    assert {"in_review_message", "portfolio_total_amount", "kind"} <= set(schema["properties"])


def test_unknown_template_schema_is_404(client):
    response = client.get("/templates/schema/RejectedApplication")

    assert response.status_code == 404
    assert "RejectedApplication" in response.json()["detail"]


def test_store_is_seeded_from_overridden_settings():
    settings = make_settings(applications_file=FIXTURES / "applications.json")

    def generator_over_seeded_store(
        store: InMemoryApplicationStore = Depends(get_application_store),
    ) -> ApplicationDocumentGenerator:
        return ApplicationDocumentGenerator(
            store=store,
            template_paths=RecordingTemplatePaths(),
            view_generator=FakeViewGenerator(),
            settings=settings,
            pdf_generator=FakePdfGenerator(PDF_PAYLOAD),
            logger=logging.getLogger("statusdoc.tests.api"),
        )

    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_document_generator] = generator_over_seeded_store

    try:
        response = TestClient(app).get(f"/applications/{ACTIVATED_ID}/document")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200
    assert response.content == PDF_PAYLOAD
