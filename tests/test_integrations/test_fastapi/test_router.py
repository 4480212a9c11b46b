"""Tests for the FastAPI action target router."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from fabric_claims.config._config import EnrollmentConfig
from fabric_claims.hook._hook import FabricClaimHook
from fabric_claims.integrations.fastapi import (
    DEFAULT_ACTION_PATH,
    configure_claim_hook,
    create_claims_router,
    get_claim_hook,
    install_error_handlers,
)

DEFAULT_VALUE = {
    "id": "replacedWithSubject",
    "type": "client",
    "affiliation": "org1.department1",
    "attrs": [{"name": "hf.Registrar.Roles", "value": "client", "ecert": True}],
}


def _make_app(**router_kwargs: object) -> FastAPI:
    app = FastAPI()
    install_error_handlers(app)
    app.include_router(create_claims_router(**router_kwargs))  # type: ignore[arg-type]
    return app


@pytest.fixture()
def client(isolated_config_state: EnrollmentConfig) -> TestClient:
    return TestClient(_make_app())


class TestActionTarget:
    def test_returns_append_claims(self, client: TestClient) -> None:
        response = client.post(DEFAULT_ACTION_PATH, json={"subject": "alice"})
        assert response.status_code == 200
        assert response.json() == {"append_claims": [{"key": "fabric", "value": DEFAULT_VALUE}]}

    def test_subject_not_substituted(self, client: TestClient) -> None:
        response = client.post(DEFAULT_ACTION_PATH, json={"subject": "bob"})
        assert response.json()["append_claims"][0]["value"]["id"] == "replacedWithSubject"

    def test_get_not_allowed(self, client: TestClient) -> None:
        assert client.get(DEFAULT_ACTION_PATH).status_code == 405

    def test_non_object_body_is_400(self, client: TestClient) -> None:
        response = client.post(DEFAULT_ACTION_PATH, json=["not", "an", "object"])
        assert response.status_code == 400
        assert "JSON object" in response.json()["detail"]

    def test_malformed_json_is_400(self, client: TestClient) -> None:
        response = client.post(
            DEFAULT_ACTION_PATH,
            content=b"{not json",
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["detail"].endswith("got malformed JSON")

    def test_null_body_is_400(self, client: TestClient) -> None:
        response = client.post(
            DEFAULT_ACTION_PATH,
            content=b"null",
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["detail"].endswith("got NoneType")


class TestHookResolution:
    def test_explicit_hook(self, isolated_config_state: EnrollmentConfig) -> None:
        hook = FabricClaimHook(EnrollmentConfig(claim_key="hlf"))
        client = TestClient(_make_app(hook=hook))
        body = client.post(DEFAULT_ACTION_PATH, json={}).json()
        assert body["append_claims"][0]["key"] == "hlf"

    def test_hook_from_app_state(self, isolated_config_state: EnrollmentConfig) -> None:
        app = _make_app()
        configure_claim_hook(app, FabricClaimHook(EnrollmentConfig(affiliation="org2")))
        body = TestClient(app).post(DEFAULT_ACTION_PATH, json={}).json()
        assert body["append_claims"][0]["value"]["affiliation"] == "org2"

    def test_dependency_override(self, isolated_config_state: EnrollmentConfig) -> None:
        app = _make_app()
        app.dependency_overrides[get_claim_hook] = lambda: FabricClaimHook(
            subject_resolver=lambda ctx: ctx["subject"]
        )
        body = TestClient(app).post(DEFAULT_ACTION_PATH, json={"subject": "carol"}).json()
        assert body["append_claims"][0]["value"]["id"] == "carol"

    def test_custom_path(self, isolated_config_state: EnrollmentConfig) -> None:
        client = TestClient(_make_app(path="/hooks/fabric"))
        assert client.post("/hooks/fabric", json={}).status_code == 200
