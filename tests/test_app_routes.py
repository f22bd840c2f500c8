import logging

from novaria_proxy.models.model_registry import MODEL_REGISTRY


def test_list_models_exposes_registry(client):
    r = client.get("/api/models")

    assert r.status_code == 200
    body = r.json()
    assert body["default"] == "default"
    keys = [m["key"] for m in body["models"]]
    assert keys == MODEL_REGISTRY.keys()
    flash = next(m for m in body["models"] if m["key"] == "gemini-2.0-flash")
    assert flash == {"key": "gemini-2.0-flash", "upstreamModel": "gemini-1.5-pro-latest", "supportsAttachments": True}


def test_health_reports_configured_client(client):
    r = client.get("/health")

    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_health_warns_without_api_key(client, stub_gemini):
    stub_gemini.configured = False

    r = client.get("/health")

    assert r.status_code == 200
    assert r.json()["status"] == "warning"


def test_root_lists_endpoints(client):
    r = client.get("/")

    assert r.status_code == 200
    assert r.json()["endpoints"]["generate"] == "/api/generate"


def test_unknown_path_uses_message_shape(client):
    r = client.get("/does-not-exist")

    assert r.status_code == 404
    assert r.json() == {"message": "Not Found"}


def test_access_log_records_requests(client, caplog):
    with caplog.at_level(logging.INFO, logger="NovariaProxy.AccessLog"):
        client.get("/api/models", headers={"X-Forwarded-For": "203.0.113.7, 10.0.0.1"})
        client.get("/health")

    access_lines = [r.getMessage() for r in caplog.records if r.name == "NovariaProxy.AccessLog"]
    assert len(access_lines) == 1
    assert access_lines[0].startswith("GET /api/models -> 200")
    assert "ip=203.0.113.7" in access_lines[0]
