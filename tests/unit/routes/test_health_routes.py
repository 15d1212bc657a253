import pytest

from tests.support.helpers import login, register


@pytest.mark.unit
def test_healthz_reports_store_and_uploads(client):
    resp = client.get("/healthz")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["status"] == "ok"
    assert body["checks"]["user_store"] == "ok"
    assert body["checks"]["uploads"] == "ok"
    assert body["checks"]["youtube"] == "configured"


@pytest.mark.unit
def test_healthz_degrades_on_corrupt_store(client, storage_paths):
    with open(storage_paths["USERS_DB_PATH"], "w", encoding="utf-8") as fh:
        fh.write("{not json")
    resp = client.get("/healthz")
    assert resp.status_code == 503
    assert resp.get_json()["status"] == "degraded"


@pytest.mark.unit
def test_readyz(client):
    assert client.get("/readyz").get_json() == {"status": "ready"}


@pytest.mark.unit
def test_metrics_expose_auth_counters(client):
    register(client)
    login(client)
    resp = client.get("/metrics")
    assert resp.status_code == 200
    text = resp.get_data(as_text=True)
    assert "playlist_manager_auth_events_total" in text
