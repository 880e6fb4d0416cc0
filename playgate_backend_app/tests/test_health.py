import pytest


@pytest.mark.django_db
def test_health_ok(client):
    resp = client.get("/health/")
    assert resp.status_code == 200
    assert resp.json() == {
        "status": "ok",
        "components": {"database": "ok", "cache": "ok"},
    }


@pytest.mark.django_db
def test_health_reports_cache_failure(client, monkeypatch):
    def boom(*args, **kwargs):
        raise ConnectionError("redis down")

    monkeypatch.setattr("playgate_backend_app.views.cache.set", boom)
    resp = client.get("/health/")

    assert resp.status_code == 503
    assert resp.json()["components"]["cache"] == "error: redis down"


def test_health_is_get_only(client):
    assert client.post("/health/").status_code == 405
