import pytest

import frontend.web as webmod
from frontend.web import app as flask_app
from wordpredict import PredictionModel


@pytest.fixture
def client(pack_root, monkeypatch):
    model = PredictionModel(root=pack_root)
    model.initialize()
    monkeypatch.setattr(webmod, "_model", model)
    return flask_app.test_client()


@pytest.mark.e2e
def test_health(client):
    data = client.get("/api/health").get_json()
    assert data == {"ok": True, "initialized": True, "language": "en"}


@pytest.mark.e2e
def test_predict_plain_and_scored(client):
    assert client.get("/api/predict?q=cat").get_json() == ["sat", "ran"]
    rows = client.get("/api/predict?q=the&confidence=1").get_json()
    assert rows == [{"word": "cat", "confidence": 1.0, "frequency": 2}]


@pytest.mark.e2e
def test_complete_plain_and_scored(client):
    assert client.get("/api/complete?q=ca").get_json() == ["car", "cart", "cat"]
    rows = client.get("/api/complete?q=ca&confidence=true").get_json()
    assert [r["word"] for r in rows] == ["car", "cat", "cart"]
    for r in rows:
        assert set(r) == {"word", "confidence", "prefixMatch"}


@pytest.mark.e2e
def test_unknown_query_is_empty_list(client):
    assert client.get("/api/complete?q=xyz").get_json() == []
    assert client.get("/api/predict").get_json() == []


@pytest.mark.e2e
def test_metrics(client):
    data = client.get("/api/metrics").get_json()
    assert data["data_stats"]["unique_words_count"] == 4
    assert set(data) == {"initialization_time", "preprocessing_times", "memory_usage", "data_stats"}


@pytest.mark.e2e
def test_uninitialized_model_returns_503(pack_root, monkeypatch):
    client = flask_app.test_client()
    monkeypatch.setattr(webmod, "_model", None)
    assert client.get("/api/predict?q=the").status_code == 503
    assert client.get("/api/health").get_json()["initialized"] is False

    monkeypatch.setattr(webmod, "_model", PredictionModel(root=pack_root))
    rv = client.get("/api/complete?q=ca")
    assert rv.status_code == 503
    assert "not initialized" in rv.get_json()["error"]
