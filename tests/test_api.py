from fastapi.testclient import TestClient

from textcase_api import config
from textcase_api.main import app

client = TestClient(app)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_list_styles():
    response = client.get("/api/styles")
    assert response.status_code == 200
    styles = {item["value"]: item for item in response.json()}
    assert len(styles) == 8
    assert styles["nyt"]["label"] == "NY Times"
    assert styles["ama"]["capitalizes_last_word"] is False


def test_convert_uses_defaults():
    response = client.post("/api/convert", json={"text": "lord of the rings"})
    assert response.status_code == 200
    body = response.json()
    assert body["style"] == "chicago"
    assert body["title_case"] == "Lord of the Rings"
    assert body["sentence_case"] == "Lord of the rings"
    assert body["lower_case"] == "lord of the rings"
    assert body["upper_case"] == "LORD OF THE RINGS"


def test_convert_with_options():
    response = client.post(
        "/api/convert",
        json={"text": "NASA launches the rocket", "style": "ap", "keep_all_caps": False},
    )
    assert response.status_code == 200
    assert response.json()["title_case"] == "Nasa Launches the Rocket"


def test_convert_title():
    response = client.post("/api/convert/title", json={"text": "up and down with love", "style": "nyt"})
    assert response.status_code == 200
    assert response.json() == {"text": "Up and Down With Love"}


def test_convert_blank_text():
    response = client.post("/api/convert", json={"text": "  "})
    assert response.status_code == 200
    assert response.json()["title_case"] == ""


def test_unknown_style_rejected():
    response = client.post("/api/convert", json={"text": "x", "style": "klingon"})
    assert response.status_code == 422


def test_oversize_input_rejected(monkeypatch):
    monkeypatch.setattr(config.settings, "max_input_chars", 10)
    response = client.post("/api/convert", json={"text": "x" * 11})
    assert response.status_code == 413
    assert "limit is 10" in response.json()["detail"]


def test_serve_runs_uvicorn_with_configured_address(monkeypatch):
    import uvicorn

    from textcase_api.main import serve

    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda target, **kwargs: calls.append((target, kwargs)))
    monkeypatch.setattr(config.settings, "port", 9001)
    serve()
    assert calls[0][0] is app
    assert calls[0][1]["host"] == "127.0.0.1"
    assert calls[0][1]["port"] == 9001
