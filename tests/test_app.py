import pytest
from fastapi.testclient import TestClient

from readmark.app import app, get_annotator
from readmark.pipeline import Annotator

from tests.conftest import ARTICLE, BrokenResolver


@pytest.fixture
def client(vocabulary):
    app.dependency_overrides[get_annotator] = lambda: Annotator(vocabulary)
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_analyze(client):
    resp = client.post("/analyze", json={"text": ARTICLE})
    assert resp.status_code == 200
    html = resp.json()["html"]
    assert html.startswith("<style>")
    assert '<span class="phrase familiar">' in html
    assert '<span class="word ignore">bananas</span>' in html


def test_analyze_rejects_blank_text(client):
    resp = client.post("/analyze", json={"text": "   "})
    assert resp.status_code == 400


def test_count(client):
    resp = client.post("/count", json={"text": ARTICLE})
    assert resp.json() == {"unknown": 2, "learning": 2, "ignored": 1}


def test_expressions(client):
    resp = client.post("/expressions", json={"text": ARTICLE})
    assert [e["text"] for e in resp.json()["expressions"]] == ["like apples", "eat", "i"]


def test_resolver_failure_is_bad_gateway():
    app.dependency_overrides[get_annotator] = lambda: Annotator(BrokenResolver())
    try:
        resp = TestClient(app).post("/analyze", json={"text": ARTICLE})
    finally:
        app.dependency_overrides.clear()
    assert resp.status_code == 502
    assert "store unreachable" in resp.json()["detail"]
