import requests

import fetch_joke
from jokebox.models import Category

from conftest import joke_body


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self.payload


def test_fetch_joke_normalizes_category_response(monkeypatch):
    calls = []

    def fake_get(url, timeout=None):
        calls.append(url)
        return FakeResponse([joke_body(9, setup="S", punchline="P", type="dad")])

    monkeypatch.setattr(fetch_joke.requests, "get", fake_get)
    joke = fetch_joke.fetch_joke(Category.DAD)

    assert joke == {"id": 9, "type": "dad", "setup": "S", "punchline": "P"}
    assert calls[0].endswith("/jokes/dad/random")


def test_fetch_joke_reports_errors(monkeypatch):
    monkeypatch.setattr(fetch_joke.requests, "get", lambda url, timeout=None: FakeResponse({}, 500))
    assert "error" in fetch_joke.fetch_joke()

    monkeypatch.setattr(fetch_joke.requests, "get", lambda url, timeout=None: FakeResponse({"id": 1}))
    assert fetch_joke.fetch_joke() == {"error": "Invalid joke data"}
