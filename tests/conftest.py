"""Shared fixtures: an in-memory stand-in for urllib.request.urlopen."""

from __future__ import annotations

import io
import json
import urllib.error
import urllib.request
from email.message import Message
from http import HTTPStatus
from typing import Any

import pytest

API = "https://api.linkedin.com"
USERINFO_URL = f"{API}/v2/userinfo"
IMAGES_URL = f"{API}/rest/images?action=initializeUpload"
POSTS_URL = f"{API}/rest/posts"
UPLOAD_URL = "https://www.linkedin.com/dms-uploads/upload-target"


def _headers(values: dict[str, str]) -> Message:
    msg = Message()
    for key, value in values.items():
        msg[key] = value
    return msg


class _FakeResponse:
    def __init__(self, status: int, body: bytes, headers: dict[str, str]) -> None:
        self.status = status
        self._body = body
        self.headers = _headers(headers)

    def read(self) -> bytes:
        return self._body

    def __enter__(self) -> _FakeResponse:
        return self

    def __exit__(self, *exc: Any) -> bool:
        return False


class FakeTransport:
    """Routes requests by (method, url) to canned responses and records them."""

    def __init__(self) -> None:
        self._routes: dict[tuple[str, str], tuple[int, bytes, dict[str, str]]] = {}
        self.requests: list[urllib.request.Request] = []

    def add(
        self,
        method: str,
        url: str,
        status: int = 200,
        body: Any = b"",
        headers: dict[str, str] | None = None,
    ) -> None:
        if isinstance(body, (dict, list)):
            body = json.dumps(body).encode("utf-8")
        elif isinstance(body, str):
            body = body.encode("utf-8")
        self._routes[(method, url)] = (status, body, headers or {})

    def urlopen(self, req: urllib.request.Request, timeout: float | None = None) -> _FakeResponse:
        self.requests.append(req)
        key = (req.get_method(), req.full_url)
        if key not in self._routes:
            raise urllib.error.URLError(f"no route for {key}")
        status, body, headers = self._routes[key]
        if status >= 400:
            raise urllib.error.HTTPError(
                req.full_url, status, HTTPStatus(status).phrase,
                _headers(headers), io.BytesIO(body),
            )
        return _FakeResponse(status, body, headers)

    def calls(self, method: str, url: str) -> list[urllib.request.Request]:
        return [r for r in self.requests if r.get_method() == method and r.full_url == url]

    def json_body(self, req: urllib.request.Request) -> dict[str, Any]:
        return json.loads(req.data.decode("utf-8"))

    # Common LinkedIn routes

    def identity(self, sub: str = "abc123", name: str = "Ada Lovelace") -> None:
        self.add("GET", USERINFO_URL, body={"sub": sub, "name": name})

    def created_post(self, entity_id: str = "urn:li:share:7001") -> None:
        self.add("POST", POSTS_URL, status=201, headers={"x-restli-id": entity_id})

    def image_upload(self, image_url: str, handle: str = "urn:li:image:C4E10") -> None:
        self.add("GET", image_url, body=b"\x89PNG fake image bytes")
        self.add("POST", IMAGES_URL, body={
            "value": {
                "uploadUrlExpiresAt": 1767225600000,
                "uploadUrl": UPLOAD_URL,
                "image": handle,
            },
        })
        self.add("PUT", UPLOAD_URL, status=201)


@pytest.fixture
def transport(monkeypatch: pytest.MonkeyPatch) -> FakeTransport:
    fake = FakeTransport()
    monkeypatch.setattr(urllib.request, "urlopen", fake.urlopen)
    return fake
