"""LinkedIn REST API client.

Follows the same live/mock pattern as the other platform clients: in mock
mode nothing leaves the process, calls are recorded locally and mock
identifiers are returned.

Identity comes from the unversioned OpenID ``/v2/userinfo`` endpoint. Posts
and images go through the versioned Rest.li ``/rest`` API, which needs the
``LinkedIn-Version`` header (YYYYMM) on every call.
"""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
from dataclasses import dataclass
from email.message import Message
from typing import Any

from linkedin_syndicator.content import ArticleContent
from linkedin_syndicator.fetch import FetchFunc, fetch_bytes

logger = logging.getLogger(__name__)

DEFAULT_API_VERSION = "202601"
IMAGE_TIMEOUT = 15.0
PERMALINK_TEMPLATE = "https://www.linkedin.com/feed/update/{id}/"


@dataclass
class LinkedInConfig:
    access_token: str
    posts_api_version: str = DEFAULT_API_VERSION
    api_url: str = "https://api.linkedin.com"
    timeout: float = 30.0


@dataclass(frozen=True)
class AuthorIdentity:
    id: str
    name: str
    urn: str


class LinkedInAPIError(RuntimeError):
    """A LinkedIn API call was rejected or could not be made."""

    def __init__(self, message: str, status: int | None = None, reason: str = "") -> None:
        self.status = status
        self.reason = reason
        super().__init__(message)


def permalink_for(entity_id: str) -> str:
    return PERMALINK_TEMPLATE.format(id=entity_id)


class LinkedInClient:
    """Client for the LinkedIn identity, image and post endpoints."""

    def __init__(
        self,
        config: LinkedInConfig,
        live: bool = False,
        fetch_func: FetchFunc | None = None,
    ) -> None:
        self.config = config
        self._live = live
        self._fetch = fetch_func or fetch_bytes
        self._posted: list[dict[str, Any]] = []
        self._uploads: list[dict[str, Any]] = []

    def _auth_headers(self) -> dict[str, str]:
        if not self.config.access_token:
            raise LinkedInAPIError(
                "No LinkedIn access token configured", status=401, reason="Unauthorized",
            )
        return {"Authorization": f"Bearer {self.config.access_token}"}

    def _send(self, req: urllib.request.Request) -> tuple[bytes, Message]:
        try:
            with urllib.request.urlopen(req, timeout=self.config.timeout) as resp:
                return resp.read(), resp.headers
        except urllib.error.HTTPError as exc:
            body = exc.read().decode("utf-8", errors="replace")
            raise LinkedInAPIError(
                f"LinkedIn API error {exc.code}: {body}",
                status=exc.code,
                reason=str(exc.reason or ""),
            ) from exc
        except urllib.error.URLError as exc:
            raise LinkedInAPIError(f"LinkedIn connection error: {exc.reason}") from exc

    def _call(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
        versioned: bool = True,
    ) -> tuple[dict[str, Any], Message]:
        """Make a JSON API call, returning the decoded body and response headers."""
        headers = self._auth_headers()
        if versioned:
            headers["LinkedIn-Version"] = self.config.posts_api_version
            headers["X-Restli-Protocol-Version"] = "2.0.0"
        data = None
        if payload is not None:
            data = json.dumps(payload).encode("utf-8")
            headers["Content-Type"] = "application/json"
        req = urllib.request.Request(
            f"{self.config.api_url}{path}", data=data, headers=headers, method=method,
        )
        raw, resp_headers = self._send(req)
        body = json.loads(raw.decode("utf-8")) if raw.strip() else {}
        if not isinstance(body, dict):
            body = {}
        return body, resp_headers

    def get_identity(self) -> AuthorIdentity:
        """Resolve the token owner's identity. Raises LinkedInAPIError on failure."""
        if self._live:
            body, _ = self._call("GET", "/v2/userinfo", versioned=False)
        else:
            body = {"sub": "mock-person", "name": "Mock User"}

        subject = body.get("sub")
        if not subject:
            raise LinkedInAPIError(
                "LinkedIn userinfo returned no subject identifier",
                status=401,
                reason="Unauthorized",
            )
        return AuthorIdentity(
            id=subject, name=body.get("name", ""), urn=f"urn:li:person:{subject}",
        )

    def upload_image(self, owner_urn: str, image_url: str) -> str | None:
        """Upload the image at ``image_url`` and return its image URN.

        Best effort: every failure is logged and returns None.
        """
        if not self._live:
            handle = f"urn:li:image:mock-{len(self._uploads) + 1}"
            self._uploads.append({"owner": owner_urn, "source": image_url, "image": handle})
            return handle

        try:
            image = self._fetch(image_url, IMAGE_TIMEOUT)
            body, _ = self._call(
                "POST",
                "/rest/images?action=initializeUpload",
                {"initializeUploadRequest": {"owner": owner_urn}},
            )
            value = body.get("value") or {}
            upload_url = value.get("uploadUrl")
            handle = value.get("image")
            if not upload_url or not handle:
                raise LinkedInAPIError("initializeUpload response lacks uploadUrl or image")

            headers = self._auth_headers()
            headers["Content-Type"] = "application/octet-stream"
            self._send(urllib.request.Request(
                upload_url, data=image, headers=headers, method="PUT",
            ))
        except Exception as exc:
            logger.warning("Image upload of %s failed: %s", image_url, exc)
            return None

        self._uploads.append({"owner": owner_urn, "source": image_url, "image": handle})
        return handle

    def _envelope(self, author_urn: str, commentary: str) -> dict[str, Any]:
        return {
            "author": author_urn,
            "commentary": commentary,
            "visibility": "PUBLIC",
            "distribution": {
                "feedDistribution": "MAIN_FEED",
                "targetEntities": [],
                "thirdPartyDistributionChannels": [],
            },
            "lifecycleState": "PUBLISHED",
            "isReshareDisabledByAuthor": False,
        }

    def _create_post(self, entity: dict[str, Any]) -> str:
        if self._live:
            body, headers = self._call("POST", "/rest/posts", entity)
            entity_id = headers.get("x-restli-id") or body.get("id")
            if not entity_id:
                raise LinkedInAPIError("LinkedIn did not return a created post id")
        else:
            entity_id = f"urn:li:share:mock-{len(self._posted) + 1}"

        self._posted.append({"id": entity_id, "entity": entity})
        return permalink_for(entity_id)

    def create_text_post(self, author_urn: str, commentary: str) -> str:
        """Create a text-only post and return its permalink."""
        return self._create_post(self._envelope(author_urn, commentary))

    def create_article_post(
        self, author_urn: str, commentary: str, article: ArticleContent,
    ) -> str:
        """Create a post with an article card and return its permalink."""
        entity = self._envelope(author_urn, commentary)
        entity["content"] = {"article": article.to_payload()}
        return self._create_post(entity)

    @property
    def live(self) -> bool:
        return self._live

    @property
    def post_count(self) -> int:
        return len(self._posted)

    @property
    def upload_count(self) -> int:
        return len(self._uploads)
