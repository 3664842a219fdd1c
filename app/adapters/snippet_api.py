"""HTTP client for the snippets API, used by the collection view model."""

from __future__ import annotations

from typing import Any, List, Optional
from uuid import UUID

import requests
from pydantic import ValidationError

from app.infra.logging_config import get_logger
from app.schemas.snippet import SearchCriteria, SnippetRead, SnippetWrite

logger = get_logger("snippet_api")

SNIPPETS_PATH = "/snippets"
TIMEOUT_SECONDS = 30


class SnippetApiError(Exception):
    """A snippets API call failed. ``status_code`` is None for transport errors."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _detail_message(resp: requests.Response) -> Optional[str]:
    try:
        body = resp.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    detail = body.get("detail") or body.get("message")
    if isinstance(detail, str):
        return detail
    if isinstance(detail, list) and detail:
        first = detail[0]
        if isinstance(first, dict) and first.get("msg"):
            return str(first["msg"])
    return None


class SnippetApiClient:
    """Calls the snippets API as one authenticated user."""

    def __init__(
        self,
        base_url: str,
        token: str,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._token = token
        self._session = session or requests.Session()

    def _request(
        self,
        method: str,
        path: str,
        failure_message: str,
        **kwargs: Any,
    ) -> requests.Response:
        url = f"{self.base_url}{SNIPPETS_PATH}{path}"
        headers = {
            "Accept": "application/json",
            "Authorization": f"Bearer {self._token}",
        }
        try:
            resp = self._session.request(
                method, url, headers=headers, timeout=TIMEOUT_SECONDS, **kwargs
            )
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise SnippetApiError(failure_message) from e

        if resp.status_code >= 400:
            raise SnippetApiError(
                _detail_message(resp) or failure_message,
                status_code=resp.status_code,
            )
        return resp

    def _snippet(self, resp: requests.Response, failure_message: str) -> SnippetRead:
        try:
            return SnippetRead.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise SnippetApiError(failure_message, resp.status_code) from e

    def _snippets(
        self, resp: requests.Response, failure_message: str
    ) -> List[SnippetRead]:
        try:
            return [SnippetRead.model_validate(item) for item in resp.json()]
        except (TypeError, ValueError, ValidationError) as e:
            raise SnippetApiError(failure_message, resp.status_code) from e

    def list_snippets(self) -> List[SnippetRead]:
        message = "Failed to load snippets"
        return self._snippets(self._request("GET", "", message), message)

    def get_snippet(self, snippet_id: UUID) -> SnippetRead:
        message = "Failed to load snippet"
        return self._snippet(self._request("GET", f"/{snippet_id}", message), message)

    def create_snippet(self, data: SnippetWrite) -> SnippetRead:
        message = "Failed to create snippet"
        resp = self._request(
            "POST",
            "",
            message,
            json=data.model_dump(mode="json", by_alias=True, exclude_none=True),
        )
        return self._snippet(resp, message)

    def update_snippet(self, snippet_id: UUID, data: SnippetWrite) -> SnippetRead:
        message = "Failed to update snippet"
        resp = self._request(
            "PUT",
            f"/{snippet_id}",
            message,
            json=data.model_dump(mode="json", by_alias=True, exclude_none=True),
        )
        return self._snippet(resp, message)

    def delete_snippet(self, snippet_id: UUID) -> None:
        self._request("DELETE", f"/{snippet_id}", "Failed to delete snippet")

    def search_snippets(self, criteria: SearchCriteria) -> List[SnippetRead]:
        message = "Failed to search snippets"
        resp = self._request(
            "GET", "/search", message, params=criteria.to_query_params()
        )
        return self._snippets(resp, message)
