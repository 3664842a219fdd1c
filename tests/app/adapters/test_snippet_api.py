"""Tests for SnippetApiClient."""

from unittest.mock import MagicMock
from uuid import uuid4

import pytest
import requests

from app.adapters.snippet_api import SnippetApiClient, SnippetApiError
from app.constants.languages import Language
from app.schemas.snippet import SearchCriteria, SnippetCreate


def snippet_payload(**overrides):
    payload = {
        "id": str(uuid4()),
        "ownerId": str(uuid4()),
        "title": "Loop",
        "code": "for x in xs: print(x)",
        "programmingLanguage": "python",
        "description": None,
        "tags": ["debugging", "loop"],
        "createdAt": "2026-01-01T12:00:00",
        "updatedAt": "2026-01-01T12:00:00",
    }
    payload.update(overrides)
    return payload


def fake_response(status_code=200, json_data=None):
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status_code
    if json_data is None:
        resp.json.side_effect = ValueError("no body")
    else:
        resp.json.return_value = json_data
    return resp


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session):
    return SnippetApiClient("http://api.test/", token="tok", session=session)


def test_list_snippets_sends_bearer_token(api, session):
    session.request.return_value = fake_response(json_data=[snippet_payload()])
    snippets = api.list_snippets()
    assert len(snippets) == 1
    assert snippets[0].programming_language == Language.PYTHON
    method, url = session.request.call_args.args
    assert method == "GET"
    assert url == "http://api.test/snippets"
    assert session.request.call_args.kwargs["headers"]["Authorization"] == "Bearer tok"


def test_search_passes_only_supplied_criteria(api, session):
    session.request.return_value = fake_response(json_data=[])
    api.search_snippets(SearchCriteria(language=Language.GO, tag="entry-point"))
    method, url = session.request.call_args.args
    assert url == "http://api.test/snippets/search"
    assert session.request.call_args.kwargs["params"] == {
        "programmingLanguage": "go",
        "tag": "entry-point",
    }


def test_create_sends_api_field_names(api, session):
    session.request.return_value = fake_response(201, snippet_payload())
    data = SnippetCreate(
        title="Loop",
        code="for x in xs: print(x)",
        programming_language=Language.PYTHON,
        tags=["mine"],
    )
    api.create_snippet(data)
    body = session.request.call_args.kwargs["json"]
    assert body == {
        "title": "Loop",
        "code": "for x in xs: print(x)",
        "programmingLanguage": "python",
        "tags": ["mine"],
    }


def test_error_uses_server_detail(api, session):
    session.request.return_value = fake_response(
        403, {"detail": "Not authorized to access this snippet"}
    )
    with pytest.raises(SnippetApiError) as exc_info:
        api.get_snippet(uuid4())
    assert exc_info.value.status_code == 403
    assert exc_info.value.message == "Not authorized to access this snippet"


def test_error_without_body_uses_default_message(api, session):
    session.request.return_value = fake_response(500)
    with pytest.raises(SnippetApiError, match="Failed to delete snippet"):
        api.delete_snippet(uuid4())


def test_validation_error_detail_list(api, session):
    session.request.return_value = fake_response(
        422, {"detail": [{"loc": ["body", "title"], "msg": "Field required"}]}
    )
    with pytest.raises(SnippetApiError, match="Field required"):
        api.create_snippet(
            SnippetCreate(title="t", code="c", programming_language=Language.OTHER)
        )


def test_transport_error_is_wrapped(api, session):
    session.request.side_effect = requests.ConnectionError("refused")
    with pytest.raises(SnippetApiError) as exc_info:
        api.list_snippets()
    assert exc_info.value.status_code is None
    assert exc_info.value.message == "Failed to load snippets"


def test_malformed_payload_is_an_error(api, session):
    session.request.return_value = fake_response(json_data=[{"id": "nope"}])
    with pytest.raises(SnippetApiError, match="Failed to load snippets"):
        api.list_snippets()
