"""Tests for snippet schemas."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError

from app.constants.languages import Language
from app.schemas.snippet import SearchCriteria, SnippetCreate, SnippetRead


def test_create_accepts_api_field_name():
    data = SnippetCreate.model_validate(
        {"title": "  Title  ", "code": "x", "programmingLanguage": "go"}
    )
    assert data.title == "Title"
    assert data.programming_language == Language.GO
    assert data.tags is None


def test_create_blank_description_becomes_none():
    data = SnippetCreate(
        title="t", code="x", programming_language="go", description="   "
    )
    assert data.description is None


@pytest.mark.parametrize(
    "payload",
    [
        {"code": "x", "programmingLanguage": "go"},
        {"title": " ", "code": "x", "programmingLanguage": "go"},
        {"title": "t", "programmingLanguage": "go"},
        {"title": "t", "code": "x"},
        {"title": "t", "code": "x", "programmingLanguage": "Go"},
        {"title": "t", "code": "x", "programmingLanguage": "go", "tags": [""]},
    ],
)
def test_create_rejects_invalid_payloads(payload):
    with pytest.raises(ValidationError):
        SnippetCreate.model_validate(payload)


def test_create_keeps_tag_case_and_whitespace():
    data = SnippetCreate(
        title="t", code="x", programming_language="go", tags=[" Loop ", "loop"]
    )
    assert data.tags == [" Loop ", "loop"]


def test_search_criteria_query_params():
    criteria = SearchCriteria.model_validate(
        {"query": "sort", "programmingLanguage": "python", "tag": "loop"}
    )
    assert criteria.to_query_params() == {
        "query": "sort",
        "programmingLanguage": "python",
        "tag": "loop",
    }
    assert not criteria.is_empty


def test_search_criteria_empty():
    assert SearchCriteria().is_empty
    assert SearchCriteria().to_query_params() == {}


def test_read_serializes_camel_case_field_names():
    snippet = SnippetRead(
        id=uuid4(),
        owner_id=uuid4(),
        title="t",
        code="x",
        programming_language=Language.GO,
        created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
        updated_at=datetime(2026, 1, 2, tzinfo=timezone.utc),
    )
    body = snippet.model_dump(mode="json", by_alias=True)
    assert {"ownerId", "programmingLanguage", "createdAt", "updatedAt"} <= set(body)
    assert not {"owner_id", "created_at", "updated_at"} & set(body)
    assert SnippetRead.model_validate(body) == snippet
