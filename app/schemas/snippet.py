"""Pydantic schemas for snippets and snippet search."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, List, Optional
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from app.constants.languages import Language

TagName = Annotated[str, Field(min_length=1, max_length=100)]


class SnippetWrite(BaseModel):
    """Fields shared by create and update requests."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1, max_length=256)
    code: str = Field(..., min_length=1)
    programming_language: Language = Field(
        ...,
        validation_alias=AliasChoices("programmingLanguage", "programming_language"),
        serialization_alias="programmingLanguage",
    )
    description: str | None = None
    tags: List[TagName] | None = Field(
        None, description="User-supplied tags, merged with inferred tags"
    )

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title must not be blank")
        return v

    @field_validator("code")
    @classmethod
    def validate_code(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("code must not be blank")
        return v

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None


class SnippetCreate(SnippetWrite):
    """Request schema for creating a snippet."""

    pass


class SnippetUpdate(SnippetWrite):
    """Request schema for replacing a snippet's fields."""

    pass


class SnippetRead(BaseModel):
    """Response schema for a snippet."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    owner_id: UUID = Field(
        ...,
        validation_alias=AliasChoices("ownerId", "owner_id"),
        serialization_alias="ownerId",
    )
    title: str
    code: str
    programming_language: Language = Field(
        ...,
        validation_alias=AliasChoices("programmingLanguage", "programming_language"),
        serialization_alias="programmingLanguage",
    )
    description: str | None = None
    tags: List[str] = Field(default_factory=list)
    created_at: datetime = Field(
        ...,
        validation_alias=AliasChoices("createdAt", "created_at"),
        serialization_alias="createdAt",
    )
    updated_at: datetime = Field(
        ...,
        validation_alias=AliasChoices("updatedAt", "updated_at"),
        serialization_alias="updatedAt",
    )


class SearchCriteria(BaseModel):
    """Optional free text, language and tag; all supplied criteria must hold."""

    model_config = ConfigDict(populate_by_name=True)

    text: Optional[str] = Field(None, alias="query")
    language: Optional[Language] = Field(None, alias="programmingLanguage")
    tag: Optional[str] = None

    @field_validator("text", "tag")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v

    @property
    def is_empty(self) -> bool:
        return self.text is None and self.language is None and self.tag is None

    def to_query_params(self) -> dict[str, str]:
        """Query parameters for the search endpoint, omitting absent criteria."""
        params: dict[str, str] = {}
        if self.text is not None:
            params["query"] = self.text
        if self.language is not None:
            params["programmingLanguage"] = self.language.value
        if self.tag is not None:
            params["tag"] = self.tag
        return params
