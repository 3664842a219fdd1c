"""Service for owner-scoped snippet CRUD with tag inference on write."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from app.constants.languages import Language
from app.core.errors import (
    AuthorizationError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from app.core.tag_inference import infer_tags
from app.core.tag_merge import merge_tags, needs_reinference
from app.infra.logging_config import get_logger
from app.models.mixins import utcnow
from app.models.snippet import Snippet
from app.schemas.snippet import SnippetCreate, SnippetUpdate, SnippetWrite

logger = get_logger("snippets")


def validate_write(data: SnippetWrite) -> Language:
    """
    Check required fields on a write request and return its language.

    Schemas built with model_construct skip pydantic validation and end up here.
    """
    if not (data.title or "").strip():
        raise ValidationError("title", "title is required")
    if not (data.code or "").strip():
        raise ValidationError("code", "code is required")
    try:
        return Language(data.programming_language)
    except ValueError as e:
        raise ValidationError(
            "programmingLanguage",
            f"programmingLanguage must be one of: {', '.join(Language)}",
        ) from e


@contextmanager
def persistence_guard(db: Session, action: str) -> Iterator[None]:
    """Roll back and raise PersistenceError when the store fails."""
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Snippet store failed during %s", action)
        raise PersistenceError(cause=e) from e


class SnippetService:
    """Manages a user's snippets. Every call is scoped to ``owner_id``."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def get_snippet(self, snippet_id: UUID) -> Snippet | None:
        """Fetch a snippet by ID regardless of owner."""
        with persistence_guard(self.db, "lookup"):
            return self.db.query(Snippet).filter(Snippet.id == snippet_id).first()

    def get_owned_snippet(self, snippet_id: UUID, owner_id: UUID) -> Snippet:
        """
        Fetch a snippet the caller owns.

        Raises NotFoundError if it does not exist and AuthorizationError if it
        belongs to someone else.
        """
        snippet = self.get_snippet(snippet_id)
        if snippet is None:
            raise NotFoundError()
        if snippet.owner_id != owner_id:
            logger.warning(
                "User %s attempted to access snippet %s owned by another user",
                owner_id,
                snippet_id,
            )
            raise AuthorizationError()
        return snippet

    def get_snippets_query(self, owner_id: UUID) -> Query[Snippet]:
        """Owner's snippets, newest first."""
        return (
            self.db.query(Snippet)
            .filter(Snippet.owner_id == owner_id)
            .order_by(Snippet.created_at.desc())
        )

    def get_snippets(self, owner_id: UUID) -> List[Snippet]:
        with persistence_guard(self.db, "list"):
            return self.get_snippets_query(owner_id).all()

    def create_snippet(self, owner_id: UUID, data: SnippetCreate) -> Snippet:
        """Create a snippet; stored tags are user tags plus inferred tags."""
        language = validate_write(data)
        inferred = infer_tags(data.code, language)
        snippet = Snippet(
            owner_id=owner_id,
            title=data.title,
            code=data.code,
            programming_language=language.value,
            description=data.description,
        )
        snippet.replace_tags(merge_tags(data.tags, inferred))
        with persistence_guard(self.db, "create"):
            self.db.add(snippet)
            self.db.commit()
            self.db.refresh(snippet)
        logger.info("Created snippet %s for user %s", snippet.id, owner_id)
        return snippet

    def update_snippet(
        self,
        snippet_id: UUID,
        owner_id: UUID,
        data: SnippetUpdate,
    ) -> Snippet:
        """
        Replace a snippet's fields.

        Tags are re-inferred only when code or language changed. Otherwise the
        supplied tag list replaces the stored one as is; clients send the full
        edited set.
        """
        new_language = validate_write(data).value
        snippet = self.get_owned_snippet(snippet_id, owner_id)

        if needs_reinference(
            snippet.code, snippet.programming_language, data.code, new_language
        ):
            tags = merge_tags(data.tags, infer_tags(data.code, new_language))
        else:
            tags = merge_tags(data.tags, ())

        snippet.title = data.title
        snippet.code = data.code
        snippet.programming_language = new_language
        snippet.description = data.description
        snippet.replace_tags(tags)
        snippet.updated_at = utcnow()

        with persistence_guard(self.db, "update"):
            self.db.commit()
            self.db.refresh(snippet)
        logger.info("Updated snippet %s", snippet.id)
        return snippet

    def delete_snippet(self, snippet_id: UUID, owner_id: UUID) -> None:
        snippet = self.get_owned_snippet(snippet_id, owner_id)
        with persistence_guard(self.db, "delete"):
            self.db.delete(snippet)
            self.db.commit()
        logger.info("Deleted snippet %s", snippet_id)
