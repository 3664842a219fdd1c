from typing import Optional
from uuid import UUID

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from app.auth.dependencies import get_current_user
from app.constants.languages import Language
from app.db import get_db
from app.models.snippet import Snippet
from app.models.user import User
from app.schemas.snippet import SearchCriteria
from app.services.snippet_service import SnippetService


def get_owned_snippet_by_id(
    id: UUID,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Snippet:
    """FastAPI dependency to get a snippet the caller owns (404/403 otherwise)."""
    return SnippetService(db).get_owned_snippet(id, current_user.id)


def get_search_criteria(
    query: Optional[str] = Query(None, description="Free text"),
    programming_language: Optional[Language] = Query(
        None, alias="programmingLanguage"
    ),
    tag: Optional[str] = Query(None),
) -> SearchCriteria:
    """FastAPI dependency collecting search query parameters."""
    return SearchCriteria(text=query, language=programming_language, tag=tag)
