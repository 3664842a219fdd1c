"""Snippets API: owner-scoped CRUD and search."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.auth.dependencies import get_current_user
from app.db import get_db
from app.infra.logging_config import get_logger
from app.models.snippet import Snippet
from app.models.user import User
from app.routers.utils.dependencies import (
    get_owned_snippet_by_id,
    get_search_criteria,
)
from app.schemas.snippet import (
    SearchCriteria,
    SnippetCreate,
    SnippetRead,
    SnippetUpdate,
)
from app.services.snippet_search_service import SnippetSearchService
from app.services.snippet_service import SnippetService

logger = get_logger("snippets_router")

router = APIRouter(
    prefix="/snippets",
    tags=["snippets"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[SnippetRead])
def list_snippets(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> List[Snippet]:
    """List the caller's snippets, newest first."""
    return SnippetService(db).get_snippets(current_user.id)


@router.get("/search", response_model=List[SnippetRead])
def search_snippets(
    criteria: SearchCriteria = Depends(get_search_criteria),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> List[Snippet]:
    """Search the caller's snippets by text, language and tag."""
    results = SnippetSearchService(db).search(current_user.id, criteria)
    logger.debug("Search %s returned %d snippets", criteria, len(results))
    return results


@router.post("", response_model=SnippetRead, status_code=201)
def create_snippet(
    data: SnippetCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Snippet:
    """Create a snippet; tags are merged with inferred tags."""
    return SnippetService(db).create_snippet(current_user.id, data)


@router.get("/{id}", response_model=SnippetRead)
def get_snippet(
    snippet: Snippet = Depends(get_owned_snippet_by_id),
) -> Snippet:
    """Get one of the caller's snippets by ID."""
    return snippet


@router.put("/{id}", response_model=SnippetRead)
def update_snippet(
    data: SnippetUpdate,
    snippet: Snippet = Depends(get_owned_snippet_by_id),
    db: Session = Depends(get_db),
) -> Snippet:
    """Replace a snippet's fields."""
    return SnippetService(db).update_snippet(snippet.id, snippet.owner_id, data)


@router.delete("/{id}", status_code=204)
def delete_snippet(
    snippet: Snippet = Depends(get_owned_snippet_by_id),
    db: Session = Depends(get_db),
) -> None:
    """Delete one of the caller's snippets."""
    SnippetService(db).delete_snippet(snippet.id, snippet.owner_id)
