"""Search over one owner's snippets by free text, language and tag."""

from __future__ import annotations

from typing import List
from uuid import UUID

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session

from app.models.snippet import Snippet, SnippetTag
from app.schemas.snippet import SearchCriteria
from app.services.snippet_service import persistence_guard

SEARCHABLE_COLUMNS = (Snippet.title, Snippet.description, Snippet.code)


def _like_pattern(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class SnippetSearchService:
    """Builds and runs owner-scoped snippet queries. Supplied criteria are ANDed."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def build_query(self, owner_id: UUID, criteria: SearchCriteria) -> Query[Snippet]:
        """
        Query for snippets owned by ``owner_id`` matching ``criteria``.

        The text term is split on whitespace; a snippet matches when any term
        occurs (case-insensitive) in its title, description or code.
        """
        query = self.db.query(Snippet).filter(Snippet.owner_id == owner_id)

        if criteria.text is not None:
            terms = criteria.text.split()
            query = query.filter(
                or_(
                    *(
                        column.ilike(_like_pattern(term), escape="\\")
                        for term in terms
                        for column in SEARCHABLE_COLUMNS
                    )
                )
            )

        if criteria.language is not None:
            query = query.filter(
                Snippet.programming_language == criteria.language.value
            )

        if criteria.tag is not None:
            query = query.filter(Snippet.tag_rows.any(SnippetTag.name == criteria.tag))

        return query.order_by(Snippet.created_at.desc())

    def search(self, owner_id: UUID, criteria: SearchCriteria) -> List[Snippet]:
        """Every matching snippet, uncapped. No criteria returns the whole collection."""
        with persistence_guard(self.db, "search"):
            return self.build_query(owner_id, criteria).all()
