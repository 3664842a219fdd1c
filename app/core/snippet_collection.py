"""Drives SnippetViewState from snippets API calls, one request at a time."""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from app.adapters.snippet_api import SnippetApiClient, SnippetApiError
from app.core import snippet_view as view
from app.infra.logging_config import get_logger
from app.schemas.snippet import SearchCriteria, SnippetWrite

logger = get_logger("snippet_collection")


class SnippetCollection:
    """
    Session-scoped snippet collection.

    Every operation marks the state loading, calls the API and applies either
    the result or the failure. A failure only sets ``error``; the lists and
    ``current`` keep their previous values.
    """

    def __init__(
        self,
        api: SnippetApiClient,
        state: Optional[view.SnippetViewState] = None,
    ) -> None:
        self.api = api
        self.state = state or view.SnippetViewState()

    def dispatch(self, action: object) -> view.SnippetViewState:
        self.state = view.reduce(self.state, action)
        return self.state

    def _fail(self, error: SnippetApiError) -> view.SnippetViewState:
        logger.warning("Snippet request failed (%s): %s", error.status_code, error)
        return self.dispatch(view.RequestFailed(error.message))

    def load(self) -> view.SnippetViewState:
        """Fetch the full collection into the canonical list."""
        self.dispatch(view.RequestStarted())
        try:
            snippets = self.api.list_snippets()
        except SnippetApiError as e:
            return self._fail(e)
        return self.dispatch(view.SnippetsLoaded(tuple(snippets)))

    def fetch(self, snippet_id: UUID) -> view.SnippetViewState:
        self.dispatch(view.RequestStarted())
        try:
            snippet = self.api.get_snippet(snippet_id)
        except SnippetApiError as e:
            return self._fail(e)
        return self.dispatch(view.SnippetLoaded(snippet))

    def create(self, data: SnippetWrite) -> view.SnippetViewState:
        self.dispatch(view.RequestStarted())
        try:
            snippet = self.api.create_snippet(data)
        except SnippetApiError as e:
            return self._fail(e)
        return self.dispatch(view.SnippetCreated(snippet))

    def update(self, snippet_id: UUID, data: SnippetWrite) -> view.SnippetViewState:
        self.dispatch(view.RequestStarted())
        try:
            snippet = self.api.update_snippet(snippet_id, data)
        except SnippetApiError as e:
            return self._fail(e)
        return self.dispatch(view.SnippetUpdated(snippet))

    def delete(self, snippet_id: UUID) -> view.SnippetViewState:
        self.dispatch(view.RequestStarted())
        try:
            self.api.delete_snippet(snippet_id)
        except SnippetApiError as e:
            return self._fail(e)
        return self.dispatch(view.SnippetDeleted(snippet_id))

    def search(self, criteria: SearchCriteria) -> view.SnippetViewState:
        """Replace the overlay with fresh results. No criteria clears the filter."""
        if criteria.is_empty:
            return self.clear_filter()
        self.dispatch(view.RequestStarted())
        try:
            results = self.api.search_snippets(criteria)
        except SnippetApiError as e:
            return self._fail(e)
        return self.dispatch(view.SearchCompleted(tuple(results)))

    def clear_filter(self) -> view.SnippetViewState:
        return self.dispatch(view.FilterCleared())

    def clear_errors(self) -> view.SnippetViewState:
        return self.dispatch(view.ErrorsCleared())
