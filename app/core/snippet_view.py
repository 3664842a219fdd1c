"""
Client-side view state for a user's snippet collection.

The state holds the canonical list (newest first) and an optional filtered
overlay from the last search. ``reduce`` is a pure transition function.

Create, update and delete touch the canonical list only. An active overlay
is left as it was and goes stale until the next search or clear.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Dict, Optional, Tuple, Type
from uuid import UUID

from app.schemas.snippet import SnippetRead


@dataclass(frozen=True)
class SnippetViewState:
    canonical: Tuple[SnippetRead, ...] = ()
    filtered: Optional[Tuple[SnippetRead, ...]] = None
    current: Optional[SnippetRead] = None
    loading: bool = False
    error: Optional[str] = None

    @property
    def is_filtered(self) -> bool:
        return self.filtered is not None

    @property
    def displayed(self) -> Tuple[SnippetRead, ...]:
        """What the UI shows: the overlay when present, otherwise canonical."""
        return self.filtered if self.filtered is not None else self.canonical


# Actions


@dataclass(frozen=True)
class RequestStarted:
    pass


@dataclass(frozen=True)
class RequestFailed:
    message: str


@dataclass(frozen=True)
class ErrorsCleared:
    pass


@dataclass(frozen=True)
class SnippetsLoaded:
    snippets: Tuple[SnippetRead, ...]


@dataclass(frozen=True)
class SnippetLoaded:
    snippet: SnippetRead


@dataclass(frozen=True)
class SnippetCreated:
    snippet: SnippetRead


@dataclass(frozen=True)
class SnippetUpdated:
    snippet: SnippetRead


@dataclass(frozen=True)
class SnippetDeleted:
    snippet_id: UUID


@dataclass(frozen=True)
class SearchCompleted:
    results: Tuple[SnippetRead, ...]


@dataclass(frozen=True)
class FilterCleared:
    pass


def _request_started(state: SnippetViewState, action: RequestStarted) -> SnippetViewState:
    return replace(state, loading=True)


def _request_failed(state: SnippetViewState, action: RequestFailed) -> SnippetViewState:
    return replace(state, loading=False, error=action.message)


def _errors_cleared(state: SnippetViewState, action: ErrorsCleared) -> SnippetViewState:
    return replace(state, error=None)


def _snippets_loaded(state: SnippetViewState, action: SnippetsLoaded) -> SnippetViewState:
    return replace(state, canonical=tuple(action.snippets), loading=False)


def _snippet_loaded(state: SnippetViewState, action: SnippetLoaded) -> SnippetViewState:
    return replace(state, current=action.snippet, loading=False)


def _snippet_created(state: SnippetViewState, action: SnippetCreated) -> SnippetViewState:
    return replace(state, canonical=(action.snippet, *state.canonical), loading=False)


def _snippet_updated(state: SnippetViewState, action: SnippetUpdated) -> SnippetViewState:
    updated = action.snippet
    canonical = tuple(
        updated if snippet.id == updated.id else snippet for snippet in state.canonical
    )
    return replace(state, canonical=canonical, current=updated, loading=False)


def _snippet_deleted(state: SnippetViewState, action: SnippetDeleted) -> SnippetViewState:
    canonical = tuple(
        snippet for snippet in state.canonical if snippet.id != action.snippet_id
    )
    return replace(state, canonical=canonical, loading=False)


def _search_completed(
    state: SnippetViewState, action: SearchCompleted
) -> SnippetViewState:
    return replace(state, filtered=tuple(action.results), loading=False)


def _filter_cleared(state: SnippetViewState, action: FilterCleared) -> SnippetViewState:
    return replace(state, filtered=None)


_TRANSITIONS: Dict[Type, Callable[[SnippetViewState, object], SnippetViewState]] = {
    RequestStarted: _request_started,
    RequestFailed: _request_failed,
    ErrorsCleared: _errors_cleared,
    SnippetsLoaded: _snippets_loaded,
    SnippetLoaded: _snippet_loaded,
    SnippetCreated: _snippet_created,
    SnippetUpdated: _snippet_updated,
    SnippetDeleted: _snippet_deleted,
    SearchCompleted: _search_completed,
    FilterCleared: _filter_cleared,
}


def reduce(state: SnippetViewState, action: object) -> SnippetViewState:
    """Return the state after ``action``. Unknown actions leave it unchanged."""
    transition = _TRANSITIONS.get(type(action))
    if transition is None:
        return state
    return transition(state, action)
