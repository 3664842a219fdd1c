"""Tests for the snippet collection view state transitions."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from app.constants.languages import Language
from app.core import snippet_view as view
from app.schemas.snippet import SnippetRead


def make_read(title="Snippet", language=Language.PYTHON, minutes=0, **kwargs):
    created = datetime(2026, 1, 1) + timedelta(minutes=minutes)
    return SnippetRead(
        id=kwargs.pop("id", uuid4()),
        owner_id=kwargs.pop("owner_id", uuid4()),
        title=title,
        code=kwargs.pop("code", "x = 1"),
        programming_language=language,
        tags=kwargs.pop("tags", []),
        created_at=created,
        updated_at=created,
        **kwargs,
    )


@pytest.fixture
def loaded_state():
    snippets = tuple(make_read(title=f"s{i}", minutes=10 - i) for i in range(4))
    return view.reduce(view.SnippetViewState(), view.SnippetsLoaded(snippets))


def test_initial_state_is_unfiltered():
    state = view.SnippetViewState()
    assert not state.is_filtered
    assert state.displayed == ()
    assert state.loading is False


def test_request_started_sets_loading():
    state = view.reduce(view.SnippetViewState(), view.RequestStarted())
    assert state.loading is True


def test_snippets_loaded_fills_canonical(loaded_state):
    assert len(loaded_state.canonical) == 4
    assert loaded_state.displayed == loaded_state.canonical
    assert loaded_state.loading is False


def test_search_replaces_overlay_wholesale(loaded_state):
    first = view.reduce(loaded_state, view.SearchCompleted(loaded_state.canonical[:2]))
    second = view.reduce(first, view.SearchCompleted(loaded_state.canonical[3:]))
    assert second.is_filtered
    assert second.displayed == loaded_state.canonical[3:]


def test_empty_search_result_is_still_filtered(loaded_state):
    state = view.reduce(loaded_state, view.SearchCompleted(()))
    assert state.is_filtered
    assert state.displayed == ()


def test_clear_filter_shows_canonical(loaded_state):
    filtered = view.reduce(loaded_state, view.SearchCompleted(loaded_state.canonical[:1]))
    cleared = view.reduce(filtered, view.FilterCleared())
    assert not cleared.is_filtered
    assert cleared.displayed == loaded_state.canonical


def test_create_prepends_to_canonical(loaded_state):
    new = make_read(title="new", minutes=99)
    state = view.reduce(loaded_state, view.SnippetCreated(new))
    assert state.canonical[0] == new
    assert len(state.canonical) == 5


def test_update_replaces_in_place_and_sets_current(loaded_state):
    target = loaded_state.canonical[2]
    updated = target.model_copy(update={"title": "renamed"})
    state = view.reduce(loaded_state, view.SnippetUpdated(updated))
    assert state.canonical[2].title == "renamed"
    assert [s.id for s in state.canonical] == [s.id for s in loaded_state.canonical]
    assert state.current == updated


def test_delete_removes_from_canonical(loaded_state):
    target = loaded_state.canonical[1]
    state = view.reduce(loaded_state, view.SnippetDeleted(target.id))
    assert target.id not in [s.id for s in state.canonical]
    assert len(state.canonical) == 3


def test_delete_while_filtered_leaves_overlay_stale(loaded_state):
    """Mutations touch canonical only; the overlay keeps its old contents."""
    overlay = loaded_state.canonical[:2]
    filtered = view.reduce(loaded_state, view.SearchCompleted(overlay))
    not_in_overlay = loaded_state.canonical[3]

    state = view.reduce(filtered, view.SnippetDeleted(not_in_overlay.id))
    assert len(state.displayed) == 2

    in_overlay = overlay[0]
    state = view.reduce(state, view.SnippetDeleted(in_overlay.id))
    assert len(state.displayed) == 2
    assert in_overlay in state.displayed
    assert in_overlay.id not in [s.id for s in state.canonical]


def test_create_and_update_while_filtered_do_not_touch_overlay(loaded_state):
    overlay = loaded_state.canonical[:1]
    filtered = view.reduce(loaded_state, view.SearchCompleted(overlay))
    state = view.reduce(filtered, view.SnippetCreated(make_read(title="new")))
    renamed = overlay[0].model_copy(update={"title": "renamed"})
    state = view.reduce(state, view.SnippetUpdated(renamed))
    assert state.displayed == overlay
    assert state.displayed[0].title != "renamed"


def test_request_failed_keeps_lists(loaded_state):
    filtered = view.reduce(loaded_state, view.SearchCompleted(loaded_state.canonical[:1]))
    started = view.reduce(filtered, view.RequestStarted())
    failed = view.reduce(started, view.RequestFailed("Failed to search snippets"))
    assert failed.error == "Failed to search snippets"
    assert failed.loading is False
    assert failed.canonical == filtered.canonical
    assert failed.filtered == filtered.filtered


def test_errors_cleared():
    state = view.reduce(view.SnippetViewState(), view.RequestFailed("boom"))
    assert view.reduce(state, view.ErrorsCleared()).error is None


def test_snippet_loaded_sets_current():
    snippet = make_read()
    state = view.reduce(view.SnippetViewState(), view.SnippetLoaded(snippet))
    assert state.current == snippet


def test_reduce_does_not_mutate_prior_state(loaded_state):
    before = loaded_state.canonical
    view.reduce(loaded_state, view.SnippetDeleted(before[0].id))
    assert loaded_state.canonical == before


def test_unknown_action_is_ignored(loaded_state):
    assert view.reduce(loaded_state, object()) is loaded_state
