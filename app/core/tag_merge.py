"""How user tags and inferred tags combine into the stored tag set."""

from __future__ import annotations

from typing import FrozenSet, Iterable, Optional


def merge_tags(
    user_tags: Optional[Iterable[str]], inferred_tags: Optional[Iterable[str]]
) -> FrozenSet[str]:
    """Exact-string union; case and whitespace of each tag are kept as given."""
    return frozenset(user_tags or ()) | frozenset(inferred_tags or ())


def needs_reinference(
    stored_code: str,
    stored_language: str,
    new_code: str,
    new_language: str,
) -> bool:
    """Classification only re-runs when the analysed inputs change."""
    return stored_code != new_code or str(stored_language) != str(new_language)
