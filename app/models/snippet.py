"""Snippet model and its tag rows."""

from __future__ import annotations

import uuid
from typing import Iterable, List

from sqlalchemy import Column, ForeignKey, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from app.db import Base
from app.models.mixins import TimestampMixin


class Snippet(Base, TimestampMixin):
    """One stored unit of code owned by exactly one user."""

    __tablename__ = "snippets"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    owner_id = Column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String(256), nullable=False)
    code = Column(Text, nullable=False)
    programming_language = Column(String(32), nullable=False, index=True)
    description = Column(Text, nullable=True)

    owner = relationship("User", back_populates="snippets")
    tag_rows = relationship(
        "SnippetTag",
        back_populates="snippet",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def tags(self) -> List[str]:
        """Tag names in a stable order, independent of how they were produced."""
        return sorted(row.name for row in self.tag_rows)

    def replace_tags(self, names: Iterable[str]) -> None:
        """Make the stored tag set equal to ``names``, reusing rows that survive."""
        wanted = set(names)
        for row in list(self.tag_rows):
            if row.name in wanted:
                wanted.discard(row.name)
            else:
                self.tag_rows.remove(row)
        for name in sorted(wanted):
            self.tag_rows.append(SnippetTag(name=name))


class SnippetTag(Base):
    """Membership of a tag in a snippet's tag set."""

    __tablename__ = "snippet_tags"

    __table_args__ = (
        UniqueConstraint("snippet_id", "name", name="uq_snippet_tags_snippet_name"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    snippet_id = Column(
        Uuid,
        ForeignKey("snippets.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(100), nullable=False, index=True)

    snippet = relationship("Snippet", back_populates="tag_rows")
