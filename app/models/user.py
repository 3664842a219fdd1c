"""User model. Identity only; credentials are issued elsewhere."""

from __future__ import annotations

import uuid

from sqlalchemy import Column, String, Uuid
from sqlalchemy.orm import relationship

from app.db import Base
from app.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(String(320), unique=True, nullable=False, index=True)

    snippets = relationship(
        "Snippet",
        back_populates="owner",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
