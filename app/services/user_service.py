"""Service for looking up and creating users."""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from app.models.user import User


class UserService:
    """Users are referenced by id as snippet owners."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def get_user(self, user_id: UUID) -> Optional[User]:
        """Fetch a user by ID."""
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email.lower()).first()

    def create_user(self, email: str) -> User:
        """Create a user. Raises ValueError if the email is taken."""
        if self.get_user_by_email(email) is not None:
            raise ValueError(f"User with email {email!r} already exists")
        user = User(email=email.lower())
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user
