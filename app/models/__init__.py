from app.models.snippet import Snippet, SnippetTag
from app.models.user import User

__all__ = [
    "Snippet",
    "SnippetTag",
    "User",
]
