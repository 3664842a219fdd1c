from app.services.snippet_search_service import SnippetSearchService
from app.services.snippet_service import SnippetService
from app.services.user_service import UserService

__all__ = [
    "SnippetSearchService",
    "SnippetService",
    "UserService",
]
