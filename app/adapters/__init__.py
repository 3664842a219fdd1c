"""Clients for talking to the snippets API from outside the server."""

from app.adapters.snippet_api import SnippetApiClient, SnippetApiError

__all__ = ["SnippetApiClient", "SnippetApiError"]
