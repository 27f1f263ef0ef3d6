"""Exceptions raised by the wiki core."""


class GitWikiError(Exception):
    """Base exception for GitWiki operations."""


class PageNotFound(GitWikiError):
    """Raised when no file for the page exists in the current tree."""

    def __init__(self, name: str):
        super().__init__(f"Page not found: {name}")
        self.name = name


class RepositoryError(GitWikiError):
    """Raised when the configured repository cannot be opened."""
