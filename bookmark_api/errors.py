from typing import Dict, List


class BookmarkError(Exception):
    """Base class for errors surfaced by the bookmark API."""


class ValidationError(BookmarkError):
    def __init__(self, errors: List[Dict[str, str]]):
        super().__init__('Validation failed')
        self.errors = errors


class NotFoundError(BookmarkError):
    def __init__(self, message: str = 'Bookmark not found'):
        super().__init__(message)


class StorageError(BookmarkError):
    """Raised when the underlying database fails. The wrapped error stays server-side."""
