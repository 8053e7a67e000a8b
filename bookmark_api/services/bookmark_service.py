import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List

from ..errors import NotFoundError, ValidationError
from ..models.bookmark import Bookmark
from ..utils.database import BookmarkDatabase
from ..utils.validators import is_non_empty_string, is_valid_url


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. 2026-10-19T12:00:00.000Z"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def _field_error(field: str, message: str) -> Dict[str, str]:
    return {'field': field, 'message': message}


class BookmarkService:
    def __init__(self, database: BookmarkDatabase):
        self.database = database

    def _validate(self, data: Any, partial: bool) -> Dict[str, Any]:
        """Validate a request body and return the bookmark fields it supplies.

        With ``partial`` set, url and title are only checked when present and a
        null description is treated as absent.
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValidationError([_field_error('body', 'Request body must be a JSON object')])

        errors = []
        fields = {}

        if not partial or 'url' in data:
            if is_valid_url(data.get('url')):
                fields['url'] = data['url']
            else:
                errors.append(_field_error('url', 'Invalid URL'))

        if not partial or 'title' in data:
            if is_non_empty_string(data.get('title')):
                fields['title'] = data['title']
            else:
                errors.append(_field_error('title', 'Title cannot be empty' if partial else 'Title is required'))

        description = data.get('description')
        if description is not None:
            if isinstance(description, str):
                fields['description'] = description if partial else description or None
            else:
                errors.append(_field_error('description', 'Description must be a string'))
        elif not partial:
            fields['description'] = None

        if errors:
            raise ValidationError(errors)
        return fields

    def get_bookmarks(self) -> List[Dict[str, Any]]:
        return [bookmark.to_dict() for bookmark in self.database.get_bookmarks()]

    def get_bookmark(self, bookmark_id: str) -> Dict[str, Any]:
        bookmark = self.database.get_bookmark(bookmark_id)
        if bookmark is None:
            raise NotFoundError()
        return bookmark.to_dict()

    def add_bookmark(self, data: Any) -> Dict[str, Any]:
        fields = self._validate(data, partial=False)
        bookmark = Bookmark(id=str(uuid.uuid4()), created_at=utc_timestamp(), **fields)
        return self.database.add_bookmark(bookmark).to_dict()

    def update_bookmark(self, bookmark_id: str, data: Any) -> Dict[str, Any]:
        fields = self._validate(data, partial=True)
        bookmark = self.database.update_bookmark(bookmark_id, fields)
        if bookmark is None:
            raise NotFoundError()
        return bookmark.to_dict()

    def delete_bookmark(self, bookmark_id: str):
        if not self.database.delete_bookmark(bookmark_id):
            raise NotFoundError()
