from typing import Any, Dict, Optional


class Bookmark:
    def __init__(self, id, url, title, description=None, created_at=None):
        self.id = id
        self.url = url
        self.title = title
        self.description = description
        self.created_at = created_at

    @classmethod
    def from_row(cls, row) -> Optional['Bookmark']:
        if row is None:
            return None
        return cls(row['id'], row['url'], row['title'], row['description'], row['created_at'])

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'url': self.url,
            'title': self.title,
            'description': self.description,
            'created_at': self.created_at
        }

    def __repr__(self):
        return f'<Bookmark {self.id}: {self.title}>'
