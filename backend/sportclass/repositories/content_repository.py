# backend/sportclass/repositories/content_repository.py
"""
Content Repository for SportClass

Data access for educational contents, returning immutable Content entities.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import RepositoryException
from ..domain.entities import Content, create_content
from ..models.content import ContentRow
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class ContentRepository(BaseRepository[ContentRow]):
    """Repository for content lookups and filters."""

    def __init__(self, db: Session):
        super().__init__(db, ContentRow)

    @staticmethod
    def to_entity(row: ContentRow) -> Content:
        return create_content(
            title=row.title,
            level=row.level,
            duration_minutes=row.duration_minutes,
            sport_id=row.sport_id,
            description=row.description,
            url=row.url,
            id=row.id,
        )

    def get_content(self, content_id: str) -> Optional[Content]:
        row = self.get_by_id(content_id)
        return self.to_entity(row) if row is not None else None

    def list_contents(self, skip: int = 0, limit: int = 100) -> List[Content]:
        return [self.to_entity(row) for row in self.get_all(skip=skip, limit=limit)]

    def _query(self, *criteria) -> List[Content]:
        try:
            rows = (
                self.db.query(ContentRow)
                .filter(*criteria)
                .order_by(ContentRow.title, ContentRow.id)
                .all()
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error querying contents: {str(e)}")
            raise RepositoryException(f"Failed to query contents: {str(e)}")
        return [self.to_entity(row) for row in rows]

    def find_by_sport(self, sport_id: str) -> List[Content]:
        return self._query(ContentRow.sport_id == sport_id)

    def find_by_title_containing(self, term: str) -> List[Content]:
        needle = term.strip().casefold()
        return [content for content in self._query() if needle in content.title.casefold()]

    def find_by_level(self, level: str) -> List[Content]:
        return self._query(ContentRow.level == level)

    def find_by_duration_range(self, minimum: int, maximum: int) -> List[Content]:
        return self._query(
            ContentRow.duration_minutes >= minimum,
            ContentRow.duration_minutes <= maximum,
        )

    def add(self, content: Content) -> Content:
        row = self.insert(
            id=content.id,
            title=content.title,
            description=content.description,
            level=content.level,
            duration_minutes=content.duration_minutes,
            url=content.url,
            sport_id=content.sport_id,
        )
        return self.to_entity(row)
