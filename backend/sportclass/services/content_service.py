# backend/sportclass/services/content_service.py
"""
Content Service for SportClass

Educational contents belong to exactly one existing sport.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..core.constants import DEFAULT_QUERY_LIMIT, MAX_QUERY_LIMIT
from ..core.exceptions import NotFoundException, ValidationException
from ..domain import validators
from ..domain.entities import Content, create_content
from ..repositories import ContentRepository, RepositoryFactory, SportRepository
from .base import BaseService

logger = logging.getLogger(__name__)


class ContentService(BaseService):
    """Service layer for educational contents."""

    def __init__(
        self,
        db: Session,
        repository: Optional[ContentRepository] = None,
        sport_repository: Optional[SportRepository] = None,
    ):
        super().__init__(db)
        self.repository = repository or RepositoryFactory.create_content_repository(db)
        self.sport_repository = sport_repository or RepositoryFactory.create_sport_repository(db)

    @BaseService.measure_operation("create_content")
    def create_content(
        self,
        title: str,
        level: str,
        duration_minutes: int,
        sport_id: str,
        description: Optional[str] = None,
        url: Optional[str] = None,
    ) -> Content:
        """
        Add a content to the catalogue.

        Raises:
            ValidationException: A field is malformed
            NotFoundException: The sport does not exist
        """
        content = create_content(
            title=title,
            level=level,
            duration_minutes=duration_minutes,
            sport_id=sport_id,
            description=description,
            url=url,
        )
        if self.sport_repository.get_sport(content.sport_id) is None:
            raise NotFoundException("Sport", content.sport_id)

        with self.transaction():
            created = self.repository.add(content)

        self.logger.info(f"Created content {created.id} for sport {created.sport_id}")
        return created

    @BaseService.measure_operation("get_content")
    def get_content(self, content_id: str) -> Content:
        content = self.repository.get_content(content_id)
        if content is None:
            raise NotFoundException("Content", content_id)
        return content

    @BaseService.measure_operation("list_contents")
    def list_contents(self, skip: int = 0, limit: int = DEFAULT_QUERY_LIMIT) -> List[Content]:
        return self.repository.list_contents(skip=max(skip, 0), limit=min(limit, MAX_QUERY_LIMIT))

    def find_by_sport(self, sport_id: str) -> List[Content]:
        return self.repository.find_by_sport(sport_id)

    def find_by_title(self, term: str) -> List[Content]:
        return self.repository.find_by_title_containing(term)

    def find_by_level(self, level: str) -> List[Content]:
        return self.repository.find_by_level(validators.validate_level(level))

    def find_by_duration_range(self, minimum: int, maximum: int) -> List[Content]:
        if minimum > maximum:
            raise ValidationException("duration_minutes", "minimum must not exceed maximum")
        return self.repository.find_by_duration_range(minimum, maximum)
