# backend/sportclass/services/sport_service.py
"""
Sport Service for SportClass

Catalogue maintenance for sports. A sport's name is unique (ignoring case)
and a sport referenced by any content can no longer be changed or removed.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..core.constants import DEFAULT_QUERY_LIMIT, MAX_QUERY_LIMIT
from ..core.exceptions import BusinessRuleException, ConflictException, NotFoundException
from ..domain.entities import Sport, create_sport, update_sport
from ..repositories import RepositoryFactory, SportRepository
from .base import BaseService

logger = logging.getLogger(__name__)


class SportService(BaseService):
    """Service layer for the sport catalogue."""

    def __init__(self, db: Session, repository: Optional[SportRepository] = None):
        super().__init__(db)
        self.repository = repository or RepositoryFactory.create_sport_repository(db)

    def _ensure_name_available(self, name: str, sport_id: Optional[str] = None) -> None:
        existing = self.repository.find_by_name(name)
        if existing is not None and existing.id != sport_id:
            raise ConflictException(
                f"A sport named '{existing.name}' already exists",
                code="SPORT_EXISTS",
                details={"name": name, "existing_id": existing.id},
            )

    @BaseService.measure_operation("create_sport")
    def create_sport(self, name: str, category: str) -> Sport:
        sport = create_sport(name, category)
        self._ensure_name_available(sport.name)

        with self.transaction():
            created = self.repository.add(sport)

        self.logger.info(f"Created sport {created.id} ({created.full_description})")
        return created

    @BaseService.measure_operation("get_sport")
    def get_sport(self, sport_id: str) -> Sport:
        sport = self.repository.get_sport(sport_id)
        if sport is None:
            raise NotFoundException("Sport", sport_id)
        return sport

    @BaseService.measure_operation("list_sports")
    def list_sports(self, skip: int = 0, limit: int = DEFAULT_QUERY_LIMIT) -> List[Sport]:
        return self.repository.list_sports(skip=max(skip, 0), limit=min(limit, MAX_QUERY_LIMIT))

    def find_by_category(self, category: str) -> List[Sport]:
        return self.repository.find_by_category(category)

    def find_by_name(self, name: str) -> Sport:
        sport = self.repository.find_by_name(name)
        if sport is None:
            raise NotFoundException("Sport", name)
        return sport

    @BaseService.measure_operation("update_sport")
    def update_sport(self, sport_id: str, name: str, category: str) -> Sport:
        """
        Rename or recategorise a sport.

        Raises:
            NotFoundException: No sport with this id
            BusinessRuleException: Contents already reference the sport
            ConflictException: Another sport already has the new name
        """
        current = self.get_sport(sport_id)
        if self.repository.has_contents(sport_id):
            raise BusinessRuleException(
                "Cannot change a sport that already has contents",
                code="SPORT_IN_USE",
                details={"sport_id": sport_id},
            )

        updated = update_sport(current, name, category)
        self._ensure_name_available(updated.name, sport_id=sport_id)

        with self.transaction():
            saved = self.repository.save_changes(updated)

        if saved is None:
            raise NotFoundException("Sport", sport_id)
        self.logger.info(f"Updated sport {sport_id} to {saved.full_description}")
        return saved

    @BaseService.measure_operation("delete_sport")
    def delete_sport(self, sport_id: str) -> None:
        self.get_sport(sport_id)
        if self.repository.has_contents(sport_id):
            raise BusinessRuleException(
                "Cannot delete a sport that still has contents",
                code="SPORT_IN_USE",
                details={"sport_id": sport_id},
            )

        with self.transaction():
            self.repository.delete(sport_id)

        self.logger.info(f"Deleted sport {sport_id}")
