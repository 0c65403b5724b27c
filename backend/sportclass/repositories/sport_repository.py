# backend/sportclass/repositories/sport_repository.py
"""
Sport Repository for SportClass

Data access for sports, returning immutable Sport entities.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import RepositoryException
from ..domain.entities import Sport, create_sport
from ..models.content import ContentRow
from ..models.sport import SportRow
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class SportRepository(BaseRepository[SportRow]):
    """Repository for sport lookups and catalogue maintenance."""

    def __init__(self, db: Session):
        super().__init__(db, SportRow)

    @staticmethod
    def to_entity(row: SportRow) -> Sport:
        return create_sport(row.name, row.category, id=row.id)

    def get_sport(self, sport_id: str) -> Optional[Sport]:
        row = self.get_by_id(sport_id)
        return self.to_entity(row) if row is not None else None

    def list_sports(self, skip: int = 0, limit: int = 100) -> List[Sport]:
        return [self.to_entity(row) for row in self.get_all(skip=skip, limit=limit)]

    def _all_rows(self) -> List[SportRow]:
        try:
            return self.db.query(SportRow).order_by(SportRow.name, SportRow.id).all()
        except SQLAlchemyError as e:
            self.logger.error(f"Error loading sports: {str(e)}")
            raise RepositoryException(f"Failed to load sports: {str(e)}")

    def find_by_name(self, name: str) -> Optional[Sport]:
        """
        Exact name lookup, ignoring case.

        Compared with ``str.casefold`` in Python: SQLite's lower() only folds
        ASCII, so "NATAÇÃO" and "Natação" would not match in SQL.
        """
        key = name.strip().casefold()
        for row in self._all_rows():
            if row.name.casefold() == key:
                return self.to_entity(row)
        return None

    def find_by_category(self, category: str) -> List[Sport]:
        key = category.strip().casefold()
        return [self.to_entity(row) for row in self._all_rows() if row.category.casefold() == key]

    def add(self, sport: Sport) -> Sport:
        row = self.insert(id=sport.id, name=sport.name, category=sport.category)
        return self.to_entity(row)

    def save_changes(self, sport: Sport) -> Optional[Sport]:
        row = self.update_fields(sport.id, name=sport.name, category=sport.category)
        return self.to_entity(row) if row is not None else None

    def has_contents(self, sport_id: str) -> bool:
        try:
            return (
                self.db.query(ContentRow.id).filter(ContentRow.sport_id == sport_id).first()
                is not None
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error checking contents of sport {sport_id}: {str(e)}")
            raise RepositoryException(f"Failed to check sport references: {str(e)}")
