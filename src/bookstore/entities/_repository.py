"""Generic data-access layer shared by the catalog entities."""

from typing import Any, Generic, TypeVar

from loguru import logger
from sqlalchemy.sql.elements import ColumnElement
from sqlmodel import Session, select
from sqlmodel.sql.expression import SelectOfScalar

from src.bookstore.entities._base import Entity, EntityTable

EntityT = TypeVar("EntityT", bound=Entity)
TableT = TypeVar("TableT", bound=EntityTable)


class EntityRepository(Generic[EntityT, TableT]):
    """CRUD and criteria search over a single entity type.

    Rows never leave the repository: every read returns domain entities built
    with ``model_validate(row, from_attributes=True)``. Each mutating call
    commits immediately.
    """

    entity_type: type[EntityT]
    table_type: type[TableT]

    def __init__(self, session: Session) -> None:
        self._session = session

    def _query(self) -> SelectOfScalar[TableT]:
        return select(self.table_type).order_by(self.table_type.id)

    def _to_entity(self, row: TableT) -> EntityT:
        return self.entity_type.model_validate(row, from_attributes=True)

    def _column_values(self, entity: EntityT) -> dict[str, Any]:
        values = entity.model_dump(include=set(self.table_type.model_fields))
        if not values.get("id"):
            values.pop("id", None)
        return values

    def add(self, entity: EntityT) -> EntityT:
        row = self.table_type(**self._column_values(entity))
        self._session.add(row)
        self._session.commit()
        self._session.refresh(row)
        logger.debug("Added {} {}", self.table_type.__name__, row.id)
        return self._to_entity(row)

    def get_by_id(self, entity_id: int) -> EntityT | None:
        row = self._session.exec(
            self._query().where(self.table_type.id == entity_id)
        ).first()
        if row is None:
            return None
        return self._to_entity(row)

    def get_all(self) -> list[EntityT]:
        return [self._to_entity(row) for row in self._session.exec(self._query()).all()]

    def update(self, entity: EntityT) -> EntityT:
        row = self._session.get(self.table_type, entity.id)
        if row is None:
            raise ValueError(f"{self.entity_type.__name__} {entity.id} not found")

        values = self._column_values(entity)
        values.pop("id", None)
        row.sqlmodel_update(values)
        self._session.add(row)
        self._session.commit()
        self._session.refresh(row)
        return self._to_entity(row)

    def remove(self, entity: EntityT) -> None:
        row = self._session.get(self.table_type, entity.id)
        if row is None:
            return
        self._session.delete(row)
        self._session.commit()
        logger.debug("Removed {} {}", self.table_type.__name__, entity.id)

    def search(self, *criteria: ColumnElement[bool]) -> list[EntityT]:
        """Return every entity matching all of the given column expressions.

        Example:
            repository.search(BookTable.name == "Dune", BookTable.id != 3)
        """
        statement = self._query().where(*criteria)
        return [self._to_entity(row) for row in self._session.exec(statement).all()]
