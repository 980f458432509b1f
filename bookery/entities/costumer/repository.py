"""Costumer data access."""

from uuid import UUID

from sqlalchemy import ColumnElement
from sqlmodel import col

from bookery.entities._repository import EntityRepository, like_pattern

from .entity import Costumer
from .table import CostumerTable


class CostumerRepository(EntityRepository[Costumer, CostumerTable]):
    """Data-access layer for customers. Search matches the name."""

    table = CostumerTable
    mutable_fields = ("name", "document", "born")

    def _to_row(self, entity: Costumer) -> CostumerTable:
        return CostumerTable(
            id=str(entity.id),
            name=entity.name.as_str(),
            document=entity.document.as_str(),
            born=entity.born,
        )

    def _to_entity(self, row: CostumerTable) -> Costumer:
        return Costumer(id=UUID(row.id), name=row.name, document=row.document, born=row.born)

    def _search_clause(self, term: str) -> ColumnElement[bool]:
        return col(CostumerTable.name).ilike(like_pattern(term))
