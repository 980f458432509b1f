"""Costumer database table model."""

from datetime import date

from sqlmodel import Field

from bookery.entities._base import EntityTable


class CostumerTable(EntityTable, table=True):
    """Database persistence model for customers."""

    __tablename__ = "costumers"

    name: str = Field(max_length=128, index=True)
    document: str = Field(max_length=11)
    born: date
