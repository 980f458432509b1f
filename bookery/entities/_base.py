import uuid
from datetime import UTC, datetime

import sqlalchemy as sa
from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


class Entity(BaseModel):
    """Base entity class with auto-generated UUID identifier.

    Entities are immutable once built; a changed record is a new entity
    produced by the ``parse`` constructor of its class.
    """

    model_config = ConfigDict(frozen=True)

    id: uuid.UUID = PydanticField(
        default_factory=uuid.uuid4,
        description="Unique identifier for the entity",
    )


class EntityTable(SQLModel, table=False):
    """Base table with a UUID primary key stored as text."""

    id: str = Field(
        primary_key=True,
        max_length=36,
        description="Unique identifier for the entity",
    )

    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        nullable=False,
        sa_column_kwargs={
            "server_default": sa.func.now(),
            "onupdate": sa.func.now(),
        },
    )


class DeletePayload(BaseModel):
    """Body of a delete request."""

    id: uuid.UUID
