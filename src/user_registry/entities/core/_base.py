"""Shared base classes for domain entities and their tables."""

import uuid
from datetime import UTC, datetime

import sqlalchemy as sa
from pydantic import AliasGenerator, BaseModel, ConfigDict
from pydantic import Field as PydanticField
from pydantic.alias_generators import to_camel
from sqlmodel import Field, SQLModel


def utc_now() -> datetime:
    return datetime.now(UTC)


def new_id() -> str:
    return str(uuid.uuid4())


class Entity(BaseModel):
    """Base entity with a system-assigned UUID and lifecycle timestamps.

    Entities serialize with camelCase keys (``createdAt``, ``avatarUrl``...)
    because that is the shape the HTTP clients consume. Validation keeps the
    Python field names so rows and dictionaries load without translation.
    """

    model_config = ConfigDict(
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )

    id: str = PydanticField(
        default_factory=new_id,
        description="Unique identifier for the entity",
    )

    created_at: datetime = PydanticField(default_factory=utc_now)
    updated_at: datetime = PydanticField(default_factory=utc_now)


class EntityTable(SQLModel, table=False):
    """Base table with UUID primary key and timestamps maintained by the database."""

    id: str = Field(
        primary_key=True,
        default_factory=new_id,
        description="Unique identifier for the entity",
    )

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(
        default_factory=utc_now,
        nullable=False,
        sa_column_kwargs={
            "server_default": sa.func.now(),
            "onupdate": sa.func.now(),
        },
    )
