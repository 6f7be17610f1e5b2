"""SQLModel-backed user repository."""

from __future__ import annotations

from loguru import logger
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from user_registry.core.contracts.user_repository import UserRepository
from user_registry.core.errors import DuplicateResourceError, ServerError
from user_registry.entities.core.user.entity import User, UserCreateData, UserMapped
from user_registry.entities.core.user.table import UserTable


class SqlModelUserRepository(UserRepository):
    """Data-access layer for users over a SQLModel session.

    The session is injected and owned by the caller; this repository commits
    its own writes so a created user is durable once ``create`` returns.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    async def create(self, data: UserCreateData) -> None:
        row = UserTable(
            name=data.name,
            email=data.email,
            phone=data.phone,
            birthdate=data.birthdate,
            password=data.password,
        )
        self._session.add(row)
        try:
            self._session.commit()
        except IntegrityError as e:
            self._session.rollback()
            if "email" in str(e.orig).lower():
                raise DuplicateResourceError("e-mail") from e
            raise ServerError(e) from e
        except Exception as e:
            self._session.rollback()
            logger.error(f"Error persisting user: {e}")
            raise ServerError(e) from e

    async def find_by_email(self, email: str) -> User | None:
        statement = select(UserTable).where(
            func.lower(UserTable.email) == email.lower()
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    async def list(self) -> list[UserMapped]:
        rows = self._session.exec(select(UserTable)).all()
        return [UserMapped.model_validate(row, from_attributes=True) for row in rows]
