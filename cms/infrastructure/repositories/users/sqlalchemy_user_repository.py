# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

from cms.domain.users.entities import User as DomainUser
from cms.domain.users.exceptions import UserAlreadyExistsError
from cms.domain.users.repositories import UserRepository
from cms.infrastructure.db.models import User
from cms.infrastructure.repositories._time import as_utc
from cms.infrastructure.unit_of_work import SessionFactory, unit_of_work_scope
from cms.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        created_at=as_utc(row.created_at) if row.created_at else None,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory, "users") as session:
            row = session.query(User).filter(User.username == username).first()
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory, "users") as session:
                row = User(username=user.username, password_hash=user.password_hash)
                if user.id:
                    row.id = user.id
                if user.created_at:
                    row.created_at = user.created_at
                session.add(row)
                session.flush()
                persisted = _to_domain(row)
        except IntegrityError as exc:
            logger.warning(f"users.add: duplicate username={user.username!r}")
            raise UserAlreadyExistsError() from exc
        return persisted
