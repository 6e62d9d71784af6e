# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from cms.domain.users.entities import User
from cms.domain.users.exceptions import UserAlreadyExistsError
from cms.domain.users.repositories import PasswordHasher, UserRepository


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> User:
        existing = self._users.find_by_username(username)
        if existing:
            raise UserAlreadyExistsError()
        hashed = self._password_hasher.hash(password)
        user = User(
            id=str(uuid.uuid4()),
            username=username,
            password_hash=hashed,
            created_at=datetime.now(UTC),
        )
        return self._users.add(user)
