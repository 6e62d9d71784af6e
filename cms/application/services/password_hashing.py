# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Password hashing strategies."""

from __future__ import annotations

import bcrypt

from cms.domain.users.exceptions import PasswordHashError
from cms.domain.users.repositories import PasswordHasher
from cms.shared.logging import logger

# bcrypt only looks at the first 72 bytes of a password.
MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher(PasswordHasher):
    def __init__(self, rounds: int = 12) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            logger.warning("password_hasher: refusing to hash password longer than 72 bytes")
            raise PasswordHashError()
        return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self._rounds)).decode("ascii")

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed:
            logger.error("password_hasher: stored hash is empty")
            raise PasswordHashError()

        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            return False

        try:
            return bcrypt.checkpw(encoded, hashed.encode("utf-8"))
        except ValueError as exc:
            logger.error("password_hasher: stored hash is malformed")
            raise PasswordHashError() from exc
