# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from cms.domain.users.entities import TokenPair
from cms.domain.users.exceptions import InvalidCredentialsError, UserNotFoundError
from cms.domain.users.repositories import PasswordHasher, TokenManager, UserRepository
from cms.shared.logging import logger

from .token_pair import issue_token_pair


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        tokens: TokenManager,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._tokens = tokens

    def execute(self, username: str, password: str) -> TokenPair:
        user = self._users.find_by_username(username)
        if user is None:
            logger.info(f"auth.login: unknown username={username!r}")
            raise UserNotFoundError()

        if not self._password_hasher.verify(password, user.password_hash):
            logger.info(f"auth.login: bad password user_id={user.id}")
            raise InvalidCredentialsError()

        pair = issue_token_pair(self._tokens, user.id)
        logger.info(f"auth.login: ok user_id={user.id}")
        return pair
