# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Use-case for exchanging a refresh token for a fresh token pair."""

from __future__ import annotations

from cms.domain.users.entities import TokenPair
from cms.domain.users.repositories import TokenManager
from cms.shared.logging import logger

from .token_pair import issue_token_pair


class RefreshTokensUseCase:
    def __init__(self, *, tokens: TokenManager) -> None:
        self._tokens = tokens

    def execute(self, refresh_token: str) -> TokenPair:
        # An empty or missing subject fails claim parsing inside the validator.
        claims = self._tokens.validate_refresh_token(refresh_token)

        # The presented token is not revoked; it stays usable until it expires.
        pair = issue_token_pair(self._tokens, claims.subject)
        logger.info(f"auth.refresh: ok user_id={claims.subject}")
        return pair
