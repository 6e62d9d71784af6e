# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from cms.domain.users.entities import TokenPair
from cms.domain.users.repositories import TokenManager


def issue_token_pair(tokens: TokenManager, user_id: str) -> TokenPair:
    access_token = tokens.issue_access_token(user_id)
    refresh_token = tokens.issue_refresh_token(user_id)
    return TokenPair(access_token=access_token, refresh_token=refresh_token)
