# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .content.entities import Category, Comment, CustomPage, News
from .users.entities import TokenClaims, TokenKind, TokenPair, User

__all__ = [
    "Category",
    "Comment",
    "CustomPage",
    "News",
    "TokenClaims",
    "TokenKind",
    "TokenPair",
    "User",
]
