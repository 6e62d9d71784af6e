# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import TokenClaims, User


class UserRepository(Protocol):
    def find_by_username(self, username: str) -> User | None: ...
    def add(self, user: User) -> User: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenManager(Protocol):
    def issue_access_token(self, subject_id: str) -> str: ...
    def issue_refresh_token(self, subject_id: str) -> str: ...
    def validate_access_token(self, token: str) -> TokenClaims: ...
    def validate_refresh_token(self, token: str) -> TokenClaims: ...
