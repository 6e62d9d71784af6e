# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field


@dataclass(slots=True, frozen=True)
class User:

    id: str
    username: str
    password_hash: str
    created_at: datetime | None = None

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, username={self.username!r})"


class TokenKind(StrEnum):
    ACCESS = "access"
    REFRESH = "refresh"


class TokenClaims(BaseModel):
    """Verified payload of an access or refresh token."""

    subject: str = Field(alias="user_id", min_length=1)
    kind: TokenKind
    expires_at: AwareDatetime = Field(alias="exp")

    model_config = ConfigDict(frozen=True, validate_by_name=True, extra="ignore")


@dataclass(slots=True, frozen=True)
class TokenPair:

    access_token: str
    refresh_token: str

    def __repr__(self) -> str:
        return "TokenPair(access_token=***, refresh_token=***)"
