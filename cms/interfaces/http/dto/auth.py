from __future__ import annotations

from pydantic import BaseModel, Field

from cms.domain.users.entities import TokenPair

from .common import NonBlankStr


class LoginRequestDTO(BaseModel):
    username: NonBlankStr = Field(max_length=64)
    # Not stripped: whitespace is a legitimate part of a password.
    password: str = Field(min_length=1, max_length=128)


class RefreshRequestDTO(BaseModel):
    refresh_token: NonBlankStr


class TokenResponseDTO(BaseModel):
    access_token: str
    refresh_token: str

    @classmethod
    def from_pair(cls, pair: TokenPair) -> TokenResponseDTO:
        return cls(access_token=pair.access_token, refresh_token=pair.refresh_token)
