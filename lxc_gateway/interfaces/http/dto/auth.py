from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError


class CredentialsRequestDTO(BaseModel):
    username: str = Field(min_length=1, max_length=128)
    password: str = Field(min_length=1, max_length=1024)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError(
                "username_blank",
                "Username cannot be blank",
                {},
            )
        return value


class SignUpRequestDTO(CredentialsRequestDTO):
    pass


class LogInRequestDTO(CredentialsRequestDTO):
    pass


class MessageDTO(BaseModel):
    message: str


class LogInSuccessDTO(MessageDTO):
    message: str = "User logged in successfully"
    token: str


class ProtectedDTO(MessageDTO):
    message: str = "This is a protected route."
    user: dict[str, Any]
