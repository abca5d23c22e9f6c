"""
User Schemas

Request/response models for signup and signin.

Signup Rules:
=============
- username: 3 to 10 characters
- password: 6 to 20 characters, with at least one lowercase letter, one
  uppercase letter, one digit and one special (non-alphanumeric) character
"""

import re

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError


PASSWORD_RULES = (
    (re.compile(r"[a-z]"), "Password must contain at least one lowercase letter"),
    (re.compile(r"[A-Z]"), "Password must contain at least one uppercase letter"),
    (re.compile(r"[0-9]"), "Password must contain at least one digit"),
    (re.compile(r"[^A-Za-z0-9]"), "Password must contain at least one special character"),
)


class SignupRequest(BaseModel):
    """Schema for user registration."""

    username: str = Field(
        min_length=3,
        max_length=10,
        description="Username (3-10 characters)",
    )
    password: str = Field(
        min_length=6,
        max_length=20,
        description="Password (6-20 characters, mixed case, digit, special character)",
    )

    @field_validator("password")
    @classmethod
    def check_password_strength(cls, value: str) -> str:
        for pattern, message in PASSWORD_RULES:
            if not pattern.search(value):
                raise PydanticCustomError("password_strength", message)
        return value


class SigninRequest(BaseModel):
    """Schema for user login. No format rules: unknown users get a 404."""

    username: str
    password: str


class TokenResponse(BaseModel):
    """Schema for a successful signin."""

    token: str
