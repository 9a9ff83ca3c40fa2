"""Auth Schemas — registration, login and profile payloads.

Invariants:
    - Emails validated with EmailStr at the boundary
    - password is write-only: no response schema carries it or its hash
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6, max_length=72)
    name: str | None = Field(None, max_length=100)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1, max_length=72)


class AuthResponse(BaseModel):
    token: str
    email: str
    name: str | None = None


class ProfileResponse(BaseModel):
    """Public view of the caller's own account."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    email: str
    name: str | None = None
    created_at: int
