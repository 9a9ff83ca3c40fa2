"""Auth Routes — register, login, token validation and profile under /api/auth.

Invariants:
    - register/login are the only anonymous routes besides health
    - validate/profile require a resolvable Principal (401 otherwise)
    - No response ever includes a password or password hash
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from expense_tracker.api.dependencies import get_auth_service, get_current_principal
from expense_tracker.core.domain_types import Principal
from expense_tracker.schemas.auth import (
    AuthResponse, LoginRequest, ProfileResponse, RegisterRequest,
)
from expense_tracker.services.auth_service import AuthService

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse)
async def register(
    body: RegisterRequest, auth: AuthService = Depends(get_auth_service),
):
    user, token = await auth.register(body.email, body.password, body.name)
    return AuthResponse(token=token, email=user.email, name=user.name)


@router.post("/login", response_model=AuthResponse)
async def login(
    body: LoginRequest, auth: AuthService = Depends(get_auth_service),
):
    user, token = await auth.login(body.email, body.password)
    return AuthResponse(token=token, email=user.email, name=user.name)


@router.get("/validate", response_class=PlainTextResponse)
async def validate(principal: Principal = Depends(get_current_principal)):
    return "Token is valid"


@router.get("/profile", response_model=ProfileResponse)
async def profile(
    principal: Principal = Depends(get_current_principal),
    auth: AuthService = Depends(get_auth_service),
):
    """The caller's own account, looked up by the resolved principal."""
    user = await auth.profile(principal)
    return ProfileResponse(
        id=user.id, email=user.email, name=user.name, created_at=user.created_at,
    )
