"""Auth routes: register and login. Both answer with the public user and a bearer token."""
from typing import Annotated

from fastapi import APIRouter, Depends

from skillsprout.routers.deps import get_auth_service
from skillsprout.schemas.user import AuthOutSchema, LoginSchema, RegisterSchema, UserOutSchema
from skillsprout.services.auth import AuthService

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=AuthOutSchema)
async def register(
    body: RegisterSchema,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Create an account and log it in."""
    user, token = await auth.register(body.email, body.password, body.full_name, body.emoji)
    return AuthOutSchema(user=UserOutSchema.model_validate(user), token=token)


@router.post("/login", response_model=AuthOutSchema)
async def login(
    body: LoginSchema,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    user, token = await auth.login(body.email, body.password)
    return AuthOutSchema(user=UserOutSchema.model_validate(user), token=token)
