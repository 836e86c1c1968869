"""Pydantic schemas for registration, login and the public user projection."""
from skillsprout.schemas.base import CamelSchema


class RegisterSchema(CamelSchema):
    # Presence is checked by the auth service so every missing field
    # produces the same error shape.
    email: str | None = None
    password: str | None = None
    full_name: str | None = None
    emoji: str | None = None


class LoginSchema(CamelSchema):
    email: str | None = None
    password: str | None = None


class UserOutSchema(CamelSchema):
    """What clients see of a user. There is no password field on purpose."""

    id: str
    email: str
    full_name: str
    emoji: str
    xp: int = 0
    streak: int = 0
    hearts: int = 5


class AuthOutSchema(CamelSchema):
    user: UserOutSchema
    token: str
