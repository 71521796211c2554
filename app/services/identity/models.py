"""Identity models."""
from typing import Optional
from pydantic import BaseModel


class User(BaseModel):
    """User profile row."""

    id: str
    account_id: Optional[str] = None
    name: str
    email: str
    avatar: Optional[str] = None


class CreateUserParams(BaseModel):
    """Sign-up parameters."""

    email: str
    password: str
    name: str


class SignInParams(BaseModel):
    """Sign-in parameters."""

    email: str
    password: str
