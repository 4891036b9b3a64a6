from pydantic import BaseModel, EmailStr, Field

from app.auth.schemas.user import AdminUserResponse


class LoginRequest(BaseModel):
    """Login request schema

    The email is not syntax-checked: any unknown value is just invalid credentials.
    """

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginData(BaseModel):
    """Payload returned after a successful login: the account and its bearer token."""

    user: AdminUserResponse
    token: str


class CreateAdminRequest(BaseModel):
    """One-time bootstrap of an administrator account"""

    email: EmailStr
    password: str = Field(..., min_length=1)


class Principal(BaseModel):
    """Identity claims decoded from a valid access token."""

    id: str
    email: str
    role: str
