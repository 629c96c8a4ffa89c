"""Authentication schemas for request/response models."""

from pydantic import BaseModel, ConfigDict, Field

# Ids are stored as signed 64-bit integers
MAX_ID = 2**63 - 1


class RegisterRequest(BaseModel):
    """Request schema for user registration."""

    email: str = Field(..., min_length=1, description="User's email address")
    password: str = Field(..., min_length=1, description="User's password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "securepassword123",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for user login into one client app."""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    app_id: int = Field(
        ...,
        gt=0,
        le=MAX_ID,
        description="Client app the token is issued for",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "securepassword123",
                "app_id": 1,
            },
        },
    )


class LoginResponse(BaseModel):
    """Signed RS256 token for the requested app."""

    token: str


class RegisterResponse(BaseModel):
    user_id: int


class IsAdminResponse(BaseModel):
    is_admin: bool
