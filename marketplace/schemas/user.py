"""
Pydantic schemas for user accounts and access tokens.
"""
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class UserCreate(BaseModel):
    """Schema for registering a new account"""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255, description="Public seller name")
    email: EmailStr = Field(..., description="Login email address")
    password: str = Field(..., min_length=8, description="Account password (min 8 characters)")

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        """bcrypt only reads the first 72 bytes, and spaces are rejected"""
        if len(value.encode("utf-8")) > 72:
            raise ValueError("The password field must not be greater than 72 bytes.")
        if " " in value:
            raise ValueError("The password field must not contain spaces.")
        return value


class UserResponse(BaseModel):
    """Account details returned to the account holder"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Lifetime in seconds")
