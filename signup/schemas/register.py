from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from signup.core.rules import (
    MSG_PASSWORDS_DIFFER,
    check_email,
    check_name,
    check_password,
)


class RegisterForm(BaseModel):
    """Fields typed into the registration form, checked before anything is sent."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="lowercase letters and digits, 4+ chars")
    email: str
    password: str
    confirm_password: str = Field(..., alias="confirmPassword")

    @field_validator("name")
    @classmethod
    def _name(cls, value: str) -> str:
        err = check_name(value)
        if err:
            raise PydanticCustomError("name", err)
        return value

    @field_validator("email")
    @classmethod
    def _email(cls, value: str) -> str:
        err = check_email(value)
        if err:
            raise PydanticCustomError("email", err)
        return value

    @field_validator("password")
    @classmethod
    def _password(cls, value: str) -> str:
        err = check_password(value)
        if err:
            raise PydanticCustomError("password", err)
        return value

    @field_validator("confirm_password")
    @classmethod
    def _confirm_password(cls, value: str, info: ValidationInfo) -> str:
        err = check_password(value)
        if err:
            raise PydanticCustomError("password", err)
        # password is absent from info.data when it failed its own check
        if "password" in info.data and value != info.data["password"]:
            raise PydanticCustomError("confirm_password", MSG_PASSWORDS_DIFFER)
        return value


class RegisterResponse(BaseModel):
    message: str = "User created successfully"


class ErrorResponse(BaseModel):
    error: str
