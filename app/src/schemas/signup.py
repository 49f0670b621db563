from pydantic import BaseModel, field_validator
from typing import Any, Literal

MISSING_FIELDS_MESSAGE = "Name and email are required."
SIGNUP_SUCCESS_MESSAGE = "Successfully signed up!"
DUPLICATE_EMAIL_MESSAGE = "This email address has already been registered."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


class SignupCreate(BaseModel):
    name: str
    email: str

    class Config:
        # Numbers are stored by their text form, like a TEXT column would
        coerce_numbers_to_str = True

    @field_validator("name", "email", mode="before")
    @classmethod
    def booleans_as_integers(cls, value: Any) -> Any:
        """Booleans bind as the integers 1 and 0."""
        if isinstance(value, bool):
            return str(int(value))
        return value


class SignupSuccess(BaseModel):
    success: Literal[True] = True
    message: str = SIGNUP_SUCCESS_MESSAGE


class SignupError(BaseModel):
    error: str
