"""
Signup Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- SignupCommand: Input to use case (business intent)
- SignupResponse: Output from use case (structured result)
"""

from pydantic import BaseModel, Field


class SignupCommand(BaseModel):
    """
    Signup command - represents signup intent

    Created by API layer from the HTTP payload. Fields may still be empty;
    the use case rejects that with VALIDATION_ERROR.
    """

    username: str = ""
    email: str = ""
    password: str = ""
    is_google: bool = False


class SignupResponse(BaseModel):
    """
    Signup response - structured output from use case

    created is False only when a Google signup matched an existing email;
    the API layer uses it to pick 201 or 200 and does not serialize it.
    """

    message: str
    username: str
    created: bool = Field(default=True, exclude=True)
