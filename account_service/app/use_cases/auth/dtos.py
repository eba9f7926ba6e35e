"""
Authentication Use Case DTOs (Data Transfer Objects)

Response classes for the login and password reset use cases.
"""

from pydantic import BaseModel


class LoginResponse(BaseModel):
    """Response for login use case"""

    message: str
    username: str


class ForgotPasswordResponse(BaseModel):
    """Response for forgot password use case"""

    message: str


class ResetPasswordResponse(BaseModel):
    """Response for reset password use case"""

    message: str
