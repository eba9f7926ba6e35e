"""
Use Cases

- auth/: account signup, login and password reset flows
"""

from .auth import (
    SignupUseCase,
    SignupCommand,
    SignupResponse,
    LoginUseCase,
    ForgotPasswordUseCase,
    ResetPasswordUseCase,
)

__all__ = [
    "SignupUseCase",
    "SignupCommand",
    "SignupResponse",
    "LoginUseCase",
    "ForgotPasswordUseCase",
    "ResetPasswordUseCase",
]
