from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, ConfigDict, EmailStr, Field

from account_service.api.error import ClientError, ServerError
from account_service.app.services.account_service import AccountService
from account_service.app.use_cases.auth import (
    ErrorCode,
    ForgotPasswordResponse,
    LoginResponse,
    ResetPasswordResponse,
    SignupResponse,
)
from account_service.app.use_cases.auth.errors import CONFLICT_CODES
from account_service.depends import get_account_service

router = APIRouter()


class SignupRequest(BaseModel):
    """
    Signup HTTP request payload

    isGoogle marks a signup coming from the Google sign-in button.
    """

    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., description="Desired username")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password")
    is_google: bool = Field(False, alias="isGoogle", description="Google signup flow")


@router.post(
    "/signup", status_code=status.HTTP_201_CREATED, response_model=SignupResponse
)
async def signup(
    request: SignupRequest,
    response: Response,
    service: AccountService = Depends(get_account_service),
):
    """
    User Signup

    Creates an account. In the Google flow an existing email logs the user
    in (200) and a taken username gets a numeric suffix.

    Raises:
        - 400 Bad Request: Missing fields, email or username already exists
        - 500 Internal Server Error: Server error
    """
    result = await service.signup(
        request.username, request.email, request.password, request.is_google
    )

    if result.is_err():
        error = result.error
        if error.code == ErrorCode.VALIDATION_ERROR or error.code in CONFLICT_CODES:
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    if not result.value.created:
        response.status_code = status.HTTP_200_OK
    return result.value


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    username: str = Field(..., description="Username")
    password: str = Field(..., description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest, service: AccountService = Depends(get_account_service)
):
    """
    User Login

    Checks the username/password pair. No session is created.

    Raises:
        - 400 Bad Request: Missing fields, unknown user or incorrect password
        - 500 Internal Server Error: Server error
    """
    result = await service.login(request.username, request.password)

    if result.is_err():
        error = result.error
        if error.code in (
            ErrorCode.VALIDATION_ERROR,
            ErrorCode.USER_NOT_FOUND,
            ErrorCode.INCORRECT_PASSWORD,
        ):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


class ForgotPasswordRequest(BaseModel):
    """Forgot password HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")


@router.post(
    "/forgot-password",
    status_code=status.HTTP_200_OK,
    response_model=ForgotPasswordResponse,
)
async def forgot_password(
    request: ForgotPasswordRequest,
    service: AccountService = Depends(get_account_service),
):
    """
    Forgot Password

    Stores a 30-minute reset token and emails a reset link.
    A malformed email address is rejected by request validation (400),
    not looked up.

    Raises:
        - 400 Bad Request: Missing or malformed email
        - 404 Not Found: No account with this email
        - 500 Internal Server Error: Email could not be sent, or server error
    """
    result = await service.forgot_password(request.email)

    if result.is_err():
        error = result.error
        if error.code == ErrorCode.VALIDATION_ERROR:
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == ErrorCode.USER_NOT_FOUND:
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class ResetPasswordRequest(BaseModel):
    """Reset password HTTP request payload"""

    model_config = ConfigDict(populate_by_name=True)

    token: str = Field(..., description="Reset token from the emailed link")
    new_password: str = Field(..., alias="newPassword", description="New password")


@router.post(
    "/reset-password",
    status_code=status.HTTP_200_OK,
    response_model=ResetPasswordResponse,
)
async def reset_password(
    request: ResetPasswordRequest,
    service: AccountService = Depends(get_account_service),
):
    """
    Reset Password

    Consumes the reset token and sets the new password. A token works once.

    Raises:
        - 400 Bad Request: Missing fields, invalid or expired token
        - 500 Internal Server Error: Server error
    """
    result = await service.reset_password(request.token, request.new_password)

    if result.is_err():
        error = result.error
        if error.code in (ErrorCode.VALIDATION_ERROR, ErrorCode.INVALID_TOKEN):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value
