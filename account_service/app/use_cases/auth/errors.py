"""
Error codes returned by the authentication use cases.

Grouped by category; the API layer maps each category to an HTTP status.
"""


class ErrorCode:
    # ValidationError
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # ConflictError
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    USERNAME_ALREADY_EXISTS = "USERNAME_ALREADY_EXISTS"

    # NotFoundError
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # AuthError
    INCORRECT_PASSWORD = "INCORRECT_PASSWORD"

    # InvalidTokenError
    INVALID_TOKEN = "INVALID_TOKEN"

    # InfrastructureError
    NOTIFICATION_FAILED = "NOTIFICATION_FAILED"


CONFLICT_CODES = (ErrorCode.EMAIL_ALREADY_EXISTS, ErrorCode.USERNAME_ALREADY_EXISTS)
