"""
Errors raised by the product resolvers.

AppSync turns an exception raised by a direct Lambda resolver into a GraphQL
error carrying the exception text, so resolvers raise AppError with a message
that is safe to show to the client.
"""

from typing import Any, Dict, Optional

from botocore.exceptions import ClientError


class ErrorCode:
    """Error codes reported by the product resolvers."""

    NOT_FOUND = "NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_PRICE = "INVALID_PRICE"

    # Only produced by handle_error, for failures a resolver did not raise itself
    DATABASE_ERROR = "DATABASE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppError(Exception):
    """A product request rejected by a resolver."""

    def __init__(self, error_code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.error_code = error_code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "errorCode": self.error_code,
            "message": self.message,
            **self.details,
        }


def handle_error(error: Exception) -> Dict[str, Any]:
    """
    Summarize an exception raised while resolving a product field.

    AppError keeps its own code and details. A botocore ClientError becomes
    DATABASE_ERROR with the AWS error code attached; anything else is
    INTERNAL_ERROR.

    Args:
        error: Exception raised by a resolver

    Returns:
        Dictionary logged as the ``error`` field of the handler's log line
    """
    if isinstance(error, AppError):
        return error.to_dict()

    if isinstance(error, ClientError):
        return {
            "errorCode": ErrorCode.DATABASE_ERROR,
            "message": str(error),
            "awsErrorCode": error.response.get("Error", {}).get("Code"),
        }

    return {
        "errorCode": ErrorCode.INTERNAL_ERROR,
        "message": str(error),
        "exceptionType": type(error).__name__,
    }
