"""Tests for error handling utilities."""

from botocore.exceptions import ClientError

from utils.errors import AppError, ErrorCode, handle_error


class TestAppError:
    """Tests for AppError class."""

    def test_app_error_with_message(self) -> None:
        """Test creating AppError with message."""
        error = AppError(ErrorCode.NOT_FOUND, "Product not found")

        assert error.error_code == ErrorCode.NOT_FOUND
        assert error.message == "Product not found"
        assert error.details == {}
        assert str(error) == "Product not found"

    def test_app_error_to_dict(self) -> None:
        """Test converting AppError to dict."""
        error = AppError(ErrorCode.INVALID_INPUT, "Bad product", {"field": "name"})

        result = error.to_dict()

        assert result == {"errorCode": "INVALID_INPUT", "message": "Bad product", "field": "name"}


class TestHandleError:
    """Tests for handle_error function."""

    def test_app_error_keeps_code_and_details(self) -> None:
        error = AppError(ErrorCode.ALREADY_EXISTS, "Product exists", {"id": "p-1"})

        assert handle_error(error) == {"errorCode": "ALREADY_EXISTS", "message": "Product exists", "id": "p-1"}

    def test_client_error_is_database_error(self) -> None:
        error = ClientError(
            {"Error": {"Code": "ProvisionedThroughputExceededException", "Message": "slow down"}}, "PutItem"
        )

        result = handle_error(error)

        assert result["errorCode"] == ErrorCode.DATABASE_ERROR
        assert result["awsErrorCode"] == "ProvisionedThroughputExceededException"

    def test_other_exception_is_internal_error(self) -> None:
        result = handle_error(KeyError("price"))

        assert result["errorCode"] == ErrorCode.INTERNAL_ERROR
        assert result["exceptionType"] == "KeyError"
