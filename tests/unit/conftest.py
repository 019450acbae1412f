"""
Test fixtures for Lambda function tests.

Provides common test data and mocked AWS resources.
"""

from decimal import Decimal
from typing import Any, Dict, Generator

import boto3
import pytest
from moto import mock_aws

PRODUCT_TABLE_NAME = "cdk-product-table-ue1-test"


@pytest.fixture
def aws_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set fake AWS credentials for moto."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("PRODUCT_TABLE", PRODUCT_TABLE_NAME)
    monkeypatch.delenv("DYNAMODB_ENDPOINT", raising=False)


@pytest.fixture
def products_table(aws_credentials: None) -> Generator[Any, None, None]:
    """Create the mock products table with its category index."""
    with mock_aws():
        dynamodb = boto3.resource("dynamodb", region_name="us-east-1")

        table = dynamodb.create_table(
            TableName=PRODUCT_TABLE_NAME,
            KeySchema=[
                {"AttributeName": "id", "KeyType": "HASH"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "id", "AttributeType": "S"},
                {"AttributeName": "category", "AttributeType": "S"},
            ],
            GlobalSecondaryIndexes=[
                {
                    "IndexName": "productsByCategory",
                    "KeySchema": [
                        {"AttributeName": "category", "KeyType": "HASH"},
                    ],
                    "Projection": {"ProjectionType": "ALL"},
                },
            ],
            BillingMode="PAY_PER_REQUEST",
        )

        yield table


@pytest.fixture
def sample_product(products_table: Any) -> Dict[str, Any]:
    """Create a sample product in DynamoDB."""
    product = {
        "id": "product-123-abc",
        "name": "Caramel Corn",
        "description": "Classic caramel popcorn",
        "price": Decimal("12.50"),
        "category": "snacks",
        "sku": "CC-001",
        "inventory": 40,
    }
    products_table.put_item(Item=product)
    return product


@pytest.fixture
def lambda_context() -> Any:
    """Mock Lambda context."""

    class Context:
        function_name = "test-function"
        memory_limit_in_mb = 1024
        invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-function"
        aws_request_id = "test-request-id"

    return Context()


@pytest.fixture
def appsync_event() -> Dict[str, Any]:
    """Base AppSync event structure."""
    return {
        "arguments": {},
        "identity": {
            "sub": "user-123-abc",
            "username": "testuser",
            "groups": ["Admin"],
        },
        "requestContext": {
            "requestId": "test-correlation-id",
        },
        "info": {
            "fieldName": "testField",
            "parentTypeName": "Query",
        },
    }


def make_event(base: Dict[str, Any], field_name: str, parent_type: str, **arguments: Any) -> Dict[str, Any]:
    """Build an AppSync event for one field."""
    return {
        **base,
        "arguments": arguments,
        "info": {"fieldName": field_name, "parentTypeName": parent_type},
    }


@pytest.fixture
def event_for(appsync_event: Dict[str, Any]) -> Any:
    """Factory fixture: event_for("createProduct", "Mutation", product={...})."""

    def _event_for(field_name: str, parent_type: str = "Query", **arguments: Any) -> Dict[str, Any]:
        return make_event(appsync_event, field_name, parent_type, **arguments)

    return _event_for


@pytest.fixture(autouse=True)
def _clear_table_overrides() -> Generator[None, None, None]:
    """Make sure no test leaks a table override into the next."""
    yield
    from utils.dynamodb import clear_all_overrides

    clear_all_overrides()

