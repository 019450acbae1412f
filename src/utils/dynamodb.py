"""
Centralized DynamoDB table access utilities.

Provides singleton-pattern table accessors with lazy initialization
and test monkeypatch support.
"""

import os
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

import boto3

if TYPE_CHECKING:
    from mypy_boto3_dynamodb import DynamoDBServiceResource
    from mypy_boto3_dynamodb.service_resource import Table


PRODUCT_TABLE_ENV_VAR = "PRODUCT_TABLE"
PRODUCTS_BY_CATEGORY_INDEX = "productsByCategory"

# Module-level cache for test overrides
_table_overrides: dict[str, Optional["Table"]] = {}


def get_required_env(name: str) -> str:
    """Get a required environment variable.

    Raises:
        ValueError: If the env var is not set or empty
    """
    value = os.getenv(name)
    if not value:
        raise ValueError(f"Required environment variable '{name}' is not set")
    return value


def _get_dynamodb() -> "DynamoDBServiceResource":
    """Get DynamoDB resource with optional endpoint override for LocalStack."""
    return boto3.resource("dynamodb", endpoint_url=os.getenv("DYNAMODB_ENDPOINT"))


class TableAccessor:
    """Centralized access to DynamoDB tables with environment-based naming."""

    _instance: Optional["TableAccessor"] = None

    def __new__(cls) -> "TableAccessor":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def products(self) -> "Table":
        """Get products table instance."""
        if override := _table_overrides.get("products"):
            return override
        table_name = get_required_env(PRODUCT_TABLE_ENV_VAR)
        return _get_dynamodb().Table(table_name)


# Singleton instance for import
tables = TableAccessor()


def collect_all_items(operation: Callable[..., Dict[str, Any]], **kwargs: Any) -> List[Dict[str, Any]]:
    """Run a scan or query until DynamoDB stops returning LastEvaluatedKey.

    Args:
        operation: Bound table method, e.g. ``table.scan`` or ``table.query``
        **kwargs: Arguments passed to every page request

    Returns:
        Items from all pages, in the order DynamoDB returned them
    """
    items: List[Dict[str, Any]] = []
    while True:
        response = operation(**kwargs)
        items.extend(response.get("Items", []))
        last_key = response.get("LastEvaluatedKey")
        if not last_key:
            return items
        kwargs["ExclusiveStartKey"] = last_key


# Test utilities
def override_table(table_name: str, table: Optional["Table"]) -> None:
    """Override a table for testing. Set to None to clear override."""
    _table_overrides[table_name] = table


def clear_all_overrides() -> None:
    """Clear all table overrides (call in test teardown)."""
    _table_overrides.clear()
