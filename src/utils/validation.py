"""
Input validation utilities.

Validates and normalizes product input coming from GraphQL mutations.
"""

from decimal import Clamped, Decimal, Inexact, InvalidOperation, Overflow, Rounded, Underflow
from typing import Any, Dict, Tuple

from boto3.dynamodb.types import DYNAMODB_CONTEXT

from .errors import AppError, ErrorCode

REQUIRED_PRODUCT_FIELDS = ("name", "description", "price", "category")
OPTIONAL_PRODUCT_FIELDS = ("sku", "inventory")
UPDATABLE_PRODUCT_FIELDS = REQUIRED_PRODUCT_FIELDS + OPTIONAL_PRODUCT_FIELDS

# Optional string fields an update may clear by sending an empty string
CLEARABLE_PRODUCT_FIELDS = ("sku",)


def _fits_dynamodb_number(value: Decimal) -> bool:
    """True if DynamoDB can store the value exactly (38 digits, bounded exponent)."""
    try:
        DYNAMODB_CONTEXT.create_decimal(value)
    except (Clamped, Inexact, Overflow, Rounded, Underflow):
        return False
    return True


def parse_price(price: Any) -> Decimal:
    """
    Convert a GraphQL Float price to a Decimal DynamoDB can store.

    Args:
        price: Price as received from AppSync (int, float or numeric string)

    Returns:
        Non-negative Decimal price

    Raises:
        AppError: If the price is not a finite, non-negative number within DynamoDB's number range
    """
    if isinstance(price, bool):
        raise AppError(ErrorCode.INVALID_PRICE, "Price must be a number", {"price": price})

    try:
        # Go through str() so 9.99 stays 9.99 instead of its binary expansion
        value = Decimal(str(price))
    except (InvalidOperation, ValueError):
        raise AppError(ErrorCode.INVALID_PRICE, "Price must be a number", {"price": price})

    if not value.is_finite() or value < 0:
        raise AppError(ErrorCode.INVALID_PRICE, "Price must be zero or greater", {"price": str(price)})

    if not _fits_dynamodb_number(value):
        raise AppError(ErrorCode.INVALID_PRICE, "Price is out of range", {"price": str(price)})

    return value


def parse_inventory(inventory: Any) -> int:
    """
    Validate an inventory count.

    Raises:
        AppError: If inventory is not a non-negative integer DynamoDB can store
    """
    if (
        isinstance(inventory, bool)
        or not isinstance(inventory, int)
        or inventory < 0
        or not _fits_dynamodb_number(Decimal(inventory))
    ):
        raise AppError(
            ErrorCode.INVALID_INPUT,
            "Inventory must be a non-negative integer",
            {"inventory": inventory},
        )
    return inventory


def _normalize_field(field: str, value: Any) -> Any:
    """Normalize a single product field, rejecting blank strings."""
    if field == "price":
        return parse_price(value)
    if field == "inventory":
        return parse_inventory(value)

    if not isinstance(value, str) or not value.strip():
        raise AppError(ErrorCode.INVALID_INPUT, f"Product {field} must be a non-empty string", {"field": field})
    return value.strip()


def validate_product_input(product: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate product input for createProduct.

    Requirements:
    - name, description, price and category are required
    - price must be a non-negative number
    - sku and inventory are optional

    Args:
        product: ProductInput dictionary

    Returns:
        Validated and normalized product attributes (without id)

    Raises:
        AppError: If validation fails
    """
    missing_fields = [field for field in REQUIRED_PRODUCT_FIELDS if product.get(field) is None]
    if missing_fields:
        raise AppError(
            ErrorCode.INVALID_INPUT,
            "Product is missing required fields",
            {"missingFields": missing_fields},
        )

    validated: Dict[str, Any] = {}
    for field in UPDATABLE_PRODUCT_FIELDS:
        value = product.get(field)
        if value is not None:
            validated[field] = _normalize_field(field, value)

    return validated


def validate_product_update(product: Dict[str, Any]) -> Tuple[str, Dict[str, Any]]:
    """
    Validate product input for updateProduct.

    An empty string for a field in CLEARABLE_PRODUCT_FIELDS clears it; that
    field maps to None in the returned changes.

    Args:
        product: UpdateProductInput dictionary

    Returns:
        Tuple of (product id, normalized attributes to change)

    Raises:
        AppError: If the id is missing or no attribute would change
    """
    product_id = product.get("id")
    if not product_id:
        raise AppError(ErrorCode.INVALID_INPUT, "Product id is required")

    changes: Dict[str, Any] = {}
    for field in UPDATABLE_PRODUCT_FIELDS:
        value = product.get(field)
        if value is None:
            continue
        if field in CLEARABLE_PRODUCT_FIELDS and isinstance(value, str) and not value.strip():
            changes[field] = None
        else:
            changes[field] = _normalize_field(field, value)

    if not changes:
        raise AppError(
            ErrorCode.INVALID_INPUT,
            "At least one field must be provided (" + ", ".join(UPDATABLE_PRODUCT_FIELDS) + ")",
        )

    return product_id, changes
