"""
GraphQL response builders for Lambda resolvers.

DynamoDB returns numbers as Decimal, which the Lambda runtime cannot
serialize, so items are normalized here before they go back to AppSync.
"""

from typing import Any, Dict, List, Optional, TypedDict, cast


class ProductResponse(TypedDict, total=False):
    """GraphQL Product response type."""

    id: str
    name: str
    description: str
    price: float
    category: str
    sku: Optional[str]
    inventory: Optional[int]


def _to_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _to_optional_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def build_product_response(item: Dict[str, Any]) -> ProductResponse:
    """
    Build a Product response from a DynamoDB item.

    Args:
        item: DynamoDB item dictionary

    Returns:
        ProductResponse with JSON-serializable values
    """
    return ProductResponse(
        id=cast(str, item.get("id", "")),
        name=cast(str, item.get("name", "")),
        description=cast(str, item.get("description", "")),
        price=_to_float(item.get("price", 0)),
        category=cast(str, item.get("category", "")),
        sku=item.get("sku"),
        inventory=_to_optional_int(item.get("inventory")),
    )


def build_product_list_response(items: List[Dict[str, Any]]) -> List[ProductResponse]:
    """Build Product responses for a list of DynamoDB items."""
    return [build_product_response(item) for item in items]
