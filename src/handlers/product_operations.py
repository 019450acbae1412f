"""
Product operations Lambda handler.

One Lambda data source backs every product field on the GraphQL API, so the
handler dispatches on the AppSync field name:
- Queries: getProductById, listProducts, productsByCategory
- Mutations: createProduct, updateProduct, deleteProduct
"""

import uuid
from typing import Any, Callable, Dict, List, Optional

from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from utils.dynamodb import PRODUCTS_BY_CATEGORY_INDEX, collect_all_items, tables
from utils.errors import AppError, ErrorCode, handle_error
from utils.logging import get_logger
from utils.responses import ProductResponse, build_product_list_response, build_product_response
from utils.validation import validate_product_input, validate_product_update

logger = get_logger(__name__)


def _is_conditional_check_failure(error: ClientError) -> bool:
    return error.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException"


def _require_argument(arguments: Dict[str, Any], name: str) -> str:
    value = arguments.get(name)
    if not value:
        raise AppError(ErrorCode.INVALID_INPUT, f"{name} is required")
    return str(value)


def get_product_by_id(arguments: Dict[str, Any]) -> Optional[ProductResponse]:
    """Return a single product, or None when the id is unknown."""
    product_id = _require_argument(arguments, "productId")

    response = tables.products.get_item(Key={"id": product_id})
    item = response.get("Item")
    if item is None:
        logger.info("Product not found", productId=product_id)
        return None

    return build_product_response(item)


def list_products(arguments: Dict[str, Any]) -> List[ProductResponse]:
    """Return every product in the table."""
    items = collect_all_items(tables.products.scan)
    logger.info("Listed products", count=len(items))
    return build_product_list_response(items)


def products_by_category(arguments: Dict[str, Any]) -> List[ProductResponse]:
    """Return the products in one category using the category index."""
    category = _require_argument(arguments, "category")

    items = collect_all_items(
        tables.products.query,
        IndexName=PRODUCTS_BY_CATEGORY_INDEX,
        KeyConditionExpression=Key("category").eq(category),
    )
    logger.info("Listed products by category", category=category, count=len(items))
    return build_product_list_response(items)


def create_product(arguments: Dict[str, Any]) -> ProductResponse:
    """
    Create a product.

    The caller may supply an id; otherwise a UUID is generated. An existing
    product is never overwritten.

    Raises:
        AppError: INVALID_INPUT / INVALID_PRICE on bad input, ALREADY_EXISTS on id clash
    """
    product = arguments.get("product") or {}
    attributes = validate_product_input(product)

    product_id = product.get("id") or str(uuid.uuid4())
    item = {"id": product_id, **attributes}

    try:
        tables.products.put_item(
            Item=item,
            ConditionExpression="attribute_not_exists(#id)",
            ExpressionAttributeNames={"#id": "id"},
        )
    except ClientError as e:
        if _is_conditional_check_failure(e):
            raise AppError(ErrorCode.ALREADY_EXISTS, f"Product {product_id} already exists", {"id": product_id})
        raise

    logger.info("Created product", productId=product_id, category=item["category"])
    return build_product_response(item)


def update_product(arguments: Dict[str, Any]) -> ProductResponse:
    """
    Update the provided attributes of an existing product.

    Fields validated to None (an empty sku) are removed from the item.

    Raises:
        AppError: INVALID_INPUT if nothing to update, NOT_FOUND if the product does not exist
    """
    product_id, changes = validate_product_update(arguments.get("product") or {})

    # Build DynamoDB update expression
    set_clauses = []
    remove_clauses = []
    expression_attribute_names = {"#id": "id"}
    expression_attribute_values = {}
    for field, value in changes.items():
        expression_attribute_names[f"#{field}"] = field
        if value is None:
            remove_clauses.append(f"#{field}")
        else:
            set_clauses.append(f"#{field} = :{field}")
            expression_attribute_values[f":{field}"] = value

    clauses = []
    if set_clauses:
        clauses.append("SET " + ", ".join(set_clauses))
    if remove_clauses:
        clauses.append("REMOVE " + ", ".join(remove_clauses))

    update_kwargs: Dict[str, Any] = {
        "Key": {"id": product_id},
        "UpdateExpression": " ".join(clauses),
        "ExpressionAttributeNames": expression_attribute_names,
        "ConditionExpression": "attribute_exists(#id)",  # Ensure product exists
        "ReturnValues": "ALL_NEW",
    }
    # DynamoDB rejects an empty ExpressionAttributeValues map
    if expression_attribute_values:
        update_kwargs["ExpressionAttributeValues"] = expression_attribute_values

    try:
        response = tables.products.update_item(**update_kwargs)
    except ClientError as e:
        if _is_conditional_check_failure(e):
            raise AppError(ErrorCode.NOT_FOUND, f"Product {product_id} not found", {"id": product_id})
        raise

    logger.info("Updated product", productId=product_id, fields=sorted(changes))
    return build_product_response(response["Attributes"])


def delete_product(arguments: Dict[str, Any]) -> str:
    """
    Delete a product and return its id.

    Raises:
        AppError: NOT_FOUND if the product does not exist
    """
    product_id = _require_argument(arguments, "productId")

    try:
        tables.products.delete_item(
            Key={"id": product_id},
            ConditionExpression="attribute_exists(#id)",
            ExpressionAttributeNames={"#id": "id"},
        )
    except ClientError as e:
        if _is_conditional_check_failure(e):
            raise AppError(ErrorCode.NOT_FOUND, f"Product {product_id} not found", {"id": product_id})
        raise

    logger.info("Deleted product", productId=product_id)
    return product_id


FIELD_RESOLVERS: Dict[str, Callable[[Dict[str, Any]], Any]] = {
    "getProductById": get_product_by_id,
    "listProducts": list_products,
    "productsByCategory": products_by_category,
    "createProduct": create_product,
    "updateProduct": update_product,
    "deleteProduct": delete_product,
}


def handler(event: Dict[str, Any], context: Any) -> Any:
    """
    AppSync Lambda resolver entry point.

    Args:
        event: AppSync event with info.fieldName and arguments
        context: Lambda context (unused)

    Returns:
        The resolved GraphQL field value

    Raises:
        AppError: For unsupported fields and rejected input
    """
    logger.bind_event(event)

    field_name = (event.get("info") or {}).get("fieldName")
    resolver = FIELD_RESOLVERS.get(field_name or "")
    if resolver is None:
        raise AppError(ErrorCode.INVALID_INPUT, f"Unsupported field: {field_name}", {"fieldName": field_name})

    logger.info("product handler invoked", fieldName=field_name)

    try:
        return resolver(event.get("arguments") or {})
    except AppError as e:
        logger.warning("Request rejected", fieldName=field_name, error=handle_error(e))
        raise
    except Exception as e:
        logger.error("Failed to resolve product field", fieldName=field_name, error=handle_error(e))
        raise
