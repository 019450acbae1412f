"""Seed the products table with sample catalogue data.

Usage (dev only):
    PYTHONPATH=src python scripts/seed_products.py [products.json]

Prereqs:
- AWS credentials for the target account
- Environment variable PRODUCT_TABLE set to the stack's ProductTableName output

Without a file argument a small built-in sample is written. Puts are conditional,
so running the script twice never overwrites products edited through the API.
Each product goes through the same validation as createProduct; rejected rows
are reported and skipped.
"""

from __future__ import annotations

import json
import os
import sys
import uuid
from typing import Any, Dict, List

import boto3
from botocore.exceptions import ClientError

from utils.errors import AppError
from utils.validation import validate_product_input

SAMPLE_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": "sample-caramel-corn",
        "name": "Caramel Corn",
        "description": "Classic caramel coated popcorn",
        "price": "12.50",
        "category": "snacks",
        "sku": "SNK-001",
        "inventory": 100,
    },
    {
        "id": "sample-cheese-corn",
        "name": "White Cheddar Corn",
        "description": "Popcorn dusted with white cheddar",
        "price": "14.00",
        "category": "snacks",
        "sku": "SNK-002",
        "inventory": 80,
    },
    {
        "id": "sample-gift-tin",
        "name": "Three Flavor Gift Tin",
        "description": "Caramel, cheese and butter in one tin",
        "price": "35.00",
        "category": "gifts",
        "sku": "GFT-001",
        "inventory": 25,
    },
]


def load_products(path: str) -> List[Dict[str, Any]]:
    with open(path) as f:
        products = json.load(f)
    if not isinstance(products, list):
        raise ValueError(f"{path} must contain a JSON list of products")
    return products


def seed(table: Any, products: List[Dict[str, Any]]) -> int:
    """Write valid products that are not in the table yet. Returns the number written."""
    written = 0
    for product in products:
        product_id = product.get("id") or str(uuid.uuid4())
        try:
            item = {"id": product_id, **validate_product_input(product)}
        except AppError as e:
            print(f"Skipping {product_id}: {e.message} {e.details}")
            continue

        try:
            table.put_item(
                Item=item,
                ConditionExpression="attribute_not_exists(#id)",
                ExpressionAttributeNames={"#id": "id"},
            )
            written += 1
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") != "ConditionalCheckFailedException":
                raise
            print(f"Skipping {product_id}: already exists")

    print(f"Seeded {written} of {len(products)} products")
    return written


def main() -> None:
    table_name = os.getenv("PRODUCT_TABLE")
    if not table_name:
        raise RuntimeError("PRODUCT_TABLE is not set; aborting seed")

    products = load_products(sys.argv[1]) if len(sys.argv) > 1 else SAMPLE_PRODUCTS
    seed(boto3.resource("dynamodb").Table(table_name), products)


if __name__ == "__main__":
    main()
