"""Lambda function definitions for the product API stack.

This module creates the single product handler that resolves every
query and mutation on the GraphQL API.
"""

import os
from typing import Callable

from aws_cdk import Duration
from aws_cdk import aws_lambda as lambda_
from constructs import Construct

PRODUCT_HANDLER_ENTRY = "handlers.product_operations.handler"
PRODUCT_HANDLER_MEMORY_MB = 1024

# Use only the src directory for Lambda code (not the entire repo)
LAMBDA_CODE_PATH = os.path.join(os.path.dirname(__file__), "..", "..", "src")


def create_product_handler(
    scope: Construct,
    rn: Callable[[str], str],
) -> lambda_.Function:
    """Create the product handler Lambda function.

    The PRODUCT_TABLE variable is added by the stack once the table exists.

    Args:
        scope: CDK construct scope
        rn: Resource naming function (name -> formatted name)

    Returns:
        The product handler function
    """
    lambda_code = lambda_.Code.from_asset(
        LAMBDA_CODE_PATH,
        exclude=[
            "__pycache__",
            "*.pyc",
            ".pytest_cache",
        ],
    )

    return lambda_.Function(
        scope,
        "AppSyncProductHandler",
        function_name=rn("cdk-product-handler"),
        runtime=lambda_.Runtime.PYTHON_3_13,
        handler=PRODUCT_HANDLER_ENTRY,
        code=lambda_code,
        timeout=Duration.seconds(30),
        memory_size=PRODUCT_HANDLER_MEMORY_MB,
        environment={
            "LOG_LEVEL": "INFO",
        },
    )
