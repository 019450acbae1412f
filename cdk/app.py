#!/usr/bin/env python3
import os
from pathlib import Path

import aws_cdk as cdk

from product_api.helpers import get_region, get_region_abbrev, load_env_file
from product_api.product_api_stack import ProductApiStack

# Load environment variables from .env file if it exists
load_env_file(Path(__file__).parent / ".env")

app = cdk.App()

# Get environment from context or environment variable (dev/prod)
env_name = app.node.try_get_context("environment") or os.getenv("ENVIRONMENT", "dev")

# Get region and its abbreviation for stack naming
region = get_region()
region_abbrev = get_region_abbrev(region)

account = os.getenv("AWS_ACCOUNT_ID") or os.getenv("CDK_DEFAULT_ACCOUNT")

# Configure environment
env = cdk.Environment(
    account=account,
    region=region,
)

# Environment-specific stack name with region: cdk-product-api-{region}-{env}
stack_name = f"cdk-product-api-{region_abbrev}-{env_name}"

ProductApiStack(
    app,
    f"ProductApiStack-{region_abbrev}-{env_name}",
    stack_name=stack_name,
    env_name=env_name,
    env=env,
    description=f"Product API - GraphQL backend ({region_abbrev}-{env_name})",
)

app.synth()
