"""
AppSync GraphQL API module for the product API.

This module orchestrates the creation of the AppSync GraphQL API infrastructure:

- api.py: API creation with API key and user pool authorization
- datasources.py: Lambda data source creation
- resolver_builder.py: Declarative resolver construction
- resolvers/: Resolver wiring organized by type
  - queries.py: Query resolvers
  - mutations.py: Mutation resolvers
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from aws_cdk import aws_appsync as appsync
from constructs import Construct

from .api import create_appsync_api
from .datasources import PRODUCT_DATASOURCE_KEY, create_lambda_datasource
from .resolvers import create_resolvers

if TYPE_CHECKING:
    from aws_cdk import aws_cognito as cognito
    from aws_cdk import aws_lambda as lambda_


@dataclass
class AppSyncResources:
    """Container for all AppSync resources created by setup_appsync."""

    api: appsync.GraphqlApi
    lambda_datasources: dict[str, appsync.LambdaDataSource]
    resolvers: list[appsync.Resolver]


def setup_appsync(
    scope: Construct,
    resource_name: Callable[[str], str],
    user_pool: "cognito.IUserPool",
    product_handler: "lambda_.IFunction",
) -> AppSyncResources:
    """
    Set up the complete AppSync GraphQL API infrastructure.

    Args:
        scope: CDK construct scope
        resource_name: Function to generate resource names
        user_pool: Cognito User Pool for authentication
        product_handler: Lambda function resolving product fields

    Returns:
        AppSyncResources containing all created resources
    """
    api = create_appsync_api(scope=scope, resource_name=resource_name, user_pool=user_pool)

    # Set the Lambda function as a data source for the AppSync API
    lambda_datasources = {
        PRODUCT_DATASOURCE_KEY: create_lambda_datasource(api, product_handler),
    }

    resolvers = create_resolvers(scope=scope, api=api, lambda_datasources=lambda_datasources)

    return AppSyncResources(
        api=api,
        lambda_datasources=lambda_datasources,
        resolvers=resolvers,
    )


__all__ = ["setup_appsync", "AppSyncResources"]
