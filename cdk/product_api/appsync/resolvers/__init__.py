"""AppSync resolvers module for GraphQL API.

This module provides resolver creation for the AppSync GraphQL API,
organized into:
- mutations: Mutation resolvers (create, update, delete operations)
- queries: Query resolvers (read operations)
"""

from aws_cdk import aws_appsync as appsync
from constructs import Construct

from ..resolver_builder import ResolverBuilder
from .mutations import PRODUCT_MUTATION_FIELDS, create_mutation_resolvers
from .queries import PRODUCT_QUERY_FIELDS, create_query_resolvers

__all__ = [
    "create_resolvers",
    "create_mutation_resolvers",
    "create_query_resolvers",
    "PRODUCT_MUTATION_FIELDS",
    "PRODUCT_QUERY_FIELDS",
]


def create_resolvers(
    scope: Construct,
    api: appsync.GraphqlApi,
    lambda_datasources: dict[str, appsync.LambdaDataSource],
) -> list[appsync.Resolver]:
    """
    Create all AppSync resolvers for the GraphQL API.

    Orchestrates creation of query and mutation resolvers.

    Args:
        scope: CDK construct scope
        api: AppSync GraphQL API
        lambda_datasources: Dictionary of Lambda data sources

    Returns:
        All created resolvers, queries first
    """
    builder = ResolverBuilder(api, lambda_datasources, scope)

    resolvers = create_query_resolvers(builder)
    resolvers.extend(create_mutation_resolvers(builder))
    return resolvers
