"""
Builder pattern for AppSync resolvers.

Keeps resolver wiring declarative: callers describe which GraphQL field goes to
which data source, and the builder creates the constructs with consistent ids.
"""

from typing import Any

from aws_cdk import aws_appsync as appsync
from constructs import Construct


class ResolverBuilder:
    """
    Builder for AppSync resolvers that delegate to Lambda data sources.

    Example:
        builder = ResolverBuilder(api, lambda_datasources, scope)

        builder.create_lambda_resolver(
            field_name="getProductById",
            type_name="Query",
            lambda_datasource_name="product_handler",
        )
    """

    def __init__(
        self,
        api: appsync.GraphqlApi,
        lambda_datasources: dict[str, appsync.LambdaDataSource],
        scope: Construct,
    ):
        """
        Initialize the resolver builder.

        Args:
            api: AppSync GraphQL API
            lambda_datasources: Dictionary of Lambda data sources (keyed by name)
            scope: CDK construct scope for creating resources
        """
        self.api = api
        self.lambda_datasources = lambda_datasources
        self.scope = scope

    def create_lambda_resolver(
        self,
        field_name: str,
        type_name: str,
        lambda_datasource_name: str,
        id_suffix: str | None = None,
    ) -> appsync.Resolver:
        """
        Create a Lambda resolver.

        Args:
            field_name: GraphQL field name
            type_name: GraphQL type name
            lambda_datasource_name: Key in lambda_datasources dict
            id_suffix: Optional custom CDK construct ID suffix

        Returns:
            The created resolver
        """
        resolver_id = id_suffix or f"{field_name}Resolver"

        lambda_ds = self.lambda_datasources[lambda_datasource_name]
        return lambda_ds.create_resolver(
            resolver_id,
            type_name=type_name,
            field_name=field_name,
        )

    def create_batch_resolvers(
        self,
        resolvers: list[dict[str, Any]],
    ) -> list[appsync.Resolver]:
        """
        Create multiple resolvers from a configuration list.

        Args:
            resolvers: List of resolver configurations, each containing:
                - type: "lambda"
                - field_name: GraphQL field name
                - type_name: GraphQL type name
                - lambda_datasource_name: Key in lambda_datasources dict
                - id_suffix: (optional) Custom CDK construct ID

        Returns:
            List of created resolvers
        """
        created = []
        for config in resolvers:
            resolver_type = config["type"]

            if resolver_type == "lambda":
                resolver = self.create_lambda_resolver(
                    field_name=config["field_name"],
                    type_name=config["type_name"],
                    lambda_datasource_name=config["lambda_datasource_name"],
                    id_suffix=config.get("id_suffix"),
                )
            else:
                raise ValueError(f"Unknown resolver type: {resolver_type}")

            created.append(resolver)

        return created
