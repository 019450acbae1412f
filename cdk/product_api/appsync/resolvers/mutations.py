"""Mutation resolvers for AppSync GraphQL API."""

from ..datasources import PRODUCT_DATASOURCE_KEY
from ..resolver_builder import ResolverBuilder

# Writes are limited to the Admin group by the schema directives
PRODUCT_MUTATION_FIELDS = (
    "createProduct",
    "deleteProduct",
    "updateProduct",
)


def create_mutation_resolvers(builder: ResolverBuilder) -> list:
    """
    Create all AppSync mutation resolvers.

    Args:
        builder: Resolver builder holding the API and its data sources

    Returns:
        The created resolvers
    """
    return builder.create_batch_resolvers(
        [
            {
                "type": "lambda",
                "field_name": field_name,
                "type_name": "Mutation",
                "lambda_datasource_name": PRODUCT_DATASOURCE_KEY,
            }
            for field_name in PRODUCT_MUTATION_FIELDS
        ]
    )
