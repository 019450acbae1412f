"""Query resolvers for AppSync GraphQL API."""

from ..datasources import PRODUCT_DATASOURCE_KEY
from ..resolver_builder import ResolverBuilder

PRODUCT_QUERY_FIELDS = (
    "getProductById",
    "listProducts",
    "productsByCategory",
)


def create_query_resolvers(builder: ResolverBuilder) -> list:
    """
    Create all AppSync query resolvers.

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
                "type_name": "Query",
                "lambda_datasource_name": PRODUCT_DATASOURCE_KEY,
            }
            for field_name in PRODUCT_QUERY_FIELDS
        ]
    )
