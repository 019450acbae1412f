"""AppSync data source creation."""

from typing import TYPE_CHECKING

from aws_cdk import aws_appsync as appsync

if TYPE_CHECKING:
    from aws_cdk import aws_lambda as lambda_


PRODUCT_DATASOURCE_KEY = "product_handler"


def create_lambda_datasource(
    api: appsync.GraphqlApi,
    product_handler: "lambda_.IFunction",
) -> appsync.LambdaDataSource:
    """
    Create the Lambda data source backing every product resolver.

    Args:
        api: The AppSync GraphQL API
        product_handler: Product handler Lambda function

    Returns:
        The Lambda data source
    """
    return api.add_lambda_data_source(
        "lambdaDatasource",
        lambda_function=product_handler,
        name="ProductHandlerDataSource",
        description="Product handler Lambda resolving all product fields",
    )
