from typing import Any

from aws_cdk import CfnOutput, Stack
from aws_cdk import aws_appsync as appsync
from aws_cdk import aws_cognito as cognito
from aws_cdk import aws_dynamodb as dynamodb
from constructs import Construct

from .appsync import setup_appsync
from .auth import create_cognito_auth
from .dynamodb_tables import create_product_table
from .helpers import get_region_abbrev, make_resource_namer
from .lambdas import create_product_handler

PRODUCT_TABLE_ENV_VAR = "PRODUCT_TABLE"


class ProductApiStack(Stack):
    """
    Product API - GraphQL backend stack

    Creates:
    - Cognito User Pool and client for authenticated access
    - AppSync GraphQL API (API key default, user pool additional)
    - Product handler Lambda and its six resolvers
    - DynamoDB products table with a category index
    """

    def __init__(self, scope: Construct, construct_id: str, env_name: str = "dev", **kwargs: Any) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.env_name = env_name
        self.region_abbrev = get_region_abbrev()

        # Helper for consistent resource naming: {name}-{region}-{env}
        rn = make_resource_namer(self.region_abbrev, env_name)
        self.resource_name = rn

        # ====================================================================
        # Cognito
        # ====================================================================
        auth = create_cognito_auth(self, rn)
        self.user_pool: cognito.UserPool = auth["user_pool"]
        self.user_pool_client: cognito.UserPoolClient = auth["user_pool_client"]
        self.admin_group = auth["admin_group"]

        # ====================================================================
        # Lambda + AppSync
        # ====================================================================
        self.product_handler = create_product_handler(self, rn)

        appsync_resources = setup_appsync(
            self,
            resource_name=rn,
            user_pool=self.user_pool,
            product_handler=self.product_handler,
        )
        self.api: appsync.GraphqlApi = appsync_resources.api
        self.lambda_datasources = appsync_resources.lambda_datasources
        self.resolvers = appsync_resources.resolvers

        # ====================================================================
        # DynamoDB
        # ====================================================================
        self.product_table: dynamodb.Table = create_product_table(self)

        # Enable the Lambda function to access the DynamoDB table (using IAM)
        self.product_table.grant_full_access(self.product_handler)

        # Create an environment variable that the function code reads
        self.product_handler.add_environment(PRODUCT_TABLE_ENV_VAR, self.product_table.table_name)

        self._create_outputs()

    def _create_outputs(self) -> None:
        """Export the values a frontend needs to talk to this backend."""
        CfnOutput(
            self,
            "GraphQLAPIURL",
            value=self.api.graphql_url,
            description="AppSync GraphQL endpoint URL",
        )

        CfnOutput(
            self,
            "AppSyncApiKey",
            value=self.api.api_key or "",
            description="AppSync API Key for public product reads",
        )

        CfnOutput(
            self,
            "ProjectRegion",
            value=self.region,
            description="Region the stack is deployed to",
        )

        CfnOutput(
            self,
            "UserPoolId",
            value=self.user_pool.user_pool_id,
            description="Cognito User Pool ID",
        )

        CfnOutput(
            self,
            "UserPoolClientId",
            value=self.user_pool_client.user_pool_client_id,
            description="Cognito User Pool Client ID",
        )

        CfnOutput(
            self,
            "ProductTableName",
            value=self.product_table.table_name,
            description="Generated name of the products DynamoDB table",
        )
