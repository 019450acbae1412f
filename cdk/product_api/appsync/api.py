"""AppSync API creation."""

import os
from typing import TYPE_CHECKING, Callable

from aws_cdk import Duration, Expiration
from aws_cdk import aws_appsync as appsync
from constructs import Construct

from ..helpers import get_context_bool

if TYPE_CHECKING:
    from aws_cdk import aws_cognito as cognito


SCHEMA_PATH = os.path.join(os.path.dirname(__file__), "..", "..", "..", "schema", "schema.graphql")

API_KEY_LIFETIME_DAYS = 365


def _create_authorization_config(user_pool: "cognito.IUserPool") -> appsync.AuthorizationConfig:
    """API key by default, Cognito user pool tokens as the additional mode."""
    return appsync.AuthorizationConfig(
        default_authorization=appsync.AuthorizationMode(
            authorization_type=appsync.AuthorizationType.API_KEY,
            api_key_config=appsync.ApiKeyConfig(
                expires=Expiration.after(Duration.days(API_KEY_LIFETIME_DAYS)),
            ),
        ),
        additional_authorization_modes=[
            appsync.AuthorizationMode(
                authorization_type=appsync.AuthorizationType.USER_POOL,
                user_pool_config=appsync.UserPoolConfig(user_pool=user_pool),
            ),
        ],
    )


def create_appsync_api(
    scope: Construct,
    resource_name: Callable[[str], str],
    user_pool: "cognito.IUserPool",
) -> appsync.GraphqlApi:
    """
    Create the AppSync GraphQL API with authorization.

    Args:
        scope: CDK construct scope
        resource_name: Function to generate resource names
        user_pool: Cognito User Pool for authentication

    Returns:
        The created GraphQL API
    """
    # Determine if logging should be enabled
    enable_api_logging = get_context_bool(scope, "enable_api_logging", default=True)

    api_name = resource_name("cdk-product-api")
    print(f"Creating AppSync API: {api_name}")

    return appsync.GraphqlApi(
        scope,
        "cdk-product-app",
        name=api_name,
        definition=appsync.Definition.from_file(SCHEMA_PATH),
        authorization_config=_create_authorization_config(user_pool),
        log_config=(
            appsync.LogConfig(field_log_level=appsync.FieldLogLevel.ALL)
            if enable_api_logging
            else None
        ),
    )
