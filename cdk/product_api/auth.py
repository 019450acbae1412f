"""Cognito User Pool authentication configuration for the product API stack.

This module creates and configures:
- Cognito User Pool with self sign-up and emailed verification codes
- User Pool Client used by the frontend to obtain tokens
- ADMIN-style user group that is allowed to run product mutations
"""

from typing import Any, Callable

from aws_cdk import aws_cognito as cognito
from constructs import Construct

# Group named in the schema's @aws_cognito_user_pools(cognito_groups: [...]) directives
ADMIN_GROUP_NAME = "Admin"


def _create_standard_attributes() -> cognito.StandardAttributes:
    """Email is the only standard attribute and users may change it."""
    return cognito.StandardAttributes(
        email=cognito.StandardAttribute(required=True, mutable=True),
    )


def _create_user_verification() -> cognito.UserVerificationConfig:
    """Verify sign-ups with an emailed code rather than a link."""
    return cognito.UserVerificationConfig(email_style=cognito.VerificationEmailStyle.CODE)


def create_cognito_auth(
    scope: Construct,
    rn: Callable[[str], str],
) -> dict[str, Any]:
    """Create Cognito User Pool and related authentication resources.

    Args:
        scope: CDK construct scope
        rn: Resource naming function (name -> formatted name)

    Returns:
        Dictionary containing user_pool, user_pool_client and admin_group
    """
    user_pool_name = rn("cdk-products-user-pool")
    print(f"Creating User Pool: {user_pool_name}")

    user_pool = cognito.UserPool(
        scope,
        "cdk-products-user-pool",
        user_pool_name=user_pool_name,
        self_sign_up_enabled=True,
        account_recovery=cognito.AccountRecovery.PHONE_AND_EMAIL,
        user_verification=_create_user_verification(),
        auto_verify=cognito.AutoVerifiedAttrs(email=True),
        standard_attributes=_create_standard_attributes(),
    )

    user_pool_client = cognito.UserPoolClient(
        scope,
        "UserPoolClient",
        user_pool=user_pool,
    )

    admin_group = cognito.CfnUserPoolGroup(
        scope,
        "AdminGroup",
        user_pool_id=user_pool.user_pool_id,
        group_name=ADMIN_GROUP_NAME,
        description="Users allowed to create, update and delete products",
    )

    return {
        "user_pool": user_pool,
        "user_pool_client": user_pool_client,
        "admin_group": admin_group,
    }
