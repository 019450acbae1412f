from aws_cdk import aws_dynamodb as ddb
from constructs import Construct

# GSI name doubles as the GraphQL query field that reads from it
PRODUCTS_BY_CATEGORY_INDEX = "productsByCategory"


def create_product_table(stack: Construct) -> ddb.Table:
    """Create the products table.

    The table name is left to CloudFormation; the handler learns it through
    the PRODUCT_TABLE environment variable.

    Args:
        stack: CDK Construct (usually the Stack instance)

    Returns:
        The products Table construct
    """
    product_table = ddb.Table(
        stack,
        "CDKProductTable",
        partition_key=ddb.Attribute(name="id", type=ddb.AttributeType.STRING),
        billing_mode=ddb.BillingMode.PAY_PER_REQUEST,
    )

    # Add a global secondary index to enable another data access pattern
    product_table.add_global_secondary_index(
        index_name=PRODUCTS_BY_CATEGORY_INDEX,
        partition_key=ddb.Attribute(name="category", type=ddb.AttributeType.STRING),
        projection_type=ddb.ProjectionType.ALL,
    )

    return product_table
