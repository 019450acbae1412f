"""Tests for the dynamodb_tables module."""

import pytest
from aws_cdk import App, Stack, assertions
from aws_cdk import aws_dynamodb as dynamodb

from product_api.dynamodb_tables import PRODUCTS_BY_CATEGORY_INDEX, create_product_table


class TestCreateProductTable:
    """Tests for create_product_table function."""

    @pytest.fixture
    def stack(self):
        """Create a test stack."""
        app = App()
        return Stack(app, "TestStack")

    @pytest.fixture
    def template(self, stack):
        create_product_table(stack)
        return assertions.Template.from_stack(stack)

    def test_returns_table(self, stack):
        assert isinstance(create_product_table(stack), dynamodb.Table)

    def test_single_table(self, template):
        template.resource_count_is("AWS::DynamoDB::Table", 1)

    def test_partition_key_is_id(self, template):
        template.has_resource_properties(
            "AWS::DynamoDB::Table",
            {"KeySchema": [{"AttributeName": "id", "KeyType": "HASH"}]},
        )

    def test_uses_pay_per_request(self, template):
        template.has_resource_properties("AWS::DynamoDB::Table", {"BillingMode": "PAY_PER_REQUEST"})

    def test_table_name_is_generated(self, template):
        table = next(iter(template.find_resources("AWS::DynamoDB::Table").values()))

        assert "TableName" not in table["Properties"]

    def test_category_index(self, template):
        template.has_resource_properties(
            "AWS::DynamoDB::Table",
            {
                "GlobalSecondaryIndexes": [
                    {
                        "IndexName": PRODUCTS_BY_CATEGORY_INDEX,
                        "KeySchema": [{"AttributeName": "category", "KeyType": "HASH"}],
                        "Projection": {"ProjectionType": "ALL"},
                    }
                ]
            },
        )
