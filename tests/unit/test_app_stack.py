"""
Unit tests for the AppStack.
"""

import json
import shutil

import pytest

pytest.importorskip("aws_cdk")
pytest.importorskip("cdk_nag")

from aws_cdk import App  # noqa: E402
from aws_cdk.assertions import Match, Template  # noqa: E402

from cdk import constants  # noqa: E402
from cdk.app_stack import AppStack  # noqa: E402

pytestmark = pytest.mark.skipif(shutil.which("node") is None, reason="AWS CDK needs a Node.js runtime")


@pytest.fixture
def build_folders(tmp_path, monkeypatch):
    """Point the Lambda and layer assets at throwaway folders."""
    service_folder = tmp_path / "service"
    layer_folder = tmp_path / "layer"
    service_folder.mkdir()
    layer_folder.mkdir()
    (service_folder / "placeholder.py").write_text("")
    (layer_folder / "placeholder.txt").write_text("")
    monkeypatch.setattr(constants, "SERVICE_BUILD_FOLDER", str(service_folder))
    monkeypatch.setattr(constants, "LAYER_BUILD_FOLDER", str(layer_folder))


@pytest.fixture
def template(build_folders) -> Template:
    """Create a CDK template for testing."""
    app = App()
    stack = AppStack(
        app,
        "TestStack",
        stage="dev",
        table_name="test-table",
    )
    return Template.from_stack(stack)


def test_dynamodb_table_created(template: Template) -> None:
    """Test that a DynamoDB table is created."""
    template.resource_count_is("AWS::DynamoDB::Table", 1)


def test_dynamodb_table_has_id_key_schema(template: Template) -> None:
    """Test that the DynamoDB table is keyed by id only."""
    template.has_resource_properties(
        "AWS::DynamoDB::Table",
        {
            "KeySchema": [
                {"AttributeName": "id", "KeyType": "HASH"},
            ],
        },
    )


def test_lambda_function_created(template: Template) -> None:
    """Test that a single Lambda function serves the API."""
    template.resource_count_is("AWS::Lambda::Function", 1)
    template.has_resource_properties(
        "AWS::Lambda::Function",
        {
            "Handler": "service.handlers.items_api.handler",
            "Environment": {
                "Variables": Match.object_like(
                    {
                        "POWERTOOLS_SERVICE_NAME": "ItemsApi",
                        "LOG_LEVEL": "DEBUG",
                    }
                ),
            },
        },
    )


def test_lambda_layer_created(template: Template) -> None:
    """Test that a Lambda layer is created."""
    template.resource_count_is("AWS::Lambda::LayerVersion", 1)


def test_lambda_has_tracing_enabled(template: Template) -> None:
    """Test that Lambda functions have X-Ray tracing enabled."""
    template.has_resource_properties(
        "AWS::Lambda::Function",
        {
            "TracingConfig": {"Mode": "Active"},
        },
    )


def test_api_routes_created(template: Template) -> None:
    """Test that POST /items and GET /items/{id} are exposed."""
    template.resource_count_is("AWS::ApiGateway::RestApi", 1)
    template.has_resource_properties("AWS::ApiGateway::Resource", {"PathPart": "items"})
    template.has_resource_properties("AWS::ApiGateway::Resource", {"PathPart": "{id}"})
    template.has_resource_properties("AWS::ApiGateway::Method", {"HttpMethod": "POST"})
    template.has_resource_properties("AWS::ApiGateway::Method", {"HttpMethod": "GET"})


def test_lambda_can_only_put_and_get(template: Template) -> None:
    """Test that the function role is limited to PutItem and GetItem."""
    rendered = json.dumps(template.find_resources("AWS::IAM::Policy"))

    assert "dynamodb:PutItem" in rendered
    assert "dynamodb:GetItem" in rendered
    for action in ("dynamodb:DeleteItem", "dynamodb:UpdateItem", "dynamodb:Scan", "dynamodb:Query"):
        assert action not in rendered
