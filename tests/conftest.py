import json
import os
from dataclasses import dataclass

import pytest

# Set environment variables before any imports to disable AWS Lambda Powertools features
# This must be done before importing any service modules that use Tracer/Metrics
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "test")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "test")
os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-1")


def pytest_configure(config):
    """
    Pytest hook that runs before test collection.
    Ensures environment variables are set before any service modules are imported.
    """
    os.environ["POWERTOOLS_TRACE_DISABLED"] = "true"
    os.environ["POWERTOOLS_METRICS_NAMESPACE"] = "test"
    os.environ["POWERTOOLS_SERVICE_NAME"] = "test"
    os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-1")


@pytest.fixture
def lambda_context():
    @dataclass
    class LambdaContext:
        function_name: str = "items-itemsapi-test"
        memory_limit_in_mb: int = 256
        invoked_function_arn: str = "arn:aws:lambda:eu-west-1:123456789012:function:items-itemsapi-test"
        aws_request_id: str = "da658bd3-2d6f-4e7b-8ec2-937234644fdc"

    return LambdaContext()


@pytest.fixture
def api_event():
    """Build a minimal API Gateway REST proxy event."""

    def _build(method: str, body=None, path_parameters=None, is_base64_encoded: bool = False) -> dict:
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)
        return {
            "httpMethod": method,
            "path": "/items" if path_parameters is None else f"/items/{path_parameters.get('id', '')}",
            "body": body,
            "pathParameters": path_parameters,
            "queryStringParameters": None,
            "isBase64Encoded": is_base64_encoded,
        }

    return _build
