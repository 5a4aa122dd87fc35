"""
CDK constants for the items API infrastructure.
"""

# Service configuration
SERVICE_NAME = "ItemsApi"
POWERTOOLS_SERVICE_NAME = "POWERTOOLS_SERVICE_NAME"
POWERTOOLS_METRICS_NAMESPACE = "POWERTOOLS_METRICS_NAMESPACE"
POWERTOOLS_LOG_LEVEL = "LOG_LEVEL"
TABLE_NAME_ENV_VAR = "TABLE_NAME"

# Build paths
SERVICE_BUILD_FOLDER = ".build/service"
LAYER_BUILD_FOLDER = ".build/layer"

# IAM
LAMBDA_BASIC_EXECUTION_ROLE = "AWSLambdaBasicExecutionRole"

# Lambda configuration
LAMBDA_MEMORY_SIZE = 256  # MB
LAMBDA_TIMEOUT = 10  # seconds
LAMBDA_HANDLER = "service.handlers.items_api.handler"

# API Gateway
ITEMS_RESOURCE = "items"
ITEM_ID_PATH_PARAMETER = "{id}"
API_THROTTLING_RATE_LIMIT = 100  # requests per second
API_THROTTLING_BURST_LIMIT = 200

# CloudWatch metrics
METRICS_NAMESPACE = "ItemsApi"
