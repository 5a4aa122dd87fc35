"""
Lambda DynamoDB Construct.

A construct that fronts a DynamoDB items table with a Lambda function behind
an API Gateway REST API.
"""

from typing import Any

from aws_cdk import Duration, RemovalPolicy
from aws_cdk import aws_apigateway as apigateway
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_iam as iam
from aws_cdk import aws_lambda as lambda_
from aws_cdk import aws_logs as logs
from cdk_nag import NagSuppressions
from constructs import Construct

from cdk import constants


class LambdaDynamoDBConstruct(Construct):
    """
    A construct that creates the items API.

    Features:
    - DynamoDB table keyed by ``id``
    - Lambda layer for shared dependencies (aws-lambda-powertools, pydantic)
    - A single Lambda handler routing POST /items and GET /items/{id}
    - API Gateway REST API with Lambda proxy integration
    - CloudWatch log groups with retention
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        stage: str,
        table_name: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(scope, id, **kwargs)

        self.stage = stage
        self.table_name = table_name

        self.table = self._create_table()
        self.layer = self._create_layer()
        self.lambda_role = self._create_lambda_role()

        self.function = self._create_lambda_function(
            function_id="ItemsApi",
            handler=constants.LAMBDA_HANDLER,
            description="Creates and gets items in DynamoDB",
        )

        # put_item and get_item only
        self.table.grant(self.function, "dynamodb:PutItem", "dynamodb:GetItem")

        self.api = self._create_api()

        self._add_nag_suppressions()

    def _create_table(self) -> dynamodb.Table:
        """Create the DynamoDB table."""
        return dynamodb.Table(
            self,
            "Table",
            table_name=f"{self.table_name}-{self.stage}",
            partition_key=dynamodb.Attribute(
                name="id",
                type=dynamodb.AttributeType.STRING,
            ),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            removal_policy=RemovalPolicy.DESTROY if self.stage == "dev" else RemovalPolicy.RETAIN,
            point_in_time_recovery=True,
        )

    def _create_layer(self) -> lambda_.LayerVersion:
        """Create Lambda layer from the prebuilt dependency folder."""
        return lambda_.LayerVersion(
            self,
            "CommonLayer",
            code=lambda_.Code.from_asset(constants.LAYER_BUILD_FOLDER),
            compatible_runtimes=[lambda_.Runtime.PYTHON_3_13],
            compatible_architectures=[lambda_.Architecture.X86_64],
            removal_policy=RemovalPolicy.DESTROY,
            description="Common layer with aws-lambda-powertools and shared dependencies",
        )

    def _create_lambda_role(self) -> iam.Role:
        """Create IAM role for Lambda functions."""
        role = iam.Role(
            self,
            "LambdaRole",
            assumed_by=iam.ServicePrincipal("lambda.amazonaws.com"),
            managed_policies=[
                iam.ManagedPolicy.from_aws_managed_policy_name(f"service-role/{constants.LAMBDA_BASIC_EXECUTION_ROLE}")
            ],
        )

        # Add X-Ray tracing permissions
        role.add_to_policy(
            iam.PolicyStatement(
                actions=[
                    "xray:PutTraceSegments",
                    "xray:PutTelemetryRecords",
                ],
                resources=["*"],
            )
        )

        return role

    def _create_lambda_function(
        self,
        function_id: str,
        handler: str,
        description: str,
    ) -> lambda_.Function:
        """Create a Lambda function with common configuration."""

        log_group = logs.LogGroup(
            self,
            f"{function_id}LogGroup",
            retention=logs.RetentionDays.ONE_WEEK if self.stage == "dev" else logs.RetentionDays.ONE_MONTH,
            removal_policy=RemovalPolicy.DESTROY,
        )

        return lambda_.Function(
            self,
            function_id,
            function_name=f"{self.table_name}-{function_id.lower()}-{self.stage}",
            runtime=lambda_.Runtime.PYTHON_3_13,
            architecture=lambda_.Architecture.X86_64,
            handler=handler,
            code=lambda_.Code.from_asset(constants.SERVICE_BUILD_FOLDER),
            timeout=Duration.seconds(constants.LAMBDA_TIMEOUT),
            memory_size=constants.LAMBDA_MEMORY_SIZE,
            layers=[self.layer],
            role=self.lambda_role,
            log_group=log_group,
            environment={
                constants.TABLE_NAME_ENV_VAR: self.table.table_name,
                constants.POWERTOOLS_SERVICE_NAME: constants.SERVICE_NAME,
                constants.POWERTOOLS_METRICS_NAMESPACE: constants.METRICS_NAMESPACE,
                constants.POWERTOOLS_LOG_LEVEL: "DEBUG" if self.stage == "dev" else "INFO",
                "STAGE": self.stage,
            },
            tracing=lambda_.Tracing.ACTIVE,
            logging_format=lambda_.LoggingFormat.JSON,
            description=description,
        )

    def _create_api(self) -> apigateway.RestApi:
        """Create the REST API with POST /items and GET /items/{id}."""
        api = apigateway.RestApi(
            self,
            "ItemsRestApi",
            rest_api_name=f"{self.table_name}-api-{self.stage}",
            description="Items API",
            deploy_options=apigateway.StageOptions(
                stage_name=self.stage,
                tracing_enabled=True,
                throttling_rate_limit=constants.API_THROTTLING_RATE_LIMIT,
                throttling_burst_limit=constants.API_THROTTLING_BURST_LIMIT,
            ),
        )

        integration = apigateway.LambdaIntegration(self.function)

        items = api.root.add_resource(constants.ITEMS_RESOURCE)
        items.add_method("POST", integration)

        item = items.add_resource(constants.ITEM_ID_PATH_PARAMETER)
        item.add_method("GET", integration)

        return api

    def _add_nag_suppressions(self) -> None:
        """Add cdk-nag suppressions for expected security findings."""
        NagSuppressions.add_resource_suppressions(
            self.lambda_role,
            suppressions=[
                {
                    "id": "AwsSolutions-IAM4",
                    "reason": "Using AWS managed policy for Lambda basic execution role.",
                },
                {
                    "id": "AwsSolutions-IAM5",
                    "reason": "X-Ray tracing requires wildcard permissions.",
                },
            ],
            apply_to_children=True,
        )

        NagSuppressions.add_resource_suppressions(
            self.function,
            suppressions=[
                {
                    "id": "AwsSolutions-L1",
                    "reason": "Using Python 3.13 which is the latest supported runtime.",
                },
            ],
        )

        NagSuppressions.add_resource_suppressions(
            self.api,
            suppressions=[
                {
                    "id": "AwsSolutions-APIG1",
                    "reason": "Access logging is not required for this sample API.",
                },
                {
                    "id": "AwsSolutions-APIG2",
                    "reason": "Request validation is performed by the Lambda handler.",
                },
                {
                    "id": "AwsSolutions-APIG3",
                    "reason": "WAF is out of scope for this API.",
                },
                {
                    "id": "AwsSolutions-APIG4",
                    "reason": "The items API is intentionally unauthenticated.",
                },
                {
                    "id": "AwsSolutions-APIG6",
                    "reason": "Execution logging is not required for this sample API.",
                },
                {
                    "id": "AwsSolutions-COG4",
                    "reason": "The items API is intentionally unauthenticated.",
                },
                {
                    "id": "AwsSolutions-IAM4",
                    "reason": "API Gateway CloudWatch role uses the AWS managed push-to-logs policy.",
                },
            ],
            apply_to_children=True,
        )
