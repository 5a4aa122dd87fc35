from typing import Any

from aws_cdk import CfnOutput, Stack
from constructs import Construct

from cdk.lambda_dynamodb_construct import LambdaDynamoDBConstruct


class AppStack(Stack):
    """
    Main application stack that creates the items API resources.
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

        self.lambda_dynamodb = LambdaDynamoDBConstruct(
            self,
            "LambdaDynamoDB",
            stage=stage,
            table_name=table_name,
        )

        # Expose resources for cross-stack references if needed
        self.table = self.lambda_dynamodb.table
        self.function = self.lambda_dynamodb.function
        self.api = self.lambda_dynamodb.api

        # Outputs
        CfnOutput(
            self,
            "TableName",
            value=self.table.table_name,
            description="DynamoDB table name",
        )

        CfnOutput(
            self,
            "ItemsFunctionArn",
            value=self.function.function_arn,
            description="Items API Lambda function ARN",
        )

        CfnOutput(
            self,
            "ApiEndpoint",
            value=self.api.url,
            description="Items API base URL",
        )
