from __future__ import annotations

import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from serial_validator.core.config import Settings, settings as default_settings
from serial_validator.core.errors import StoreUnavailable

logger = logging.getLogger(__name__)

KEY_ATTRIBUTE = "serial_number"


class DynamoDbSerialStore:
    """
    Point reads against a pre-provisioned DynamoDB table keyed by
    `serial_number` (string). Only presence is checked; item content is
    never read beyond the key.
    """

    name = "dynamodb"

    def __init__(self, client: Any, table_name: str = "assets"):
        self.client = client
        self.table_name = table_name

    @classmethod
    def from_settings(cls, settings: Settings = default_settings) -> "DynamoDbSerialStore":
        client = boto3.client(
            "dynamodb",
            region_name=settings.AWS_REGION,
            endpoint_url=settings.DYNAMODB_ENDPOINT_URL,
        )
        return cls(client, table_name=settings.ASSETS_TABLE)

    def exists(self, serial_number: str) -> bool:
        try:
            response = self.client.get_item(
                TableName=self.table_name,
                Key={KEY_ATTRIBUTE: {"S": serial_number}},
                ProjectionExpression=KEY_ATTRIBUTE,
            )
        except (ClientError, BotoCoreError) as exc:
            logger.error(
                "GetItem on %s failed for %r", self.table_name, serial_number, exc_info=True
            )
            raise StoreUnavailable(self.name) from exc
        return "Item" in response

    def ping(self) -> None:
        try:
            self.client.describe_table(TableName=self.table_name)
        except (ClientError, BotoCoreError) as exc:
            raise StoreUnavailable(self.name) from exc
