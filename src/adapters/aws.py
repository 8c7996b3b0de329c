from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

import boto3
from botocore.client import BaseClient

if TYPE_CHECKING:
    from mypy_boto3_dynamodb import DynamoDBClient
    from mypy_boto3_s3 import S3Client
else:
    DynamoDBClient = BaseClient  # type: ignore[misc,assignment]
    S3Client = BaseClient  # type: ignore[misc,assignment]

DEFAULT_REGION = "ap-northeast-1"
LOCALSTACK_URL = "http://localhost:4566"


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True, slots=True)
class AwsRuntimeConfig:
    """Where the timetable bucket and bookmark table live.

    Env vars:
      - AWS_REGION (default: ap-northeast-1)
      - ENDPOINT_URL: explicit endpoint, wins over everything else
      - USE_LOCALSTACK: talk to LocalStack on its default port
    """

    region: str
    endpoint_url: str | None

    @staticmethod
    def from_env() -> "AwsRuntimeConfig":
        endpoint_url = (os.getenv("ENDPOINT_URL") or "").strip() or None
        if endpoint_url is None and _env_bool("USE_LOCALSTACK"):
            endpoint_url = LOCALSTACK_URL
        return AwsRuntimeConfig(
            region=os.getenv("AWS_REGION") or DEFAULT_REGION,
            endpoint_url=endpoint_url,
        )


def _client(service: str) -> BaseClient:
    cfg = AwsRuntimeConfig.from_env()
    session = boto3.session.Session(region_name=cfg.region)
    return session.client(service, endpoint_url=cfg.endpoint_url)


def s3_client() -> S3Client:
    return _client("s3")


def dynamodb_client() -> DynamoDBClient:
    return _client("dynamodb")
