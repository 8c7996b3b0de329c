from __future__ import annotations

import os
import urllib.request

import pytest

from src.adapters.aws import dynamodb_client, s3_client

TEST_BUCKET = "bus-timetable-test-artifacts"
TEST_TABLE = "bus-timetable-test-bookmarks"


def _localstack_healthy(endpoint_url: str) -> bool:
    url = endpoint_url.rstrip("/") + "/_localstack/health"
    try:
        with urllib.request.urlopen(url, timeout=1.5) as resp:  # nosec B310
            return 200 <= resp.status < 300
    except OSError:
        return False


@pytest.fixture(scope="session", autouse=True)
def localstack_env() -> None:
    """Point boto3 at LocalStack unless the environment says otherwise."""

    os.environ.setdefault("USE_LOCALSTACK", "true")
    os.environ.setdefault("ENDPOINT_URL", "http://localhost:4566")
    os.environ.setdefault("AWS_REGION", "ap-northeast-1")

    # boto3 requires some credentials to be present, even for LocalStack.
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "test")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "test")


@pytest.fixture(scope="session")
def require_localstack(localstack_env: None) -> str:
    endpoint_url = os.environ.get("ENDPOINT_URL", "http://localhost:4566")
    if not _localstack_healthy(endpoint_url):
        msg = f"LocalStack not reachable at {endpoint_url}"

        # CI starts LocalStack, so a missing one there is a failure.
        if os.getenv("CI") or os.getenv("REQUIRE_LOCALSTACK"):
            pytest.fail(msg, pytrace=False)

        pytest.skip(f"{msg}; skipping integration tests")
    return endpoint_url


@pytest.fixture(scope="session")
def artifact_bucket(require_localstack: str) -> str:
    s3 = s3_client()
    existing = {b["Name"] for b in s3.list_buckets().get("Buckets", [])}
    if TEST_BUCKET not in existing:
        s3.create_bucket(
            Bucket=TEST_BUCKET,
            CreateBucketConfiguration={"LocationConstraint": os.environ["AWS_REGION"]},
        )
    return TEST_BUCKET


@pytest.fixture(scope="session")
def bookmark_table(require_localstack: str) -> str:
    ddb = dynamodb_client()
    if TEST_TABLE not in ddb.list_tables().get("TableNames", []):
        ddb.create_table(
            TableName=TEST_TABLE,
            BillingMode="PAY_PER_REQUEST",
            AttributeDefinitions=[
                {"AttributeName": "bookmark_key", "AttributeType": "S"}
            ],
            KeySchema=[{"AttributeName": "bookmark_key", "KeyType": "HASH"}],
        )
        ddb.get_waiter("table_exists").wait(TableName=TEST_TABLE)
    return TEST_TABLE
