from __future__ import annotations

import json
import os
import time
from dataclasses import dataclass
from typing import Any

from src.adapters.aws import dynamodb_client
from src.app.ports.output import IBookmarkStore


@dataclass(slots=True)
class DynamoDbBookmarkStore(IBookmarkStore):
    """Stores bookmark lists as JSON strings, one DynamoDB item per key.

    Env vars:
      - BOOKMARK_TABLE (default: bus-timetable-bookmarks)
      - BOOKMARK_OWNER (default: default); prefixes keys so several users
        can share a table
      - ENDPOINT_URL (preferred for LocalStack)
      - AWS_REGION
    """

    table_name: str | None = None
    owner: str | None = None

    def _table(self) -> str:
        return self.table_name or os.getenv("BOOKMARK_TABLE") or "bus-timetable-bookmarks"

    def _item_key(self, key: str) -> str:
        owner = self.owner or os.getenv("BOOKMARK_OWNER") or "default"
        return f"{owner}#{key}"

    def get(self, key: str) -> list[dict[str, Any]]:
        ddb = dynamodb_client()
        resp = ddb.get_item(
            TableName=self._table(),
            Key={"bookmark_key": {"S": self._item_key(key)}},
            ConsistentRead=True,
        )
        item = resp.get("Item")
        if not item or "S" not in item.get("items", {}):
            return []
        try:
            value = json.loads(item["items"]["S"])
        except ValueError:
            # Opaque blob: a corrupt value reads as an empty list.
            return []
        return [dict(v) for v in value if isinstance(v, dict)] if isinstance(value, list) else []

    def put(self, key: str, items: list[dict[str, Any]]) -> None:
        now_ms = int(time.time() * 1000)
        ddb = dynamodb_client()
        ddb.put_item(
            TableName=self._table(),
            Item={
                "bookmark_key": {"S": self._item_key(key)},
                "items": {"S": json.dumps(items, ensure_ascii=False)},
                "updated_at_ms": {"N": str(now_ms)},
            },
        )
