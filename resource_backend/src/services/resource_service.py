"""
Resource operations over the JSON store.

Each mutating operation is a full read-modify-write cycle: load the whole
collection, change it in memory, write the whole collection back. A process-wide
lock serializes these cycles so two overlapping requests cannot silently drop
each other's update. Processes sharing the same file are not coordinated.

Id and timestamp generation are injectable so tests can assert exact values.
"""

import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List

from ..core.logger import get_logger
from ..db.json_store import JsonStore

logger = get_logger(__name__)

NOT_FOUND_MESSAGE = "Resource not found"


class ResourceNotFoundError(LookupError):
    """Raised when an operation targets an id absent from the collection."""

    def __init__(self, resource_id: str):
        super().__init__(NOT_FOUND_MESSAGE)
        self.resource_id = resource_id


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. 2024-01-01T00:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_resource_id() -> str:
    return str(uuid.uuid4())


def _find_index(items: List[Dict[str, Any]], resource_id: str) -> int:
    for idx, item in enumerate(items):
        if item.get("id") == resource_id:
            return idx
    return -1


# PUBLIC_INTERFACE
class ResourceService:
    """CRUD operations on the resource collection."""

    def __init__(
        self,
        store: JsonStore,
        id_factory: Callable[[], str] = new_resource_id,
        clock: Callable[[], str] = utc_timestamp,
    ):
        self._store = store
        self._id_factory = id_factory
        self._clock = clock
        self._lock = threading.Lock()

    @property
    def store(self) -> JsonStore:
        return self._store

    def list_resources(self) -> List[Dict[str, Any]]:
        return self._store.read_all()

    def get_resource(self, resource_id: str) -> Dict[str, Any]:
        items = self._store.read_all()
        idx = _find_index(items, resource_id)
        if idx == -1:
            raise ResourceNotFoundError(resource_id)
        return items[idx]

    def create_resource(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Append a new resource. Both timestamps share the same instant."""
        with self._lock:
            items = self._store.read_all()
            now = self._clock()
            item = {
                "id": self._id_factory(),
                "name": fields["name"],
                "type": fields["type"],
                "amount": fields.get("amount", 0),
                "price": fields.get("price", 0),
                "createdAt": now,
                "updatedAt": now,
            }
            items.append(item)
            self._store.write_all(items)
        logger.info("Resource created", extra={"resource_id": item["id"]})
        return item

    def update_resource(self, resource_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Overlay `fields` on the stored record and refresh updatedAt.

        Used for both replace and partial update; the caller decides which fields
        are present. `id` and `createdAt` are never part of `fields`, and
        updatedAt is applied last so it cannot be overridden.
        """
        with self._lock:
            items = self._store.read_all()
            idx = _find_index(items, resource_id)
            if idx == -1:
                raise ResourceNotFoundError(resource_id)
            updated = {**items[idx], **fields, "updatedAt": self._clock()}
            items[idx] = updated
            self._store.write_all(items)
        logger.info("Resource updated", extra={"resource_id": resource_id, "fields": sorted(fields)})
        return updated

    def delete_resource(self, resource_id: str) -> str:
        """Remove the resource in place and return its id."""
        with self._lock:
            items = self._store.read_all()
            idx = _find_index(items, resource_id)
            if idx == -1:
                raise ResourceNotFoundError(resource_id)
            removed = items.pop(idx)
            self._store.write_all(items)
        logger.info("Resource deleted", extra={"resource_id": removed["id"]})
        return removed["id"]
