"""Object storage abstraction (in-memory GCS bucket/object model)."""

from __future__ import annotations

from typing import Protocol

from core.storage.memory import (
    DEFAULT_CONTENT_TYPE,
    InMemoryStorage,
    ObjectMetadata,
    StoredObject,
)


class ObjectStorage(Protocol):
    def create_bucket(self, name: str) -> None:
        ...

    def put_object(
        self,
        bucket: str,
        name: str,
        data: bytes,
        content_type: str | None = None,
    ) -> StoredObject:
        ...

    def get_object(self, bucket: str, name: str) -> StoredObject:
        ...

    def list_objects(self, bucket: str) -> list[ObjectMetadata]:
        ...


__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "InMemoryStorage",
    "ObjectMetadata",
    "ObjectStorage",
    "StoredObject",
]
