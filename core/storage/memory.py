from __future__ import annotations

import threading
from dataclasses import dataclass

from loguru import logger

from core.exceptions import (
    BucketAlreadyExistsError,
    BucketNotFoundError,
    ObjectNotFoundError,
)


DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class ObjectMetadata:
    bucket: str
    name: str
    content_type: str
    size: int


@dataclass(frozen=True)
class StoredObject:
    bucket: str
    name: str
    data: bytes
    content_type: str = DEFAULT_CONTENT_TYPE

    @property
    def size(self) -> int:
        return len(self.data)

    def metadata(self) -> ObjectMetadata:
        return ObjectMetadata(
            bucket=self.bucket,
            name=self.name,
            content_type=self.content_type,
            size=self.size,
        )


class InMemoryStorage:
    """Process-local bucket/object store.

    Every public method holds a single lock for its whole duration, so each
    call is atomic with respect to concurrent request handlers. Stored
    objects are frozen and hold immutable ``bytes``; returning them to
    callers never exposes mutable state.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._buckets: dict[str, dict[str, StoredObject]] = {}

    def create_bucket(self, name: str) -> None:
        with self._lock:
            if name in self._buckets:
                raise BucketAlreadyExistsError(
                    f"Bucket already exists: {name}",
                    {"bucket": name},
                )
            self._buckets[name] = {}
        logger.debug("Created bucket {bucket}", bucket=name)

    def put_object(
        self,
        bucket: str,
        name: str,
        data: bytes,
        content_type: str | None = None,
    ) -> StoredObject:
        stored = StoredObject(
            bucket=bucket,
            name=name,
            data=bytes(data),
            content_type=content_type or DEFAULT_CONTENT_TYPE,
        )
        with self._lock:
            objects = self._buckets.get(bucket)
            if objects is None:
                raise BucketNotFoundError(
                    f"Bucket not found: {bucket}",
                    {"bucket": bucket},
                )
            objects[name] = stored
        logger.debug(
            "Stored object {bucket}/{name} ({size} bytes, {content_type})",
            bucket=bucket,
            name=name,
            size=stored.size,
            content_type=stored.content_type,
        )
        return stored

    def get_object(self, bucket: str, name: str) -> StoredObject:
        with self._lock:
            objects = self._buckets.get(bucket)
            if objects is None:
                raise BucketNotFoundError(
                    f"Bucket not found: {bucket}",
                    {"bucket": bucket},
                )
            stored = objects.get(name)
        if stored is None:
            raise ObjectNotFoundError(
                f"Object not found: {bucket}/{name}",
                {"bucket": bucket, "object": name},
            )
        return stored

    def list_objects(self, bucket: str) -> list[ObjectMetadata]:
        """Return metadata for every object in ``bucket``, sorted by name."""
        with self._lock:
            objects = self._buckets.get(bucket)
            if objects is None:
                raise BucketNotFoundError(
                    f"Bucket not found: {bucket}",
                    {"bucket": bucket},
                )
            snapshot = list(objects.values())
        return [item.metadata() for item in sorted(snapshot, key=lambda item: item.name)]

    def has_bucket(self, name: str) -> bool:
        with self._lock:
            return name in self._buckets

    def bucket_names(self) -> list[str]:
        with self._lock:
            return sorted(self._buckets)


__all__ = ["DEFAULT_CONTENT_TYPE", "InMemoryStorage", "ObjectMetadata", "StoredObject"]
