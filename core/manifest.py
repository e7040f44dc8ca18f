"""Startup manifest: declarative buckets and local files to preload."""

from __future__ import annotations

from collections.abc import Hashable
from pathlib import Path
from typing import Any

import yaml
from yaml.constructor import ConstructorError
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.exceptions import (
    BucketAlreadyExistsError,
    ManifestFormatError,
    ManifestReadError,
)
from core.storage import ObjectStorage


class _UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that rejects repeated mapping keys instead of keeping the last one."""

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict[Any, Any]:
        seen: set[Any] = set()
        for key_node, _ in node.value:
            if key_node.tag == "tag:yaml.org,2002:merge":
                continue
            key = self.construct_object(key_node, deep=deep)
            if not isinstance(key, Hashable):
                continue
            if key in seen:
                raise ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    f"found duplicate key {key!r}",
                    key_node.start_mark,
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


class ManifestFile(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    path: Path
    content_type: str | None = Field(default=None, alias="content-type")

    @property
    def object_name(self) -> str:
        # Directories are never part of the object name.
        return self.path.name


class ManifestBucket(BaseModel):
    model_config = ConfigDict(extra="forbid")

    files: list[ManifestFile] = Field(default_factory=list)

    @field_validator("files", mode="before")
    @classmethod
    def _default_files(cls, value: Any) -> Any:  # noqa: D401
        if value is None:
            return []
        return value


class Manifest(BaseModel):
    buckets: dict[str, ManifestBucket] = Field(default_factory=dict)

    @field_validator("buckets", mode="before")
    @classmethod
    def _default_buckets(cls, value: Any) -> Any:  # noqa: D401
        if value is None:
            return {}
        if isinstance(value, dict):
            # YAML reads keys such as 12345 or yes as int/bool; bucket names are strings.
            # A bucket declared with no body is an empty bucket.
            buckets: dict[str, Any] = {}
            for name, body in value.items():
                key = str(name)
                if key in buckets:
                    raise ValueError(f"bucket {key!r} is declared more than once")
                buckets[key] = {} if body is None else body
            return buckets
        return value


def read_manifest(path: Path) -> Manifest:
    """Parse a manifest YAML file.

    Args:
        path: Location of the manifest file.

    Returns:
        The validated manifest.

    Raises:
        ManifestReadError: If the file cannot be read.
        ManifestFormatError: If the file is not valid YAML or does not match the schema.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestReadError(
            f"Could not read manifest {path}: {exc}",
            {"path": str(path)},
        ) from exc
    try:
        payload = yaml.load(text, Loader=_UniqueKeyLoader) or {}
    except yaml.YAMLError as exc:
        raise ManifestFormatError(
            f"Manifest {path} is not valid YAML: {exc}",
            {"path": str(path)},
        ) from exc
    if not isinstance(payload, dict):
        raise ManifestFormatError(
            f"Manifest {path} must be a mapping with a 'buckets' key",
            {"path": str(path)},
        )
    try:
        return Manifest.model_validate(payload)
    except ValidationError as exc:
        raise ManifestFormatError(
            f"Invalid manifest {path}: {exc}",
            {"path": str(path)},
        ) from exc


def load_manifest(
    storage: ObjectStorage,
    manifest: Manifest,
    *,
    base_dir: Path | None = None,
) -> int:
    """Populate ``storage`` from ``manifest`` and return the number of objects loaded.

    Buckets that already exist are reused. The first unreadable file aborts
    the load with ``ManifestReadError``; callers must not serve traffic
    afterwards.
    """
    loaded = 0
    for bucket_name, bucket in manifest.buckets.items():
        try:
            storage.create_bucket(bucket_name)
            logger.info("Manifest: created bucket {bucket}", bucket=bucket_name)
        except BucketAlreadyExistsError:
            logger.info("Manifest: bucket {bucket} already exists, reusing it", bucket=bucket_name)

        for entry in bucket.files:
            source = entry.path
            if base_dir is not None and not source.is_absolute():
                source = base_dir / source
            try:
                data = source.read_bytes()
            except OSError as exc:
                raise ManifestReadError(
                    f"Failed to read {source} for bucket {bucket_name}: {exc}",
                    {"bucket": bucket_name, "path": str(source)},
                ) from exc

            stored = storage.put_object(bucket_name, entry.object_name, data, entry.content_type)
            logger.info(
                "Manifest: loaded {path} as {bucket}/{name} ({content_type})",
                path=str(source),
                bucket=bucket_name,
                name=stored.name,
                content_type=stored.content_type,
            )
            loaded += 1
    return loaded


def preload(storage: ObjectStorage, path: Path, *, base_dir: Path | None = None) -> int:
    manifest = read_manifest(path)
    count = load_manifest(storage, manifest, base_dir=base_dir)
    logger.info(
        "Manifest {path} preloaded {count} object(s) into {buckets} bucket(s)",
        path=str(path),
        count=count,
        buckets=len(manifest.buckets),
    )
    return count


__all__ = [
    "Manifest",
    "ManifestBucket",
    "ManifestFile",
    "load_manifest",
    "preload",
    "read_manifest",
]
