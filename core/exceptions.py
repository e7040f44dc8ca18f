"""Custom exception hierarchy for the GCS mock service."""

from __future__ import annotations


class GcsMockError(Exception):
    """Base exception for all service-specific errors."""

    def __init__(self, message: str, details: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class AlreadyExistsError(GcsMockError):
    """Raised when a resource with the same name is already registered."""
    pass


class BucketAlreadyExistsError(AlreadyExistsError):
    """Raised when creating a bucket whose name is taken."""
    pass


class NotFoundError(GcsMockError):
    """Raised when an operation targets a bucket or object that does not exist."""
    pass


class BucketNotFoundError(NotFoundError):
    """Raised when the bucket does not exist."""
    pass


class ObjectNotFoundError(NotFoundError):
    """Raised when the bucket exists but the object does not."""
    pass


class BadRequestError(GcsMockError):
    """Raised when required request input is missing or malformed."""
    pass


class ManifestError(GcsMockError):
    """Base class for startup manifest failures. Always fatal."""
    pass


class ManifestReadError(ManifestError):
    """Raised when the manifest or one of the files it references cannot be read."""
    pass


class ManifestFormatError(ManifestError):
    """Raised when the manifest is not valid YAML or violates the schema."""
    pass
