"""Tests for the service exception hierarchy."""

from core.exceptions import (
    AlreadyExistsError,
    BadRequestError,
    BucketAlreadyExistsError,
    BucketNotFoundError,
    GcsMockError,
    ManifestError,
    ManifestFormatError,
    ManifestReadError,
    NotFoundError,
    ObjectNotFoundError,
)


def test_base_error_carries_message_and_details():
    error = GcsMockError("Test error", {"key": "value"})
    assert str(error) == "Test error"
    assert error.message == "Test error"
    assert error.details == {"key": "value"}


def test_details_default_to_empty_dict():
    assert BadRequestError("missing name").details == {}


def test_not_found_errors_share_one_kind():
    """Missing bucket and missing object are both NotFoundError."""
    assert issubclass(BucketNotFoundError, NotFoundError)
    assert issubclass(ObjectNotFoundError, NotFoundError)


def test_exception_inheritance():
    assert issubclass(BucketAlreadyExistsError, AlreadyExistsError)
    assert issubclass(AlreadyExistsError, GcsMockError)
    assert issubclass(NotFoundError, GcsMockError)
    assert issubclass(BadRequestError, GcsMockError)
    assert issubclass(ManifestReadError, ManifestError)
    assert issubclass(ManifestFormatError, ManifestError)
    assert issubclass(ManifestError, GcsMockError)
    assert not issubclass(ManifestError, NotFoundError)
