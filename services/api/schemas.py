from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.storage import ObjectMetadata, StoredObject


class CreateBucketRequest(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:  # noqa: D401
        if not value.strip():
            raise ValueError("bucket name must not be empty")
        return value


class BucketResource(BaseModel):
    kind: Literal["storage#bucket"] = "storage#bucket"
    name: str


class ObjectResource(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["storage#object"] = "storage#object"
    name: str
    bucket: str
    content_type: str = Field(alias="contentType")
    size: int

    @classmethod
    def from_metadata(cls, metadata: ObjectMetadata | StoredObject) -> "ObjectResource":
        return cls(
            name=metadata.name,
            bucket=metadata.bucket,
            content_type=metadata.content_type,
            size=metadata.size,
        )


class ObjectListResponse(BaseModel):
    kind: Literal["storage#objects"] = "storage#objects"
    items: list[ObjectResource] = Field(default_factory=list)


class ErrorBody(BaseModel):
    code: int
    message: str


class ErrorResponse(BaseModel):
    error: ErrorBody
