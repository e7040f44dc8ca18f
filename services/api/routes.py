from __future__ import annotations

from fastapi import APIRouter, Query, Request
from fastapi.responses import Response
from loguru import logger
from pydantic import ValidationError

from core.exceptions import BadRequestError
from core.storage import ObjectStorage
from services.api.schemas import (
    BucketResource,
    CreateBucketRequest,
    ObjectListResponse,
    ObjectResource,
)


router = APIRouter()


def _storage(request: Request) -> ObjectStorage:
    return request.app.state.storage


@router.post("/storage/v1/b", response_model=BucketResource, tags=["buckets"])
async def create_bucket(request: Request) -> BucketResource:
    body = await request.body()
    if not body:
        raise BadRequestError("Request body is required")
    try:
        payload = CreateBucketRequest.model_validate_json(body)
    except ValidationError as exc:
        raise BadRequestError(
            "Request body must be a JSON object with a non-empty 'name'",
            {"errors": str(exc.error_count())},
        ) from exc

    _storage(request).create_bucket(payload.name)
    logger.info("Bucket created: {bucket}", bucket=payload.name)
    return BucketResource(name=payload.name)


@router.post(
    "/upload/storage/v1/b/{bucket}/o",
    response_model=ObjectResource,
    tags=["objects"],
)
async def upload_object(
    bucket: str,
    request: Request,
    name: str | None = Query(default=None),
) -> ObjectResource:
    if not name:
        raise BadRequestError("Query parameter 'name' is required", {"bucket": bucket})

    data = await request.body()
    content_type = request.headers.get("content-type")
    stored = _storage(request).put_object(bucket, name, data, content_type)
    logger.info(
        "Object uploaded: {bucket}/{name} ({size} bytes)",
        bucket=bucket,
        name=name,
        size=stored.size,
    )
    return ObjectResource.from_metadata(stored)


@router.get(
    "/storage/v1/b/{bucket}/o",
    response_model=ObjectListResponse,
    tags=["objects"],
)
async def list_objects(bucket: str, request: Request) -> ObjectListResponse:
    items = _storage(request).list_objects(bucket)
    return ObjectListResponse(items=[ObjectResource.from_metadata(item) for item in items])


@router.get("/storage/v1/b/{bucket}/o/{object_name:path}", tags=["objects"])
async def get_object(bucket: str, object_name: str, request: Request) -> Response:
    stored = _storage(request).get_object(bucket, object_name)
    # Explicit header so Starlette does not append a charset to text/* types.
    return Response(content=stored.data, headers={"Content-Type": stored.content_type})


__all__ = ["router"]
