"""训练营接口"""
import os

import aiofiles
from fastapi import APIRouter, Depends, Request, status
from loguru import logger

from devcamper.api.deps import get_settings, parsed_body, query_params
from devcamper.core.exceptions import BadRequestException, ForbiddenException, ResourceNotFoundException
from devcamper.core.response import Messages, ResponseCode, page, success
from devcamper.core.security.auth import authorize, get_current_user
from devcamper.models import Bootcamp, UserRole
from devcamper.schemas import (
    BaseResponse, BootcampCreateRequest, BootcampResponse, BootcampUpdateRequest, PaginationResponse
)
from devcamper.services.query import advanced_results

router = APIRouter()

publisher_or_admin = authorize(UserRole.PUBLISHER, UserRole.ADMIN)


async def _get_bootcamp(bootcamp_id: int) -> Bootcamp:
    bootcamp = await Bootcamp.get_or_none(id=bootcamp_id)
    if not bootcamp:
        raise ResourceNotFoundException("Bootcamp", bootcamp_id)
    return bootcamp


def _check_owner(bootcamp, user):
    if bootcamp.owner_id != user.id and user.role != UserRole.ADMIN:
        raise ForbiddenException(f"User {user.id} is not authorized to modify bootcamp {bootcamp.id}")


@router.get("", response_model=PaginationResponse, summary="List bootcamps")
async def list_bootcamps(params: dict = Depends(query_params)):
    result = await advanced_results(Bootcamp, params)
    items = result.items if result.selected else [BootcampResponse.model_validate(b) for b in result.items]
    return page(items, result.total, result.page, result.limit)


@router.get("/{bootcamp_id}", response_model=BaseResponse, summary="Get bootcamp")
async def get_bootcamp(bootcamp_id: int):
    bootcamp = await _get_bootcamp(bootcamp_id)
    return success(BootcampResponse.model_validate(bootcamp), message=Messages.QUERY_SUCCESS)


@router.post("", response_model=BaseResponse, status_code=status.HTTP_201_CREATED, summary="Create bootcamp")
async def create_bootcamp(
    data: BootcampCreateRequest = Depends(parsed_body(BootcampCreateRequest)),
    user=Depends(publisher_or_admin),
):
    # 发布者只能创建一个训练营
    if user.role != UserRole.ADMIN and await Bootcamp.exists(owner_id=user.id):
        raise BadRequestException(f"The user with ID {user.id} has already published a bootcamp")

    bootcamp = await Bootcamp.create(**data.model_dump(), owner_id=user.id)
    logger.info(f"训练营已创建: {bootcamp.id} by user {user.id}")
    return success(BootcampResponse.model_validate(bootcamp), message=Messages.CREATED_SUCCESS, code=ResponseCode.CREATED)


@router.put("/{bootcamp_id}", response_model=BaseResponse, summary="Update bootcamp")
async def update_bootcamp(
    bootcamp_id: int,
    data: BootcampUpdateRequest = Depends(parsed_body(BootcampUpdateRequest)),
    user=Depends(publisher_or_admin),
):
    bootcamp = await _get_bootcamp(bootcamp_id)
    _check_owner(bootcamp, user)

    changes = data.model_dump(exclude_unset=True)
    if changes:
        bootcamp.update_from_dict(changes)
        await bootcamp.save()
    return success(BootcampResponse.model_validate(bootcamp), message=Messages.UPDATED_SUCCESS)


@router.delete("/{bootcamp_id}", response_model=BaseResponse, summary="Delete bootcamp")
async def delete_bootcamp(bootcamp_id: int, user=Depends(publisher_or_admin)):
    bootcamp = await _get_bootcamp(bootcamp_id)
    _check_owner(bootcamp, user)

    await bootcamp.delete()
    logger.info(f"训练营已删除: {bootcamp_id} by user {user.id}")
    return success({}, message=Messages.DELETED_SUCCESS)


@router.put("/{bootcamp_id}/photo", response_model=BaseResponse, summary="Upload bootcamp photo")
async def upload_bootcamp_photo(
    bootcamp_id: int,
    request: Request,
    user=Depends(publisher_or_admin),
    config=Depends(get_settings),
):
    bootcamp = await _get_bootcamp(bootcamp_id)
    _check_owner(bootcamp, user)

    upload = getattr(request.state, "files", {}).get("file")
    if upload is None or isinstance(upload, list):
        raise BadRequestException("Please upload a single file in the 'file' field")
    if not (upload.content_type or "").startswith("image"):
        raise BadRequestException("Please upload an image file")

    content = await upload.read()
    if len(content) > config.MAX_FILE_UPLOAD:
        raise BadRequestException(f"Please upload an image less than {config.MAX_FILE_UPLOAD} bytes")

    _, ext = os.path.splitext(upload.filename or "")
    filename = f"photo_{bootcamp.id}{ext.lower()}"
    os.makedirs(config.upload_dir, exist_ok=True)
    async with aiofiles.open(os.path.join(config.upload_dir, filename), "wb") as f:
        await f.write(content)

    bootcamp.photo = filename
    await bootcamp.save()
    logger.info(f"训练营图片已上传: {bootcamp.id} -> {filename}")
    return success({"photo": filename}, message=Messages.UPLOAD_SUCCESS)
