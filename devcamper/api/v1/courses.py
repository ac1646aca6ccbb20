"""课程接口"""
from fastapi import APIRouter, Depends, status
from loguru import logger

from devcamper.api.deps import parsed_body, query_params
from devcamper.core.exceptions import ForbiddenException, ResourceNotFoundException
from devcamper.core.response import Messages, ResponseCode, page, success
from devcamper.core.security.auth import authorize
from devcamper.models import Bootcamp, Course, UserRole
from devcamper.schemas import (
    BaseResponse, CourseCreateRequest, CourseResponse, CourseUpdateRequest, PaginationResponse
)
from devcamper.services.query import advanced_results

router = APIRouter()

publisher_or_admin = authorize(UserRole.PUBLISHER, UserRole.ADMIN)


async def _get_course(course_id: int) -> Course:
    course = await Course.get_or_none(id=course_id)
    if not course:
        raise ResourceNotFoundException("Course", course_id)
    return course


def _check_owner(resource, user, action):
    if resource.owner_id != user.id and user.role != UserRole.ADMIN:
        raise ForbiddenException(f"User {user.id} is not authorized to {action}")


@router.get("", response_model=PaginationResponse, summary="List courses")
async def list_courses(params: dict = Depends(query_params)):
    result = await advanced_results(Course, params)
    items = result.items if result.selected else [CourseResponse.model_validate(c) for c in result.items]
    return page(items, result.total, result.page, result.limit)


@router.get("/{course_id}", response_model=BaseResponse, summary="Get course")
async def get_course(course_id: int):
    course = await _get_course(course_id)
    return success(CourseResponse.model_validate(course), message=Messages.QUERY_SUCCESS)


@router.post("", response_model=BaseResponse, status_code=status.HTTP_201_CREATED, summary="Create course")
async def create_course(
    data: CourseCreateRequest = Depends(parsed_body(CourseCreateRequest)),
    user=Depends(publisher_or_admin),
):
    bootcamp = await Bootcamp.get_or_none(id=data.bootcamp)
    if not bootcamp:
        raise ResourceNotFoundException("Bootcamp", data.bootcamp)
    _check_owner(bootcamp, user, f"add a course to bootcamp {bootcamp.id}")

    course = await Course.create(
        **data.model_dump(exclude={"bootcamp"}),
        bootcamp_id=bootcamp.id,
        owner_id=user.id,
    )
    logger.info(f"课程已创建: {course.id} (bootcamp {bootcamp.id})")
    return success(CourseResponse.model_validate(course), message=Messages.CREATED_SUCCESS, code=ResponseCode.CREATED)


@router.put("/{course_id}", response_model=BaseResponse, summary="Update course")
async def update_course(
    course_id: int,
    data: CourseUpdateRequest = Depends(parsed_body(CourseUpdateRequest)),
    user=Depends(publisher_or_admin),
):
    course = await _get_course(course_id)
    _check_owner(course, user, f"update course {course.id}")

    changes = data.model_dump(exclude_unset=True)
    if changes:
        course.update_from_dict(changes)
        await course.save()
    return success(CourseResponse.model_validate(course), message=Messages.UPDATED_SUCCESS)


@router.delete("/{course_id}", response_model=BaseResponse, summary="Delete course")
async def delete_course(course_id: int, user=Depends(publisher_or_admin)):
    course = await _get_course(course_id)
    _check_owner(course, user, f"delete course {course.id}")

    await course.delete()
    logger.info(f"课程已删除: {course_id}")
    return success({}, message=Messages.DELETED_SUCCESS)
