"""评价接口"""
from fastapi import APIRouter, Depends, status
from loguru import logger

from devcamper.api.deps import parsed_body, query_params
from devcamper.core.exceptions import BadRequestException, ForbiddenException, ResourceNotFoundException
from devcamper.core.response import Messages, ResponseCode, page, success
from devcamper.core.security.auth import authorize
from devcamper.models import Bootcamp, Review, UserRole
from devcamper.schemas import (
    BaseResponse, PaginationResponse, ReviewCreateRequest, ReviewResponse, ReviewUpdateRequest
)
from devcamper.services.query import advanced_results

router = APIRouter()

user_or_admin = authorize(UserRole.USER, UserRole.ADMIN)


async def _get_review(review_id: int) -> Review:
    review = await Review.get_or_none(id=review_id)
    if not review:
        raise ResourceNotFoundException("Review", review_id)
    return review


def _check_owner(review, user):
    if review.owner_id != user.id and user.role != UserRole.ADMIN:
        raise ForbiddenException(f"User {user.id} is not authorized to modify review {review.id}")


@router.get("", response_model=PaginationResponse, summary="List reviews")
async def list_reviews(params: dict = Depends(query_params)):
    result = await advanced_results(Review, params)
    items = result.items if result.selected else [ReviewResponse.model_validate(r) for r in result.items]
    return page(items, result.total, result.page, result.limit)


@router.get("/{review_id}", response_model=BaseResponse, summary="Get review")
async def get_review(review_id: int):
    review = await _get_review(review_id)
    return success(ReviewResponse.model_validate(review), message=Messages.QUERY_SUCCESS)


@router.post("", response_model=BaseResponse, status_code=status.HTTP_201_CREATED, summary="Add review")
async def create_review(
    data: ReviewCreateRequest = Depends(parsed_body(ReviewCreateRequest)),
    user=Depends(user_or_admin),
):
    if not await Bootcamp.exists(id=data.bootcamp):
        raise ResourceNotFoundException("Bootcamp", data.bootcamp)
    if await Review.exists(bootcamp_id=data.bootcamp, owner_id=user.id):
        raise BadRequestException("You have already reviewed this bootcamp", error_code="DUPLICATE_REVIEW")

    review = await Review.create(
        **data.model_dump(exclude={"bootcamp"}),
        bootcamp_id=data.bootcamp,
        owner_id=user.id,
    )
    logger.info(f"评价已创建: {review.id} (bootcamp {data.bootcamp})")
    return success(ReviewResponse.model_validate(review), message=Messages.CREATED_SUCCESS, code=ResponseCode.CREATED)


@router.put("/{review_id}", response_model=BaseResponse, summary="Update review")
async def update_review(
    review_id: int,
    data: ReviewUpdateRequest = Depends(parsed_body(ReviewUpdateRequest)),
    user=Depends(user_or_admin),
):
    review = await _get_review(review_id)
    _check_owner(review, user)

    changes = data.model_dump(exclude_unset=True)
    if changes:
        review.update_from_dict(changes)
        await review.save()
    return success(ReviewResponse.model_validate(review), message=Messages.UPDATED_SUCCESS)


@router.delete("/{review_id}", response_model=BaseResponse, summary="Delete review")
async def delete_review(review_id: int, user=Depends(user_or_admin)):
    review = await _get_review(review_id)
    _check_owner(review, user)

    await review.delete()
    logger.info(f"评价已删除: {review_id}")
    return success({}, message=Messages.DELETED_SUCCESS)
