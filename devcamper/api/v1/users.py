"""用户管理接口（仅管理员）"""
from fastapi import APIRouter, Depends, status

from devcamper.api.deps import parsed_body, query_params
from devcamper.core.response import Messages, ResponseCode, page, success
from devcamper.core.security.auth import authorize
from devcamper.models import User, UserRole
from devcamper.schemas import (
    BaseResponse, PaginationResponse, UserCreateRequest, UserResponse, UserUpdateRequest
)
from devcamper.services.query import advanced_results
from devcamper.services.users.user_service import user_service

router = APIRouter(dependencies=[Depends(authorize(UserRole.ADMIN))])


@router.get("", response_model=PaginationResponse, summary="List users")
async def list_users(params: dict = Depends(query_params)):
    result = await advanced_results(User, params, hidden=("password_hash",))
    items = result.items if result.selected else [UserResponse.model_validate(u) for u in result.items]
    return page(items, result.total, result.page, result.limit)


@router.get("/{user_id}", response_model=BaseResponse, summary="Get user")
async def get_user(user_id: int):
    user = await user_service.get_user_or_404(user_id)
    return success(UserResponse.model_validate(user), message=Messages.QUERY_SUCCESS)


@router.post("", response_model=BaseResponse, status_code=status.HTTP_201_CREATED, summary="Create user")
async def create_user(data: UserCreateRequest = Depends(parsed_body(UserCreateRequest))):
    user = await user_service.create_user(data.name, data.email, data.password, data.role)
    return success(UserResponse.model_validate(user), message=Messages.CREATED_SUCCESS, code=ResponseCode.CREATED)


@router.put("/{user_id}", response_model=BaseResponse, summary="Update user")
async def update_user(user_id: int, data: UserUpdateRequest = Depends(parsed_body(UserUpdateRequest))):
    user = await user_service.get_user_or_404(user_id)
    user = await user_service.update_user(user, data.model_dump(exclude_unset=True, exclude_none=True))
    return success(UserResponse.model_validate(user), message=Messages.UPDATED_SUCCESS)


@router.delete("/{user_id}", response_model=BaseResponse, summary="Delete user")
async def delete_user(user_id: int):
    await user_service.delete_user(user_id)
    return success({}, message=Messages.DELETED_SUCCESS)
