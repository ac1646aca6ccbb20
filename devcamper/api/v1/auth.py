"""认证接口"""
from fastapi import APIRouter, Depends, Response, status

from devcamper.api.deps import get_settings, parsed_body
from devcamper.core.exceptions import NotAuthorizedException
from devcamper.core.response import Messages, ResponseCode, success
from devcamper.core.security.auth import clear_token_cookie, get_current_user, jwt_auth, set_token_cookie
from devcamper.schemas import (
    BaseResponse, LoginRequest, RegisterRequest, TokenResponse,
    UpdateDetailsRequest, UpdatePasswordRequest, UserResponse
)
from devcamper.services.users.user_service import user_service

router = APIRouter()


def _token_response(user, response: Response, config, message, code=ResponseCode.SUCCESS):
    token = jwt_auth.create_access_token(user.id)
    set_token_cookie(response, token, config)
    return success(TokenResponse(token=token), message=message, code=code)


@router.post("/register", response_model=BaseResponse, status_code=status.HTTP_201_CREATED, summary="Register user")
async def register(
    response: Response,
    data: RegisterRequest = Depends(parsed_body(RegisterRequest)),
    config=Depends(get_settings),
):
    user = await user_service.create_user(data.name, data.email, data.password, data.role)
    return _token_response(user, response, config, Messages.REGISTER_SUCCESS, code=ResponseCode.CREATED)


@router.post("/login", response_model=BaseResponse, summary="Login")
async def login(
    response: Response,
    data: LoginRequest = Depends(parsed_body(LoginRequest)),
    config=Depends(get_settings),
):
    user = await user_service.authenticate_user(data.email, data.password)
    if not user:
        raise NotAuthorizedException("Invalid credentials")
    return _token_response(user, response, config, Messages.LOGIN_SUCCESS)


@router.get("/logout", response_model=BaseResponse, summary="Logout")
async def logout(response: Response):
    clear_token_cookie(response)
    return success({}, message=Messages.LOGOUT_SUCCESS)


@router.get("/me", response_model=BaseResponse, summary="Current user")
async def get_me(user=Depends(get_current_user)):
    return success(UserResponse.model_validate(user), message=Messages.QUERY_SUCCESS)


@router.put("/updatedetails", response_model=BaseResponse, summary="Update name and email")
async def update_details(
    data: UpdateDetailsRequest = Depends(parsed_body(UpdateDetailsRequest)),
    user=Depends(get_current_user),
):
    user = await user_service.update_user(user, data.model_dump(exclude_unset=True, exclude_none=True))
    return success(UserResponse.model_validate(user), message=Messages.UPDATED_SUCCESS)


@router.put("/updatepassword", response_model=BaseResponse, summary="Update password")
async def update_password(
    response: Response,
    data: UpdatePasswordRequest = Depends(parsed_body(UpdatePasswordRequest)),
    user=Depends(get_current_user),
    config=Depends(get_settings),
):
    user = await user_service.change_password(user, data.current_password, data.new_password)
    return _token_response(user, response, config, Messages.UPDATED_SUCCESS)
