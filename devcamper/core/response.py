"""响应工具"""
from enum import IntEnum

from devcamper.schemas.common import BaseResponse, PaginationInfo, PaginationResponse


class ResponseCode(IntEnum):
    SUCCESS = 200
    CREATED = 201

    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    PAYLOAD_TOO_LARGE = 413
    TOO_MANY_REQUESTS = 429

    SERVER_ERROR = 500


class Messages:
    OPERATION_SUCCESS = "Operation successful"
    CREATED_SUCCESS = "Created successfully"
    UPDATED_SUCCESS = "Updated successfully"
    DELETED_SUCCESS = "Deleted successfully"
    QUERY_SUCCESS = "Query successful"
    UPLOAD_SUCCESS = "Upload successful"

    LOGIN_SUCCESS = "Login successful"
    LOGOUT_SUCCESS = "Logout successful"
    REGISTER_SUCCESS = "Registration successful"
    UNAUTHORIZED = "Not authorized to access this route"
    FORBIDDEN = "User role is not authorized to access this route"

    BAD_REQUEST = "Invalid request"
    NOT_FOUND = "Resource not found"
    DUPLICATE = "Duplicate field value entered"
    TOO_MANY_REQUESTS = "Too many requests, please try again later."
    SERVER_ERROR = "Server Error"


def success(data=None, message=Messages.OPERATION_SUCCESS, code=ResponseCode.SUCCESS):
    return BaseResponse(
        success=True,
        code=int(code),
        message=message,
        data=data,
    )


def error(message, code, data=None):
    return BaseResponse(
        success=False,
        code=int(code),
        message=message,
        data=data,
    )


def page(items, total, page, limit, message=Messages.QUERY_SUCCESS, code=ResponseCode.SUCCESS):
    items = list(items)
    pages = (total + limit - 1) // limit if limit else 0
    return PaginationResponse(
        success=True,
        code=int(code),
        message=message,
        count=len(items),
        data=items,
        pagination=PaginationInfo(
            page=page,
            limit=limit,
            total=total,
            pages=pages,
            next=page + 1 if page * limit < total else None,
            prev=page - 1 if page > 1 else None,
        ),
    )
