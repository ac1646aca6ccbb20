"""异常处理"""

from fastapi import HTTPException, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from tortoise.exceptions import DoesNotExist, IntegrityError

from devcamper.core.response import Messages, error


class BusinessException(HTTPException):
    """业务异常基类"""

    def __init__(self, status_code, detail, error_code=None, errors=None, headers=None):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code
        self.errors = errors or []


class JSONParseException(BusinessException):
    def __init__(self, detail):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Malformed JSON body: {detail}",
            error_code="JSON_PARSE_ERROR"
        )


class PayloadTooLargeException(BusinessException):
    def __init__(self, size, limit):
        super().__init__(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Request body of {size} bytes exceeds limit of {limit} bytes",
            error_code="PAYLOAD_TOO_LARGE"
        )


class ResourceNotFoundException(BusinessException):
    def __init__(self, resource, resource_id):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource} not found with id of {resource_id}",
            error_code="RESOURCE_NOT_FOUND"
        )


class NotAuthorizedException(BusinessException):
    def __init__(self, detail=Messages.UNAUTHORIZED):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            error_code="NOT_AUTHORIZED",
            headers={"WWW-Authenticate": "Bearer"},
        )


class ForbiddenException(BusinessException):
    def __init__(self, detail=Messages.FORBIDDEN):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
            error_code="FORBIDDEN"
        )


class BadRequestException(BusinessException):
    def __init__(self, detail, error_code="BAD_REQUEST"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            error_code=error_code
        )


def _format_validation_errors(errors):
    messages = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        field = ".".join(loc)
        messages.append(f"{field}: {err.get('msg')}" if field else err.get("msg", ""))
    return ", ".join(messages) or Messages.BAD_REQUEST


def resolve_error(exc):
    """把异常映射为 (状态码, 消息, 响应头)"""
    if isinstance(exc, StarletteHTTPException):
        return exc.status_code, str(exc.detail), getattr(exc, "headers", None)
    if isinstance(exc, (RequestValidationError, ValidationError)):
        return status.HTTP_400_BAD_REQUEST, _format_validation_errors(exc.errors()), None
    if isinstance(exc, DoesNotExist):
        return status.HTTP_404_NOT_FOUND, Messages.NOT_FOUND, None
    if isinstance(exc, IntegrityError):
        return status.HTTP_400_BAD_REQUEST, Messages.DUPLICATE, None

    logger.opt(exception=exc).error(f"未处理异常: {exc}")
    return status.HTTP_500_INTERNAL_SERVER_ERROR, Messages.SERVER_ERROR, None


def create_error_response(status_code, message, headers=None):
    content = error(message=message, code=status_code).model_dump(mode="json")
    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def error_handler(request, exc):
    status_code, message, headers = resolve_error(exc)
    if status_code < 500:
        logger.debug(f"{request.method} {request.url.path} -> {status_code}: {message}")
    return create_error_response(status_code, message, headers)


HANDLED_EXCEPTIONS = (
    StarletteHTTPException,
    RequestValidationError,
    ValidationError,
    DoesNotExist,
    IntegrityError,
)
