from pydantic import BaseModel, ValidationError
from tortoise.exceptions import DoesNotExist, IntegrityError

from devcamper.core.exceptions import (
    JSONParseException, NotAuthorizedException, ResourceNotFoundException, create_error_response,
    resolve_error
)


class Payload(BaseModel):
    rating: int


def test_business_exceptions_keep_status_and_headers():
    assert resolve_error(ResourceNotFoundException("Course", 7)) == (
        404, "Course not found with id of 7", None
    )
    status_code, _, headers = resolve_error(NotAuthorizedException())
    assert status_code == 401
    assert headers == {"WWW-Authenticate": "Bearer"}


def test_orm_errors():
    assert resolve_error(DoesNotExist("missing")) == (404, "Resource not found", None)
    assert resolve_error(IntegrityError("UNIQUE constraint failed")) == (
        400, "Duplicate field value entered", None
    )


def test_validation_error_lists_fields():
    try:
        Payload.model_validate({"rating": "high"})
    except ValidationError as exc:
        status_code, message, _ = resolve_error(exc)
    assert status_code == 400
    assert message.startswith("rating: ")


def test_unknown_errors_hide_details():
    status_code, message, _ = resolve_error(RuntimeError("connection string leaked"))
    assert status_code == 500
    assert message == "Server Error"


def test_error_response_body_shape():
    response = create_error_response(400, JSONParseException("Expecting value").detail)
    assert response.status_code == 400
    assert response.body.startswith(b'{"success":false,"code":400,"message":"Malformed JSON body')
