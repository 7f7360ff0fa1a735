"""Error taxonomy — category tags drive status codes and the response envelope."""

from datetime import timezone

import pytest

from catalog_api.core.errors import (
    STATUS_BY_CATEGORY, CatalogError, ConflictError, DiscountOutOfRangeError,
    ErrorCategory, InternalError, InvalidOperationError, NotificationError,
    ResourceNotFoundError, UnauthorizedError, ValidationError,
)


@pytest.mark.parametrize(
    "error, status, category",
    [
        (ValidationError("bad"), 400, ErrorCategory.VALIDATION),
        (DiscountOutOfRangeError(150), 400, ErrorCategory.VALIDATION),
        (InvalidOperationError("nope"), 400, ErrorCategory.INVALID_OPERATION),
        (UnauthorizedError(), 401, ErrorCategory.UNAUTHORIZED),
        (ResourceNotFoundError("Product", "9"), 404, ErrorCategory.RESOURCE_NOT_FOUND),
        (ConflictError("dup"), 400, ErrorCategory.CONFLICT),
        (NotificationError("smtp down", "a@b.com"), 502, ErrorCategory.EXTERNAL_SERVICE),
        (InternalError("boom", "commit"), 500, ErrorCategory.INTERNAL),
    ],
)
def test_status_derived_from_category(error, status, category):
    assert isinstance(error, CatalogError)
    assert error.category is category
    assert error.http_status == status


def test_every_category_has_a_status():
    assert set(STATUS_BY_CATEGORY) == set(ErrorCategory)


def test_to_response_envelope():
    body = ResourceNotFoundError("Product", "42").to_response()["error"]
    assert body["status_code"] == 404
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["message"] == "Product with ID 42 not found"
    assert body["category"] == "resource_not_found"
    assert body["severity"] == "error"
    assert body["timestamp"].endswith("+00:00")


def test_not_found_records_resource_in_context():
    err = ResourceNotFoundError("User", "7")
    assert err.context.resource_type == "User"
    assert err.context.resource_id == "7"
    assert err.context.timestamp.tzinfo is timezone.utc


def test_not_found_accepts_custom_message():
    err = ResourceNotFoundError("Product", "1", message="custom")
    assert err.message == "custom"


def test_internal_error_message_is_generic():
    err = InternalError("password=hunter2 in DSN", "connect")
    assert "hunter2" not in err.message
    assert "hunter2" not in str(err.to_response())
    assert err.context.debug_info == {
        "operation": "connect", "detail": "password=hunter2 in DSN",
    }


def test_discount_error_code_and_field():
    err = DiscountOutOfRangeError(-5)
    assert err.code == "DISCOUNT_OUT_OF_RANGE"
    assert err.field == "discount_percentage"
    assert err.percentage == -5
