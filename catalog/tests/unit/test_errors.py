"""Unit tests for the error taxonomy and its translation to responses."""

from decimal import InvalidOperation

import pytest
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.shared.context import trace_id_var
from catalog.shared.errors import (
    AlreadyExistsError,
    AppError,
    BadRequestError,
    ErrorKind,
    ExceptionMapper,
    InvalidDataError,
    NotFoundError,
    TransientAccessError,
    ValidationError,
    translate,
)
from catalog.shared.errors.schemas import FieldViolation

ALL_ERROR_TYPES = [
    AppError,
    NotFoundError,
    AlreadyExistsError,
    InvalidDataError,
    TransientAccessError,
    ValidationError,
    BadRequestError,
]


# ==================== Taxonomy ====================


class TestTaxonomy:
    """Tests for AppError subclasses."""

    def test_every_kind_has_exactly_one_error_type(self):
        """Test that the kind -> error type mapping is total and unambiguous."""
        kinds = [error_type.kind for error_type in ALL_ERROR_TYPES]
        assert sorted(kinds) == sorted(ErrorKind)

    @pytest.mark.parametrize(
        ("error_type", "code"),
        [
            (NotFoundError, "NOT_FOUND"),
            (AlreadyExistsError, "ALREADY_EXISTS"),
            (InvalidDataError, "INVALID_DATA"),
            (TransientAccessError, "TRANSIENT_ACCESS"),
            (ValidationError, "VALIDATION"),
            (BadRequestError, "BAD_REQUEST"),
            (AppError, "INTERNAL_ERROR"),
        ],
    )
    def test_codes_are_derived_from_class_names(self, error_type, code):
        assert error_type.code == code

    def test_default_message_comes_from_docstring(self):
        assert NotFoundError().message == "Referenced item does not exist."

    def test_str_is_the_message(self):
        assert str(InvalidDataError("Stock cannot be negative")) == "Stock cannot be negative"


# ==================== Translation ====================


class TestTranslateDomainErrors:
    """Tests for translate() on store failures."""

    @pytest.mark.parametrize(
        ("exc", "status", "title"),
        [
            (NotFoundError("Item with ID 9 not found for update"), 404, "Item Not Found"),
            (AlreadyExistsError("Item with name 'X' already exists"), 409, "Item Already Exists"),
            (InvalidDataError("Price cannot be negative"), 400, "Invalid Item Data"),
        ],
    )
    def test_client_errors_expose_their_message(self, exc, status, title):
        code, response = translate(exc, "/api/items/9")

        assert code == status
        assert response.status == status
        assert response.error == title
        assert response.message == exc.message
        assert response.path == "/api/items/9"
        assert response.validation_errors is None

    def test_transient_error_hides_its_cause(self):
        """Test that backend details never reach the caller."""
        code, response = translate(
            TransientAccessError("Connection to Hyrule Database failed"), "/api/items"
        )

        assert code == 500
        assert response.error == "Database Access Error"
        assert "Hyrule" not in response.message
        assert response.message == (
            "An error occurred while accessing the database. Please try again later."
        )

    def test_validation_error_carries_field_list(self):
        violations = [FieldViolation(field="name", message="Field required")]
        code, response = translate(ValidationError(violations), "/api/items")

        assert code == 400
        assert response.error == "Validation Failed"
        assert response.message == "Request validation failed"
        assert response.validation_errors == violations

    def test_trace_id_is_taken_from_context(self):
        token = trace_id_var.set("trace-123")
        try:
            _, response = translate(NotFoundError(), "/api/items/1")
        finally:
            trace_id_var.reset(token)

        assert response.trace_id == "trace-123"


class TestTranslateFrameworkErrors:
    """Tests for translate() on request parsing and routing failures."""

    def test_request_validation_error_becomes_field_list(self):
        exc = RequestValidationError(
            [
                {"loc": ("body", "price"), "msg": "Input should be a valid decimal", "type": "decimal_parsing"},
                {"loc": ("query", "min_price"), "msg": "Input should be a valid decimal", "type": "decimal_parsing"},
                {"loc": ("body",), "msg": "Field required", "type": "missing"},
            ]
        )

        code, response = translate(exc, "/api/items")

        assert code == 400
        assert response.code == "VALIDATION"
        assert [v.field for v in response.validation_errors] == ["price", "min_price", "body"]
        assert response.validation_errors[0].message == "Input should be a valid decimal"

    def test_http_exception_keeps_status(self):
        code, response = translate(StarletteHTTPException(405, "Method Not Allowed"), "/api/items")

        assert code == 405
        assert response.error == "Method Not Allowed"
        assert response.code == "HTTP_405"


class TestTranslateTechnicalErrors:
    """Tests for translate() on exceptions outside the taxonomy."""

    @pytest.mark.parametrize("exc", [ValueError("bad id"), InvalidOperation()])
    def test_argument_errors_are_bad_requests(self, exc):
        code, response = translate(exc, "/api/items")

        assert code == 400
        assert response.error == "Invalid Argument"

    @pytest.mark.parametrize("exc", [TimeoutError("slow"), ConnectionError("reset")])
    def test_backend_errors_are_transient(self, exc):
        code, response = translate(exc, "/api/items")

        assert code == 500
        assert response.error == "Database Access Error"
        assert response.code == "TRANSIENT_ACCESS"

    def test_uncategorized_error_is_generic_internal(self):
        code, response = translate(RuntimeError("secret internals"), "/api/items")

        assert code == 500
        assert response.error == "Internal Server Error"
        assert response.code == "INTERNAL_ERROR"
        assert "secret" not in response.message

    def test_mapper_passes_domain_errors_through(self):
        exc = NotFoundError("gone")
        assert ExceptionMapper.map(exc) is exc

    def test_uncategorized_error_records_its_origin(self):
        _, response = translate(RuntimeError("boom"), "/api/items/3")

        assert response.details == {"origin": "/api/items/3"}

    def test_empty_details_are_omitted_from_the_body(self):
        _, response = translate(NotFoundError("gone"), "/api/items/3")

        assert "details" not in response.model_dump(exclude_none=True)
