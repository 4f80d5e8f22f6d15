"""Unit tests for the error taxonomy -> envelope mapping."""

from __future__ import annotations

import pytest
from django.http import Http404
from rest_framework import exceptions

from modules.core.exception_handler import (
    INTERNAL_ERROR_MESSAGE,
    api_exception_handler,
    build_error_envelope,
)
from modules.core.exceptions import EntityNotFound, InvalidArgument, RequestValidationFailed

pytestmark = pytest.mark.unit


class TestBuildErrorEnvelope:
    def test_not_found(self):
        envelope = build_error_envelope(EntityNotFound("Product", "abc"))
        assert envelope.status_code == 404
        assert envelope.message == "Product with ID abc was not found"
        assert envelope.errors is None

    def test_validation_failure_keeps_field_errors(self):
        exc = RequestValidationFailed({"Name": ["Name is required"]})
        envelope = build_error_envelope(exc)
        assert envelope.status_code == 400
        assert envelope.message == "One or more validation errors occurred"
        assert envelope.errors == {"Name": ["Name is required"]}

    def test_invalid_argument(self):
        envelope = build_error_envelope(InvalidArgument("Invalid pagination parameters"))
        assert envelope.status_code == 400
        assert envelope.message == "Invalid pagination parameters"

    def test_framework_exception_keeps_status(self):
        envelope = build_error_envelope(exceptions.MethodNotAllowed("PUT"))
        assert envelope.status_code == 405
        assert envelope.message == 'Method "PUT" not allowed.'

    def test_django_http404(self):
        assert build_error_envelope(Http404()).status_code == 404

    def test_unexpected_error_hides_details(self):
        envelope = build_error_envelope(KeyError("internal detail"))
        assert envelope.status_code == 500
        assert envelope.message == INTERNAL_ERROR_MESSAGE
        assert "internal detail" not in envelope.message


class TestApiExceptionHandler:
    def test_renders_camel_case_envelope(self):
        response = api_exception_handler(
            RequestValidationFailed({"Price": ["Price must be greater than or equal to 0"]}),
            {"view": None},
        )
        assert response.status_code == 400
        assert response.data == {
            "statusCode": 400,
            "message": "One or more validation errors occurred",
            "errors": {"Price": ["Price must be greater than or equal to 0"]},
        }

    def test_omits_errors_key_when_absent(self):
        response = api_exception_handler(EntityNotFound("Product", "x"), {})
        assert "errors" not in response.data
