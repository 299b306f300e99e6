"""Tests for the API error body mapping."""

import uuid

from django.http import Http404
from rest_framework import exceptions

from apps.properties.domain.exceptions import (
    PropertyNotFoundError,
    ReferenceKind,
    ReferenceNotFoundError,
    UpstreamUnavailableError,
)
from shared.infrastructure.exception_handler import api_exception_handler


def handle(exc):
    return api_exception_handler(exc, {"view": None})


def test_property_not_found_maps_to_404():
    property_id = uuid.uuid4()

    response = handle(PropertyNotFoundError(property_id))

    assert response.status_code == 404
    assert response.data == {"message": f"Property not found with id: {property_id}", "status": "404"}


def test_missing_reference_maps_to_500():
    city_id = uuid.uuid4()

    response = handle(ReferenceNotFoundError(ReferenceKind.CITY, city_id))

    assert response.status_code == 500
    assert response.data == {"message": f"City not found with id: {city_id}", "status": "500"}


def test_unreachable_peer_maps_to_500():
    response = handle(UpstreamUnavailableError(ReferenceKind.PROPERTY_TYPE, uuid.uuid4(), "timeout"))

    assert response.status_code == 500
    assert response.data["message"].startswith("Property type service unavailable")


def test_validation_error_lists_first_message_per_field():
    exc = exceptions.ValidationError(
        {"title": ["This field is required."], "price": ["Must be positive.", "Too many digits."]}
    )

    response = handle(exc)

    assert response.status_code == 400
    assert response.data == {
        "title": "This field is required.",
        "price": "Must be positive.",
        "message": "Validation failed",
        "status": "400",
    }


def test_nested_list_errors_are_flattened():
    exc = exceptions.ValidationError({"imageUrls": {0: ["Not a valid string."]}})

    response = handle(exc)

    assert response.data["imageUrls"] == "Not a valid string."


def test_framework_errors_keep_their_status():
    response = handle(exceptions.MethodNotAllowed("PATCH"))
    assert response.status_code == 405
    assert response.data == {"message": 'Method "PATCH" not allowed.', "status": "405"}

    response = handle(Http404())
    assert response.status_code == 404
    assert response.data["status"] == "404"


def test_unexpected_error_maps_to_500_with_message():
    response = handle(RuntimeError("database is locked"))
    assert response.status_code == 500
    assert response.data == {"message": "database is locked", "status": "500"}

    response = handle(RuntimeError())
    assert response.data["message"] == "RuntimeError"
