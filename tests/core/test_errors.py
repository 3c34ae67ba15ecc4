"""Error Hierarchy — statuses, public bodies and store error mapping.

Tests:
    - Every StoreErrorKind has a mapping
    - Public bodies only carry error/message/details
    - Rate limit errors carry Retry-After
"""

import pytest

from cynova.core.errors import (
    STORE_ERROR_STATUS, ErrorCategory, InvalidCredentialsError, InvalidPayloadError,
    MissingIdentifierError, RateLimitExceededError, ResourceNotFoundError, StoreError,
    StoreErrorKind,
)


def test_every_store_kind_is_mapped():
    assert set(STORE_ERROR_STATUS) == set(StoreErrorKind)


@pytest.mark.parametrize("kind, status", [
    (StoreErrorKind.UNIQUE_VIOLATION, 400),
    (StoreErrorKind.NOT_FOUND, 404),
    (StoreErrorKind.FOREIGN_KEY_VIOLATION, 400),
    (StoreErrorKind.OTHER, 500),
])
def test_store_error_status(kind, status):
    error = StoreError(kind, "create")
    assert error.http_status == status
    assert error.category is ErrorCategory.DATABASE
    assert error.code == f"STORE_{kind.name}"
    assert set(error.to_response()) == {"error", "message"}


def test_invalid_payload_body():
    error = InvalidPayloadError(['"nom" is required'])
    assert error.http_status == 400
    assert error.to_response() == {
        "error": "Données invalides", "details": ['"nom" is required'],
    }


def test_simple_bodies():
    assert MissingIdentifierError("du produit").to_response() == {"error": "ID du produit requis"}
    assert ResourceNotFoundError("Blog non trouvé").http_status == 404
    assert InvalidCredentialsError().http_status == 401


def test_rate_limit_headers():
    assert RateLimitExceededError(retry_after_s=30).headers() == {"Retry-After": "30"}
    assert RateLimitExceededError().headers() is None
