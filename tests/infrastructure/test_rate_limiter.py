"""RouterRateLimiter — counting per scope and per client key."""

import pytest

from cynova.core.errors import RateLimitExceededError
from cynova.infrastructure.rate_limit import RouterRateLimiter, reset_rate_limits


@pytest.fixture(autouse=True)
def _clean_limits():
    reset_rate_limits()
    yield
    reset_rate_limits()


def test_limit_parsed_from_settings():
    limiter = RouterRateLimiter("products")
    assert limiter.item.amount == 100


def test_exceeding_budget_raises():
    limiter = RouterRateLimiter("scope-a", limit="2 per minute")
    limiter.check("10.0.0.1")
    limiter.check("10.0.0.1")
    with pytest.raises(RateLimitExceededError) as exc_info:
        limiter.check("10.0.0.1")
    assert exc_info.value.http_status == 429
    assert exc_info.value.retry_after_s >= 1


def test_budgets_are_per_client_and_scope():
    first = RouterRateLimiter("scope-a", limit="1 per minute")
    second = RouterRateLimiter("scope-b", limit="1 per minute")
    first.check("10.0.0.1")
    first.check("10.0.0.2")
    second.check("10.0.0.1")
    with pytest.raises(RateLimitExceededError):
        first.check("10.0.0.1")
