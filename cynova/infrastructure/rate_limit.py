"""Rate Limiting — per-router request budget keyed by client address.

Invariants:
    - Each router owns one RouterRateLimiter (its own scope); budgets are not shared
    - Exceeding the budget raises RateLimitExceededError (429) with Retry-After
    - Disabled entirely when settings.rate_limit_enabled is False

Design Decisions:
    - The `limits` library does the counting (moving window, in-memory storage);
      this module only wires it into a FastAPI dependency
    - Limit string parsed lazily so settings changes in tests are picked up
"""

import logging
import time

from fastapi import Request
from limits import RateLimitItem, parse
from limits.storage import MemoryStorage
from limits.strategies import MovingWindowRateLimiter

from cynova.config import get_settings
from cynova.core.errors import RateLimitExceededError

logger = logging.getLogger(__name__)

_storage = MemoryStorage()
_strategy = MovingWindowRateLimiter(_storage)


def reset_rate_limits() -> None:
    """Forget every recorded hit (used between tests)."""
    _storage.reset()


def client_key(request: Request) -> str:
    return request.client.host if request.client else "anonymous"


class RouterRateLimiter:
    """FastAPI dependency enforcing one shared budget for a router."""

    def __init__(self, scope: str, limit: str | None = None):
        self.scope = scope
        self._limit = limit
        self._item: RateLimitItem | None = None

    @property
    def item(self) -> RateLimitItem:
        if self._item is None:
            self._item = parse(self._limit or get_settings().rate_limit)
        return self._item

    @item.setter
    def item(self, value: RateLimitItem) -> None:
        self._item = value

    def check(self, key: str) -> None:
        """Record one hit for key; raise when the budget is exhausted."""
        if _strategy.hit(self.item, self.scope, key):
            return
        reset_at, _remaining = _strategy.get_window_stats(self.item, self.scope, key)
        retry_after = max(1, int(reset_at - time.time()))
        logger.warning(
            f"Rate limit exceeded on {self.scope}",
            extra={"client": key, "resource": self.scope},
        )
        raise RateLimitExceededError(retry_after_s=retry_after)

    async def __call__(self, request: Request) -> None:
        if not get_settings().rate_limit_enabled:
            return
        self.check(client_key(request))
