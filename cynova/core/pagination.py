"""Pagination & Envelopes — pure arithmetic and response shaping for list endpoints.

Invariants:
    - page >= 1, limit >= 1 (enforced at the route boundary)
    - pages == ceil(total / limit); 0 when total == 0
    - offset == (page - 1) * limit

Design Decisions:
    - Pure functions, no IO: services do the querying, this module only shapes
"""

import math
from dataclasses import dataclass
from typing import Any

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass(frozen=True)
class PageRequest:
    """Requested page window."""
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def page_count(total: int, limit: int) -> int:
    return math.ceil(total / limit)


def paginated(
    key: str, items: list[Any], request: PageRequest, total: int,
) -> dict[str, Any]:
    """Build {key: items, pagination: {page, limit, total, pages}}."""
    return {
        key: items,
        "pagination": {
            "page": request.page,
            "limit": request.limit,
            "total": total,
            "pages": page_count(total, request.limit),
        },
    }


def counted(key: str, items: list[Any]) -> dict[str, Any]:
    """Build {key: items, count} for unpaginated search results."""
    return {key: items, "count": len(items)}
