"""Error Hierarchy — typed, categorized exceptions for every catalog failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory) and http_status
    - to_response() produces the public envelope: {"error", "message"?, "details"?}
    - Store failures are a closed set (StoreErrorKind); STORE_ERROR_STATUS covers
      every member, so the mapper never falls through for a store error
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CynovaError base: one global handler renders all of them
    - StoreError is tagged (kind enum) rather than subclassed per driver code:
      SQLite and PostgreSQL report the same violations with different codes,
      the repository normalizes them once
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    RATE_LIMIT = "rate_limit"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Observability context attached to an error (never sent to clients)."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    record_id: str | None = None
    debug_info: dict[str, Any] | None = None


class CynovaError(Exception):
    """Base exception for all catalog errors."""

    def __init__(
        self,
        error: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        message: str | None = None,
        details: list[str] | None = None,
    ):
        super().__init__(error)
        self.error = error
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.message = message
        self.details = details

    def to_response(self) -> dict:
        """Convert to the public REST error body."""
        body: dict[str, Any] = {"error": self.error}
        if self.message is not None:
            body["message"] = self.message
        if self.details is not None:
            body["details"] = self.details
        return body

    def headers(self) -> dict[str, str] | None:
        return None


# ─── Client Errors (400-level) ───────────────────────────────────

class InvalidPayloadError(CynovaError):
    """Request body or query failed schema validation."""
    def __init__(self, details: list[str], context: ErrorContext | None = None):
        super().__init__(
            "Données invalides", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400, details=details,
        )


class MissingIdentifierError(CynovaError):
    """Identifier path parameter is empty or blank."""
    def __init__(self, label: str, context: ErrorContext | None = None):
        super().__init__(
            f"ID {label} requis", "MISSING_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class ResourceNotFoundError(CynovaError):
    """Requested record does not exist."""
    def __init__(self, error: str, context: ErrorContext | None = None):
        super().__init__(
            error, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )


class UniquenessConflictError(CynovaError):
    """A create/update collides with an existing unique value."""
    def __init__(self, error: str, context: ErrorContext | None = None):
        super().__init__(
            error, "UNIQUENESS_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 400,
        )


class MissingCredentialsError(CynovaError):
    """Login attempted without email or password."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Email et mot de passe requis", "MISSING_CREDENTIALS",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, context, 400,
        )


class InvalidCredentialsError(CynovaError):
    """Unknown email or wrong password — the body never says which."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Email ou mot de passe incorrect", "INVALID_CREDENTIALS",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.WARNING, context, 401,
        )


class RateLimitExceededError(CynovaError):
    """Client exceeded the per-router request budget."""
    def __init__(self, retry_after_s: int | None = None, context: ErrorContext | None = None):
        super().__init__(
            "Trop de requêtes, veuillez réessayer plus tard", "RATE_LIMITED",
            ErrorCategory.RATE_LIMIT, ErrorSeverity.WARNING, context, 429,
            message="Vous avez dépassé la limite de requêtes autorisées",
        )
        self.retry_after_s = retry_after_s

    def headers(self) -> dict[str, str] | None:
        if self.retry_after_s is None:
            return None
        return {"Retry-After": str(self.retry_after_s)}


# ─── Store Errors ────────────────────────────────────────────────

class StoreErrorKind(str, Enum):
    """Closed set of failures the storage layer can report."""
    UNIQUE_VIOLATION = "unique_violation"
    NOT_FOUND = "not_found"
    FOREIGN_KEY_VIOLATION = "foreign_key_violation"
    OTHER = "other"


# kind -> (status, error, message)
STORE_ERROR_STATUS: dict[StoreErrorKind, tuple[int, str, str]] = {
    StoreErrorKind.UNIQUE_VIOLATION: (
        400, "Conflit de données",
        "Une ressource avec ces données existe déjà",
    ),
    StoreErrorKind.NOT_FOUND: (
        404, "Ressource non trouvée",
        "La ressource demandée n'existe pas",
    ),
    StoreErrorKind.FOREIGN_KEY_VIOLATION: (
        400, "Violation de contrainte",
        "Impossible de supprimer cette ressource car elle est référencée ailleurs",
    ),
    StoreErrorKind.OTHER: (
        500, "Erreur base de données",
        "Une erreur est survenue lors de l'accès aux données",
    ),
}


class StoreError(CynovaError):
    """Database operation failed; kind decides the HTTP mapping."""
    def __init__(
        self, kind: StoreErrorKind, operation: str, context: ErrorContext | None = None,
    ):
        status, error, message = STORE_ERROR_STATUS[kind]
        super().__init__(
            error, f"STORE_{kind.name}", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL if status >= 500 else ErrorSeverity.ERROR,
            context, status, message=message,
        )
        self.kind = kind
        self.operation = operation
