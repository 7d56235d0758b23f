"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - ArticleId wraps a positive int, only produced by core.validation
    - VoteDelta wraps an int (may be negative or zero)
    - Every failure kind is an ErrorKind member, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to logs and JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ArticleId = NewType("ArticleId", int)


# ─── Value Types ─────────────────────────────────────────────────

VoteDelta = NewType("VoteDelta", int)

# PostgreSQL `integer` upper bound (articles.article_id column)
MAX_ARTICLE_ID = 2_147_483_647


# ─── Enums ───────────────────────────────────────────────────────

class ErrorKind(str, Enum):
    """Failure taxonomy shared by outcomes and exceptions."""
    INVALID_INPUT = "invalid_input"
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"
