"""Domain errors.

Message constants are returned in Failure results, never raised. The
concurrency conflict is the one error that crosses the repository port
as an exception.
"""

from src.domain.errors.community_concurrency_conflict import (
    CommunityConcurrencyConflict,
)
from src.domain.errors.community_error import CommunityError

__all__ = [
    "CommunityConcurrencyConflict",
    "CommunityError",
]
