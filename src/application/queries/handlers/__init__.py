"""Query handlers."""

from src.application.queries.handlers.get_community_handler import (
    GetCommunityHandler,
)
from src.application.queries.handlers.list_communities_handler import (
    ListCommunitiesHandler,
)

__all__ = [
    "GetCommunityHandler",
    "ListCommunitiesHandler",
]
