"""Community handler dependency factories.

Request-scoped handler instances for community operations:
- Queries (get, list)
- Commands (create, replace, delete)

All handlers of one request share the request's database session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.container.infrastructure import get_logger
from src.core.container.repositories import get_community_repository

if TYPE_CHECKING:
    from src.application.commands.handlers import (
        CreateCommunityHandler,
        DeleteCommunityHandler,
        ReplaceCommunityHandler,
    )
    from src.application.queries.handlers import (
        GetCommunityHandler,
        ListCommunitiesHandler,
    )
    from src.infrastructure.persistence.repositories import CommunityRepository


# ============================================================================
# Query Handler Factories (Request-Scoped)
# ============================================================================


async def get_get_community_handler(
    community_repo: "CommunityRepository" = Depends(get_community_repository),
) -> "GetCommunityHandler":
    """Get GetCommunity query handler (request-scoped).

    Returns:
        GetCommunityHandler instance.
    """
    from src.application.queries.handlers import GetCommunityHandler

    return GetCommunityHandler(community_repo=community_repo)


async def get_list_communities_handler(
    community_repo: "CommunityRepository" = Depends(get_community_repository),
) -> "ListCommunitiesHandler":
    """Get ListCommunities query handler (request-scoped).

    Creates handler with:
    - CommunityRepository (request-scoped)
    - Logger (app-scoped)

    Returns:
        ListCommunitiesHandler instance.
    """
    from src.application.queries.handlers import ListCommunitiesHandler

    return ListCommunitiesHandler(community_repo=community_repo, logger=get_logger())


# ============================================================================
# Command Handler Factories (Request-Scoped)
# ============================================================================


async def get_create_community_handler(
    community_repo: "CommunityRepository" = Depends(get_community_repository),
) -> "CreateCommunityHandler":
    """Get CreateCommunity command handler (request-scoped)."""
    from src.application.commands.handlers import CreateCommunityHandler

    return CreateCommunityHandler(community_repo=community_repo, logger=get_logger())


async def get_replace_community_handler(
    community_repo: "CommunityRepository" = Depends(get_community_repository),
) -> "ReplaceCommunityHandler":
    """Get ReplaceCommunity command handler (request-scoped)."""
    from src.application.commands.handlers import ReplaceCommunityHandler

    return ReplaceCommunityHandler(community_repo=community_repo, logger=get_logger())


async def get_delete_community_handler(
    community_repo: "CommunityRepository" = Depends(get_community_repository),
) -> "DeleteCommunityHandler":
    """Get DeleteCommunity command handler (request-scoped)."""
    from src.application.commands.handlers import DeleteCommunityHandler

    return DeleteCommunityHandler(community_repo=community_repo, logger=get_logger())
