"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_list_communities_handler

The container is organized into modules:
- infrastructure: Database, request session, logging
- repositories: Repository factories
- community_handlers: Community query/command handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
)

# Repositories
from src.core.container.repositories import get_community_repository

# Community handlers
from src.core.container.community_handlers import (
    get_create_community_handler,
    get_delete_community_handler,
    get_get_community_handler,
    get_list_communities_handler,
    get_replace_community_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    # Repositories
    "get_community_repository",
    # Community handlers
    "get_get_community_handler",
    "get_list_communities_handler",
    "get_create_community_handler",
    "get_replace_community_handler",
    "get_delete_community_handler",
]
