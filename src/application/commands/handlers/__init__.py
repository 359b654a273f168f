"""Command handlers."""

from src.application.commands.handlers.create_community_handler import (
    CreateCommunityHandler,
)
from src.application.commands.handlers.delete_community_handler import (
    DeleteCommunityHandler,
)
from src.application.commands.handlers.replace_community_handler import (
    ReplaceCommunityHandler,
)

__all__ = [
    "CreateCommunityHandler",
    "DeleteCommunityHandler",
    "ReplaceCommunityHandler",
]
