"""Commands (CQRS write side).

Usage:
    from src.application.commands import CreateCommunity, ReplaceCommunity
"""

from src.application.commands.community_commands import (
    CreateCommunity,
    DeleteCommunity,
    ReplaceCommunity,
)

__all__ = [
    "CreateCommunity",
    "DeleteCommunity",
    "ReplaceCommunity",
]
