"""Community commands (CQRS write operations).

Commands represent intent to change community state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, kw_only=True)
class CreateCommunity:
    """Create a new community.

    Attributes:
        name: Community name.
        description: Community description.

    Example:
        >>> command = CreateCommunity(name="Pythonistas", description="Python chat")
        >>> result = await handler.handle(command)
    """

    name: str
    description: str


@dataclass(frozen=True, kw_only=True)
class ReplaceCommunity:
    """Replace every stored field of a community.

    The body carries its own id, which must match the addressed one.

    Attributes:
        path_id: ID addressed by the request URL.
        community_id: ID carried in the replacement payload.
        name: New name.
        description: New description.
        created_at: New creation timestamp. None keeps the stored value.
    """

    path_id: int
    community_id: int
    name: str
    description: str
    created_at: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteCommunity:
    """Permanently delete a community with its posts and subscriptions.

    Attributes:
        community_id: Community to delete.
    """

    community_id: int
