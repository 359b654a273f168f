"""Community domain entity.

A community groups posts and subscribed users around a topic. The entity
carries the persisted fields plus the derived counts used by the listing.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Identity assigned by the record store on insert
    - Posts are owned (deleted with the community); subscribers are not

Usage:
    from src.domain.entities import Community

    community = Community.create(name="Rustaceans", description="All things Rust")
    saved = await repo.add(community)
    saved.id  # assigned by the store
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass
class Community:
    """Community aggregate.

    Attributes:
        id: Store-assigned identifier (None until persisted).
        name: Display name (at most 100 characters).
        description: Free-text description.
        created_at: Creation timestamp (timezone-aware UTC).
        post_count: Number of posts (read model only).
        subscriber_count: Number of subscribed users (read model only).

    Example:
        >>> community = Community.create(name="Go", description="Gophers")
        >>> community.id is None
        True
    """

    name: str
    description: str
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    post_count: int = 0
    subscriber_count: int = 0

    @classmethod
    def create(cls, *, name: str, description: str) -> "Community":
        """Build a new, not yet persisted community from a creation payload.

        Args:
            name: Community name.
            description: Community description.

        Returns:
            Community: Unsaved community stamped with the current UTC time.
        """
        return cls(name=name, description=description, created_at=datetime.now(UTC))

    @property
    def is_persisted(self) -> bool:
        """Whether the store has assigned an identity."""
        return self.id is not None
