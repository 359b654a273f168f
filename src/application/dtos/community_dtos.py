"""Community DTOs (Data Transfer Objects).

Result dataclasses returned by community handlers to the presentation layer.

DTOs:
    - CommunityResult: Single community with derived counts
    - CommunityPageResult: One page of the community listing plus metadata
"""

from dataclasses import dataclass, field
from datetime import datetime

from src.domain.entities.community import Community


@dataclass
class CommunityResult:
    """Single community result DTO.

    Attributes:
        id: Community identifier.
        name: Community name.
        description: Community description.
        created_at: Creation timestamp.
        post_count: Number of posts.
        subscriber_count: Number of subscribers.
    """

    id: int
    name: str
    description: str
    created_at: datetime
    post_count: int = 0
    subscriber_count: int = 0

    @classmethod
    def from_entity(cls, community: Community) -> "CommunityResult":
        """Map a persisted Community entity to the DTO."""
        assert community.id is not None, "community must be persisted"
        return cls(
            id=community.id,
            name=community.name,
            description=community.description,
            created_at=community.created_at,
            post_count=community.post_count,
            subscriber_count=community.subscriber_count,
        )


@dataclass
class CommunityPageResult:
    """Community listing page.

    Attributes:
        items: Communities on the effective page.
        total_items: Communities matching the filter.
        total_pages: Pages needed for all matching communities.
        page_number: Effective (clamped) page number.
        page_size: Requested page size.
    """

    total_items: int
    total_pages: int
    page_number: int
    page_size: int
    items: list[CommunityResult] = field(default_factory=list)
