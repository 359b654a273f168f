"""CommunityRepository protocol for community persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from datetime import datetime
from typing import Protocol

from src.domain.entities.community import Community
from src.domain.enums.community_sort_key import CommunitySortKey


class CommunityRepository(Protocol):
    """Community repository protocol (port).

    Defines the interface for community persistence operations.
    Infrastructure layer provides concrete implementation.

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        find_by_id: Retrieve community (with counts) by ID
        exists: Check whether a community ID is present
        count: Count communities matching a search term
        list_page: Retrieve one sorted page of matching communities
        add: Insert a new community
        replace: Overwrite a community's fields by ID
        delete: Remove a community by ID
    """

    async def find_by_id(self, community_id: int) -> Community | None:
        """Find community by ID.

        Args:
            community_id: Community identifier.

        Returns:
            Community with post/subscriber counts if found, None otherwise.
        """
        ...

    async def exists(self, community_id: int) -> bool:
        """Check whether a community exists.

        Args:
            community_id: Community identifier.

        Returns:
            True if a row with this ID is present.
        """
        ...

    async def count(self, search_term: str | None = None) -> int:
        """Count communities matching a search term.

        Args:
            search_term: Case-insensitive substring matched against name or
                description. None means no filter.

        Returns:
            Number of matching communities.
        """
        ...

    async def list_page(
        self,
        *,
        search_term: str | None,
        sort_key: CommunitySortKey,
        ascending: bool,
        offset: int,
        limit: int,
    ) -> list[Community]:
        """Retrieve one page of matching communities.

        Ordering is total: non-ID sort keys are tie-broken by ID in the
        same direction.

        Args:
            search_term: Substring filter (see count()).
            sort_key: Primary sort field.
            ascending: Sort direction.
            offset: Number of rows to skip.
            limit: Maximum rows to return.

        Returns:
            Communities on the page (possibly empty).
        """
        ...

    async def add(self, community: Community) -> Community:
        """Insert a new community.

        Args:
            community: Unsaved community (id is None).

        Returns:
            The community with its store-assigned ID.
        """
        ...

    async def replace(
        self,
        community_id: int,
        *,
        name: str,
        description: str,
        created_at: datetime | None = None,
    ) -> None:
        """Overwrite the stored fields of an existing row.

        Args:
            community_id: Community identifier.
            name: New name.
            description: New description.
            created_at: New creation timestamp. None keeps the stored value.

        Raises:
            CommunityConcurrencyConflict: If no row matched the ID.
        """
        ...

    async def delete(self, community_id: int) -> bool:
        """Delete a community and its owned posts/subscriptions.

        Args:
            community_id: Community identifier.

        Returns:
            True if a row was deleted, False if none existed.
        """
        ...
