"""Community queries (CQRS read operations).

Queries represent requests for community data. They are immutable
dataclasses with question-like names. Queries NEVER change state.
"""

from dataclasses import dataclass

from src.domain.enums.community_sort_key import CommunitySortKey


@dataclass(frozen=True, kw_only=True)
class GetCommunity:
    """Get a single community by ID.

    Attributes:
        community_id: Community to retrieve.
    """

    community_id: int


@dataclass(frozen=True, kw_only=True)
class ListCommunities:
    """List one page of communities, optionally filtered and sorted.

    Attributes:
        page_number: Requested page (clamped into range by the handler).
        page_size: Items per page (must be >= 1).
        sort_key: Primary sort field.
        ascending: Sort direction. Default ascending.
        search_key: Substring matched against name or description.
            None or whitespace-only disables filtering.

    Example:
        >>> query = ListCommunities(
        ...     page_number=2,
        ...     page_size=10,
        ...     sort_key=CommunitySortKey.parse("postscount"),
        ...     ascending=False,
        ...     search_key="python",
        ... )
        >>> result = await handler.handle(query)
    """

    page_number: int = 1
    page_size: int = 10
    sort_key: CommunitySortKey = CommunitySortKey.ID
    ascending: bool = True
    search_key: str | None = None

    @property
    def search_term(self) -> str | None:
        """Search key as sent, or None when it is missing or whitespace-only.

        Whitespace decides only whether to filter; the matched text keeps
        any surrounding spaces.
        """
        if self.search_key is None or not self.search_key.strip():
            return None
        return self.search_key
