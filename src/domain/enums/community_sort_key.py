"""Community listing sort keys.

Clients send free-form sort keys on the list endpoint. They are parsed into
this enum once, at the edge of the application layer, so the repository
only ever sees a closed set of keys.

Parsing Rules:
    - Comparison is case-insensitive ("CreatedAt" == "createdat")
    - Unknown, empty, or missing keys fall back to ID

Usage:
    from src.domain.enums import CommunitySortKey

    key = CommunitySortKey.parse("PostsCount")  # CommunitySortKey.POSTS_COUNT
    key = CommunitySortKey.parse("popularity")  # CommunitySortKey.ID
"""

from enum import Enum


class CommunitySortKey(str, Enum):
    """Sortable fields of the community listing.

    String Enum:
        Values are the lowercased wire names accepted in the sortKey
        query parameter.
    """

    ID = "id"
    """Community identity (default and fallback)."""

    CREATED_AT = "createdat"
    """Creation timestamp."""

    POSTS_COUNT = "postscount"
    """Number of posts in the community."""

    SUBSCRIBERS_COUNT = "subscriberscount"
    """Number of users subscribed to the community."""

    @classmethod
    def parse(cls, raw: str | None) -> "CommunitySortKey":
        """Map a raw sort key to a member, defaulting to ID.

        Args:
            raw: Sort key as sent by the client (any casing) or None.

        Returns:
            CommunitySortKey: Matching member, or ID when unrecognized.

        Example:
            >>> CommunitySortKey.parse("SubscribersCount")
            <CommunitySortKey.SUBSCRIBERS_COUNT: 'subscriberscount'>
            >>> CommunitySortKey.parse("name")
            <CommunitySortKey.ID: 'id'>
        """
        if raw is None:
            return cls.ID
        match raw.lower():
            case cls.CREATED_AT.value:
                return cls.CREATED_AT
            case cls.POSTS_COUNT.value:
                return cls.POSTS_COUNT
            case cls.SUBSCRIBERS_COUNT.value:
                return cls.SUBSCRIBERS_COUNT
            case _:
                return cls.ID
