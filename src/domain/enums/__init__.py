"""Domain enums for business logic.

Available Enums:
    - CommunitySortKey: Sortable fields of the community listing
"""

from src.domain.enums.community_sort_key import CommunitySortKey

__all__ = [
    "CommunitySortKey",
]
