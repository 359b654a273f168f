"""Community concurrency conflict.

Raised by a CommunityRepository when a full replacement matched no row.
The store cannot tell whether the row vanished or changed underneath the
update, so the caller re-checks existence to decide.

Unlike the message constants in community_error.py this IS an exception:
it crosses the repository port instead of flowing through a Result.
"""


class CommunityConcurrencyConflict(Exception):
    """Replacement of a community matched no row.

    Attributes:
        community_id: Community the update addressed.
    """

    def __init__(self, community_id: int) -> None:
        super().__init__(f"Community {community_id} was not updated: no matching row")
        self.community_id = community_id
