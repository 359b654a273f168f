"""Community domain errors.

Message constants for community operation failures.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error) instead)

Usage:
    from src.domain.errors import CommunityError

    if command.community_id != command.path_id:
        return Failure(error=ValidationError(..., message=CommunityError.ID_MISMATCH))
"""


class CommunityError:
    """Community error constants.

    Error Categories:
        - Validation errors: ID_MISMATCH, INVALID_PAGE_SIZE
        - Lookup errors: NOT_FOUND
    """

    # -------------------------------------------------------------------------
    # Validation Errors
    # -------------------------------------------------------------------------

    ID_MISMATCH = "Community id in the body does not match the id in the path"
    """Replacement payload must target the addressed community."""

    INVALID_PAGE_SIZE = "Page size must be at least 1"
    """Listing cannot be paginated with an empty page."""

    # -------------------------------------------------------------------------
    # Lookup Errors
    # -------------------------------------------------------------------------

    NOT_FOUND = "Community not found"
    """No community exists with the requested id."""
