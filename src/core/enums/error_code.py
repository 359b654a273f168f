"""Machine-readable codes reported in Problem Details `errors[].code`."""

from enum import Enum


class ErrorCode(Enum):
    INVALID_PAGE_SIZE = "invalid_page_size"
    COMMUNITY_ID_MISMATCH = "community_id_mismatch"
    COMMUNITY_NOT_FOUND = "community_not_found"
