"""Data Transfer Objects (DTOs) for application layer.

DTOs are result dataclasses returned by command and query handlers.
They are NOT API schemas (Pydantic models live in src/schemas).

Usage:
    from src.application.dtos import CommunityPageResult, CommunityResult
"""

from src.application.dtos.community_dtos import CommunityPageResult, CommunityResult

__all__ = [
    "CommunityPageResult",
    "CommunityResult",
]
