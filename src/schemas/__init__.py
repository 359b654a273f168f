"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import CommunityCreateRequest, CommunityResponse
"""

from src.schemas.community_schemas import (
    CommunityCreateRequest,
    CommunityReplaceRequest,
    CommunityResponse,
)

__all__ = [
    "CommunityCreateRequest",
    "CommunityReplaceRequest",
    "CommunityResponse",
]
