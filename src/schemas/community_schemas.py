"""Community request and response schemas.

Pydantic schemas for community API endpoints. Includes:
- Request schemas (client → API)
- Response schemas (API → client)
- DTO-to-schema conversion methods
"""

from datetime import datetime

from pydantic import BaseModel, Field

from src.application.dtos.community_dtos import CommunityResult


# =============================================================================
# Request Schemas
# =============================================================================


class CommunityCreateRequest(BaseModel):
    """Creation payload for POST /communities.

    Attributes:
        name: Community name.
        description: Community description.
    """

    name: str = Field(
        ..., max_length=100, description="Community name", examples=["Pythonistas"]
    )
    description: str = Field(
        "", description="Community description", examples=["Everything Python"]
    )


class CommunityReplaceRequest(BaseModel):
    """Full replacement payload for PUT /communities/{id}.

    Attributes:
        id: Must equal the id in the path.
        name: New name.
        description: New description.
        created_at: New creation timestamp (omit to keep the stored one).
    """

    id: int = Field(..., description="Community identifier (must match the path)")
    name: str = Field(..., max_length=100, description="Community name")
    description: str = Field("", description="Community description")
    created_at: datetime | None = Field(None, description="Creation timestamp")


# =============================================================================
# Response Schemas
# =============================================================================


class CommunityResponse(BaseModel):
    """Single community response.

    Attributes:
        id: Community identifier.
        name: Community name.
        description: Community description.
        created_at: Creation timestamp.
        post_count: Number of posts.
        subscriber_count: Number of subscribers.
    """

    id: int = Field(..., description="Community identifier")
    name: str = Field(..., description="Community name")
    description: str = Field(..., description="Community description")
    created_at: datetime = Field(..., description="Creation timestamp")
    post_count: int = Field(0, description="Number of posts")
    subscriber_count: int = Field(0, description="Number of subscribers")

    @classmethod
    def from_dto(cls, dto: CommunityResult) -> "CommunityResponse":
        """Convert application DTO to response schema.

        Args:
            dto: CommunityResult from handler.

        Returns:
            CommunityResponse for API response.
        """
        return cls(
            id=dto.id,
            name=dto.name,
            description=dto.description,
            created_at=dto.created_at,
            post_count=dto.post_count,
            subscriber_count=dto.subscriber_count,
        )
