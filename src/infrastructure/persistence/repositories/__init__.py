"""Repository implementations (adapters for hexagonal architecture).

Concrete implementations of repository protocols defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.community_repository import (
    CommunityRepository,
)

__all__ = [
    "CommunityRepository",
]
