"""Database models for persistence layer.

SQLAlchemy models that map to database tables. These are infrastructure
concerns and should not be imported by the domain layer.

Models Organization:
    - community.py: Community model + community_subscribers association
    - post.py: Post model (owned by a community)
    - user.py: User model (subscriber)

Note:
    Domain entities (dataclasses) live in src/domain/entities/
    They are separate and mapped via repository layer.
"""

from src.infrastructure.persistence.models.community import (
    Community,
    community_subscribers,
)
from src.infrastructure.persistence.models.post import Post
from src.infrastructure.persistence.models.user import User

__all__ = [
    "Community",
    "Post",
    "User",
    "community_subscribers",
]
