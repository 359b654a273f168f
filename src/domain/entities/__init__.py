"""Domain entities.

Entities have identity and are persisted through repository protocols.
"""

from src.domain.entities.community import Community

__all__ = [
    "Community",
]
