"""Domain protocols (ports) package.

Protocol definitions the domain and application layers depend on.
Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import CommunityRepository, LoggerProtocol
"""

from src.domain.protocols.community_repository import CommunityRepository
from src.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "CommunityRepository",
    "LoggerProtocol",
]
