"""Queries (CQRS read side).

Usage:
    from src.application.queries import GetCommunity, ListCommunities
"""

from src.application.queries.community_queries import GetCommunity, ListCommunities

__all__ = [
    "GetCommunity",
    "ListCommunities",
]
