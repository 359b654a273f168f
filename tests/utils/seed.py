"""Database seeding helpers for community tests."""

from datetime import UTC, datetime, timedelta
from typing import Any

from sqlalchemy import insert

from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.models import (
    Community as CommunityModel,
    Post as PostModel,
    User as UserModel,
    community_subscribers,
)

BASE_TIME = datetime(2024, 1, 1, tzinfo=UTC)


async def seed_communities(database: Database, specs: list[dict[str, Any]]) -> list[int]:
    """Insert communities with optional posts/subscribers and return their ids.

    Each spec accepts name, description, created_at, posts (int) and
    subscribers (int). Users are created on demand and shared across
    communities. Defaults: "Community NN", empty description, one day apart
    starting at BASE_TIME.
    """
    ids: list[int] = []
    async with database.get_session() as session:
        users: list[UserModel] = []
        for index, spec in enumerate(specs):
            community = CommunityModel(
                name=spec.get("name", f"Community {index + 1:02d}"),
                description=spec.get("description", ""),
                created_at=spec.get("created_at", BASE_TIME + timedelta(days=index)),
            )
            session.add(community)
            await session.flush()
            ids.append(community.id)

            for post_index in range(spec.get("posts", 0)):
                session.add(
                    PostModel(
                        title=f"Post {post_index}",
                        content="",
                        community_id=community.id,
                    )
                )

            subscriber_count = spec.get("subscribers", 0)
            while len(users) < subscriber_count:
                user = UserModel(username=f"user{len(users)}")
                session.add(user)
                await session.flush()
                users.append(user)
            if subscriber_count:
                await session.execute(
                    insert(community_subscribers),
                    [
                        {"community_id": community.id, "user_id": user.id}
                        for user in users[:subscriber_count]
                    ],
                )
    return ids


def numbered(count: int) -> list[dict[str, Any]]:
    """Specs for `count` plain communities."""
    return [{} for _ in range(count)]
