"""Integration tests for CommunityRepository.

Runs the listing query builder and the single-record operations against a
real (in-memory SQLite) database.

Test Strategy:
- Seed rows through a separate session
- Exercise the repository through the request-style session fixture
- Verify ordering, filtering, paging and cascade behavior end to end
"""

from datetime import UTC, datetime

import pytest
from sqlalchemy import func, select

from src.domain.entities import Community
from src.domain.enums import CommunitySortKey
from src.domain.errors import CommunityConcurrencyConflict
from src.infrastructure.persistence.models import Post as PostModel
from src.infrastructure.persistence.models import User as UserModel
from src.infrastructure.persistence.models import community_subscribers
from src.infrastructure.persistence.repositories import CommunityRepository
from tests.utils.seed import BASE_TIME, numbered, seed_communities


async def _page(
    repo: CommunityRepository,
    *,
    sort_key: CommunitySortKey = CommunitySortKey.ID,
    ascending: bool = True,
    search_term: str | None = None,
    offset: int = 0,
    limit: int = 10,
) -> list[Community]:
    return await repo.list_page(
        search_term=search_term,
        sort_key=sort_key,
        ascending=ascending,
        offset=offset,
        limit=limit,
    )


@pytest.mark.integration
class TestCommunityRepositoryListing:
    """Filter, sort and paginate."""

    async def test_first_page_holds_lowest_ids(self, database, db_session):
        ids = await seed_communities(database, numbered(25))
        repo = CommunityRepository(db_session)

        page = await _page(repo)

        assert await repo.count() == 25
        assert [c.id for c in page] == sorted(ids)[:10]

    async def test_last_partial_page(self, database, db_session):
        ids = await seed_communities(database, numbered(25))
        repo = CommunityRepository(db_session)

        page = await _page(repo, offset=20, limit=10)

        assert [c.id for c in page] == sorted(ids)[20:]

    async def test_descending_id(self, database, db_session):
        ids = await seed_communities(database, numbered(5))
        repo = CommunityRepository(db_session)

        page = await _page(repo, ascending=False)

        assert [c.id for c in page] == sorted(ids, reverse=True)

    async def test_sort_by_created_at(self, database, db_session):
        ids = await seed_communities(
            database,
            [
                {"created_at": datetime(2024, 3, 1, tzinfo=UTC)},
                {"created_at": datetime(2024, 1, 1, tzinfo=UTC)},
                {"created_at": datetime(2024, 2, 1, tzinfo=UTC)},
            ],
        )
        repo = CommunityRepository(db_session)

        page = await _page(repo, sort_key=CommunitySortKey.CREATED_AT)

        assert [c.id for c in page] == [ids[1], ids[2], ids[0]]
        assert page[0].created_at == datetime(2024, 1, 1, tzinfo=UTC)

    async def test_sort_by_posts_count(self, database, db_session):
        ids = await seed_communities(
            database, [{"posts": 2}, {"posts": 0}, {"posts": 5}]
        )
        repo = CommunityRepository(db_session)

        ascending = await _page(repo, sort_key=CommunitySortKey.POSTS_COUNT)
        descending = await _page(
            repo, sort_key=CommunitySortKey.POSTS_COUNT, ascending=False
        )

        assert [c.id for c in ascending] == [ids[1], ids[0], ids[2]]
        assert [c.post_count for c in ascending] == [0, 2, 5]
        assert [c.id for c in descending] == [ids[2], ids[0], ids[1]]

    async def test_sort_by_subscribers_count(self, database, db_session):
        ids = await seed_communities(
            database, [{"subscribers": 3}, {"subscribers": 1}, {"subscribers": 2}]
        )
        repo = CommunityRepository(db_session)

        page = await _page(repo, sort_key=CommunitySortKey.SUBSCRIBERS_COUNT)

        assert [c.id for c in page] == [ids[1], ids[2], ids[0]]
        assert [c.subscriber_count for c in page] == [1, 2, 3]

    async def test_equal_sort_values_tie_break_on_id(self, database, db_session):
        ids = await seed_communities(database, [{"posts": 1} for _ in range(4)])
        repo = CommunityRepository(db_session)

        first = await _page(repo, sort_key=CommunitySortKey.POSTS_COUNT, limit=2)
        second = await _page(
            repo, sort_key=CommunitySortKey.POSTS_COUNT, offset=2, limit=2
        )

        assert [c.id for c in first + second] == sorted(ids)

    async def test_search_matches_name_or_description(self, database, db_session):
        ids = await seed_communities(
            database,
            [
                {"name": "Rustaceans", "description": "systems"},
                {"name": "Gardening", "description": "Growing RUST-resistant roses"},
                {"name": "Cooking", "description": "recipes"},
            ],
        )
        repo = CommunityRepository(db_session)

        page = await _page(repo, search_term="rust")

        assert await repo.count("rust") == 2
        assert [c.id for c in page] == [ids[0], ids[1]]

    async def test_padded_search_matches_only_padded_text(self, database, db_session):
        ids = await seed_communities(
            database, [{"name": "rustaceans"}, {"name": "go rust"}]
        )
        repo = CommunityRepository(db_session)

        page = await _page(repo, search_term=" rust")

        assert await repo.count(" rust") == 1
        assert [c.id for c in page] == [ids[1]]

    async def test_search_treats_wildcards_literally(self, database, db_session):
        ids = await seed_communities(
            database,
            [
                {"name": "100% Python"},
                {"name": "1000 Pythons"},
                {"name": "snake_case fans"},
                {"name": "snakecase"},
            ],
        )
        repo = CommunityRepository(db_session)

        assert [c.id for c in await _page(repo, search_term="%")] == [ids[0]]
        assert [c.id for c in await _page(repo, search_term="_")] == [ids[2]]
        assert await repo.count("%") == 1

    async def test_search_without_matches(self, database, db_session):
        await seed_communities(database, numbered(3))
        repo = CommunityRepository(db_session)

        assert await repo.count("nothing-like-this") == 0
        assert await _page(repo, search_term="nothing-like-this") == []


@pytest.mark.integration
class TestCommunityRepositoryRecords:
    """Single-record operations."""

    async def test_find_by_id_includes_counts(self, database, db_session):
        [community_id] = await seed_communities(
            database, [{"name": "Chess", "posts": 3, "subscribers": 2}]
        )
        repo = CommunityRepository(db_session)

        community = await repo.find_by_id(community_id)

        assert community is not None
        assert community.name == "Chess"
        assert community.post_count == 3
        assert community.subscriber_count == 2
        assert community.created_at == BASE_TIME

    async def test_find_by_id_missing(self, db_session):
        repo = CommunityRepository(db_session)

        assert await repo.find_by_id(999) is None
        assert await repo.exists(999) is False

    async def test_add_assigns_id(self, db_session):
        repo = CommunityRepository(db_session)

        saved = await repo.add(Community.create(name="Go", description="gophers"))

        assert saved.id is not None
        assert await repo.exists(saved.id)
        found = await repo.find_by_id(saved.id)
        assert found is not None
        assert found.description == "gophers"

    async def test_ids_are_not_reused(self, database, db_session):
        [first] = await seed_communities(database, numbered(1))
        repo = CommunityRepository(db_session)

        await repo.delete(first)
        saved = await repo.add(Community.create(name="Next", description=""))

        assert saved.id != first

    async def test_replace_overwrites_fields(self, database, db_session):
        [community_id] = await seed_communities(database, [{"name": "Old"}])
        repo = CommunityRepository(db_session)

        await repo.replace(community_id, name="New", description="fresh")
        community = await repo.find_by_id(community_id)

        assert community is not None
        assert community.name == "New"
        assert community.description == "fresh"
        assert community.created_at == BASE_TIME

    async def test_replace_sets_created_at_when_given(self, database, db_session):
        [community_id] = await seed_communities(database, numbered(1))
        repo = CommunityRepository(db_session)
        new_time = datetime(2023, 6, 1, 12, tzinfo=UTC)

        await repo.replace(
            community_id, name="X", description="", created_at=new_time
        )
        community = await repo.find_by_id(community_id)

        assert community is not None
        assert community.created_at == new_time

    async def test_replace_missing_raises_conflict(self, db_session):
        repo = CommunityRepository(db_session)

        with pytest.raises(CommunityConcurrencyConflict) as exc_info:
            await repo.replace(999, name="X", description="")

        assert exc_info.value.community_id == 999
        assert str(exc_info.value) == "Community 999 was not updated: no matching row"

    async def test_delete_cascades_posts_and_subscriptions(
        self, database, db_session
    ):
        [doomed, kept] = await seed_communities(
            database,
            [{"posts": 2, "subscribers": 2}, {"posts": 1, "subscribers": 1}],
        )
        repo = CommunityRepository(db_session)

        assert await repo.delete(doomed) is True

        assert await repo.find_by_id(doomed) is None
        post_count = await db_session.scalar(
            select(func.count()).select_from(PostModel)
        )
        subscription_count = await db_session.scalar(
            select(func.count()).select_from(community_subscribers)
        )
        user_count = await db_session.scalar(
            select(func.count()).select_from(UserModel)
        )
        assert post_count == 1
        assert subscription_count == 1
        # Users are never owned by a community
        assert user_count == 2

        remaining = await repo.find_by_id(kept)
        assert remaining is not None
        assert remaining.post_count == 1

    async def test_delete_missing_returns_false(self, db_session):
        repo = CommunityRepository(db_session)

        assert await repo.delete(999) is False
