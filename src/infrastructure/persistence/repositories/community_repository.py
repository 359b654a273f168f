"""CommunityRepository - SQLAlchemy implementation of CommunityRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Community entities and database CommunityModel rows.

Listing plan (always in this order):
    1. Filter: case-insensitive substring on name OR description
    2. Sort: requested key, tie-broken by id in the same direction
    3. Paginate: OFFSET/LIMIT from the resolved page window

Post and subscriber counts are correlated scalar subqueries, so a single
SELECT yields the read model without loading the collections.
"""

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import ColumnElement, Select, delete, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.community import Community
from src.domain.enums.community_sort_key import CommunitySortKey
from src.domain.errors import CommunityConcurrencyConflict
from src.infrastructure.persistence.models import (
    Community as CommunityModel,
    Post as PostModel,
    community_subscribers,
)

_post_count = (
    select(func.count(PostModel.id))
    .where(PostModel.community_id == CommunityModel.id)
    .correlate(CommunityModel)
    .scalar_subquery()
    .label("post_count")
)

_subscriber_count = (
    select(func.count())
    .select_from(community_subscribers)
    .where(community_subscribers.c.community_id == CommunityModel.id)
    .correlate(CommunityModel)
    .scalar_subquery()
    .label("subscriber_count")
)


class CommunityRepository:
    """SQLAlchemy implementation of CommunityRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = CommunityRepository(session)
        ...     community = await repo.find_by_id(42)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, community_id: int) -> Community | None:
        """Find community by ID, including post and subscriber counts.

        Args:
            community_id: Community identifier.

        Returns:
            Domain Community entity if found, None otherwise.
        """
        stmt = self._read_model().where(CommunityModel.id == community_id)
        result = await self.session.execute(stmt)
        row = result.one_or_none()

        if row is None:
            return None

        return self._to_domain(*row)

    async def exists(self, community_id: int) -> bool:
        """Check whether a community row is present.

        Args:
            community_id: Community identifier.

        Returns:
            True if found.
        """
        stmt = select(CommunityModel.id).where(CommunityModel.id == community_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def count(self, search_term: str | None = None) -> int:
        """Count communities matching a search term.

        Args:
            search_term: Substring to match, or None for all communities.

        Returns:
            Number of matching rows.
        """
        stmt = select(func.count()).select_from(CommunityModel)
        if search_term:
            stmt = stmt.where(self._matches(search_term))
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def list_page(
        self,
        *,
        search_term: str | None,
        sort_key: CommunitySortKey,
        ascending: bool,
        offset: int,
        limit: int,
    ) -> list[Community]:
        """Retrieve one page of matching communities.

        Args:
            search_term: Substring to match, or None for all communities.
            sort_key: Primary sort field.
            ascending: Sort direction.
            offset: Rows to skip.
            limit: Maximum rows to return.

        Returns:
            Communities on the page, in order.
        """
        stmt = self._read_model()
        if search_term:
            stmt = stmt.where(self._matches(search_term))
        stmt = stmt.order_by(*self._ordering(sort_key, ascending))
        stmt = stmt.offset(offset).limit(limit)

        result = await self.session.execute(stmt)
        return [self._to_domain(*row) for row in result.all()]

    async def add(self, community: Community) -> Community:
        """Insert a new community and flush to obtain its ID.

        Args:
            community: Unsaved domain community.

        Returns:
            Domain community with store-assigned ID.
        """
        model = CommunityModel(
            name=community.name,
            description=community.description,
            created_at=community.created_at,
        )
        self.session.add(model)
        await self.session.flush()

        return self._to_domain(model, 0, 0)

    async def replace(
        self,
        community_id: int,
        *,
        name: str,
        description: str,
        created_at: datetime | None = None,
    ) -> None:
        """Overwrite the stored fields with an explicit UPDATE.

        Args:
            community_id: Community identifier.
            name: New name.
            description: New description.
            created_at: New creation timestamp. None keeps the stored value.

        Raises:
            CommunityConcurrencyConflict: The UPDATE matched no row.
        """
        values: dict[str, Any] = {"name": name, "description": description}
        if created_at is not None:
            values["created_at"] = created_at

        stmt = (
            update(CommunityModel)
            .where(CommunityModel.id == community_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)

        if result.rowcount == 0:  # type: ignore[attr-defined]
            raise CommunityConcurrencyConflict(community_id)

    async def delete(self, community_id: int) -> bool:
        """Delete a community; posts and subscriptions cascade in the database.

        Args:
            community_id: Community identifier.

        Returns:
            True if a row was deleted.
        """
        stmt = (
            delete(CommunityModel)
            .where(CommunityModel.id == community_id)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return bool(result.rowcount)  # type: ignore[attr-defined]

    @staticmethod
    def _read_model() -> Select[Any]:
        # Core UPDATEs bypass the identity map; always refresh loaded rows
        return select(CommunityModel, _post_count, _subscriber_count).execution_options(
            populate_existing=True
        )

    @staticmethod
    def _matches(search_term: str) -> ColumnElement[bool]:
        return or_(
            CommunityModel.name.icontains(search_term, autoescape=True),
            CommunityModel.description.icontains(search_term, autoescape=True),
        )

    @staticmethod
    def _ordering(
        sort_key: CommunitySortKey, ascending: bool
    ) -> list[ColumnElement[Any]]:
        """Build a total ORDER BY for the sort key."""
        match sort_key:
            case CommunitySortKey.CREATED_AT:
                columns: list[Any] = [CommunityModel.created_at, CommunityModel.id]
            case CommunitySortKey.POSTS_COUNT:
                columns = [_post_count, CommunityModel.id]
            case CommunitySortKey.SUBSCRIBERS_COUNT:
                columns = [_subscriber_count, CommunityModel.id]
            case _:
                columns = [CommunityModel.id]

        return [col.asc() if ascending else col.desc() for col in columns]

    def _to_domain(
        self, model: CommunityModel, post_count: int, subscriber_count: int
    ) -> Community:
        """Convert database model to domain entity.

        SQLite returns naive datetimes; they are stored as UTC.
        """
        created_at = model.created_at
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=UTC)

        return Community(
            id=model.id,
            name=model.name,
            description=model.description,
            created_at=created_at,
            post_count=post_count or 0,
            subscriber_count=subscriber_count or 0,
        )
