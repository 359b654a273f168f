"""CommunityRepository provider, bound to the request's session."""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import CommunityRepository


async def get_community_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "CommunityRepository":
    from src.infrastructure.persistence.repositories import CommunityRepository

    return CommunityRepository(session=session)
