"""GetCommunity query handler.

Returns a DTO (not the domain entity) so the domain does not leak into
the presentation layer.
"""

from src.application.dtos.community_dtos import CommunityResult
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.queries.community_queries import GetCommunity
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.errors import CommunityError
from src.domain.protocols.community_repository import CommunityRepository


class GetCommunityHandler:
    """Handler for GetCommunity query.

    Dependencies (injected via constructor):
        - CommunityRepository: For community lookup
    """

    def __init__(self, community_repo: CommunityRepository) -> None:
        self._community_repo = community_repo

    async def handle(
        self, query: GetCommunity
    ) -> Result[CommunityResult, ApplicationError]:
        """Handle GetCommunity query.

        Returns:
            Success(CommunityResult): Community found.
            Failure(ApplicationError): NOT_FOUND if no such community.
        """
        community = await self._community_repo.find_by_id(query.community_id)
        if community is None:
            return Failure(error=_not_found(query.community_id))

        return Success(value=CommunityResult.from_entity(community))


def _not_found(community_id: int) -> ApplicationError:
    return ApplicationError(
        code=ApplicationErrorCode.NOT_FOUND,
        message=CommunityError.NOT_FOUND,
        domain_error=NotFoundError(
            code=ErrorCode.COMMUNITY_NOT_FOUND,
            message=CommunityError.NOT_FOUND,
            resource_type="Community",
            resource_id=str(community_id),
        ),
    )
