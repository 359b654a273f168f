"""DeleteCommunity command handler.

Deletion is permanent. Posts and subscription rows go with the community;
subscribed users are kept.
"""

from src.application.commands.community_commands import DeleteCommunity
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.errors import CommunityError
from src.domain.protocols.community_repository import CommunityRepository
from src.domain.protocols.logger_protocol import LoggerProtocol


class DeleteCommunityHandler:
    """Handler for DeleteCommunity command."""

    def __init__(
        self,
        community_repo: CommunityRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._community_repo = community_repo
        self._logger = logger

    async def handle(self, cmd: DeleteCommunity) -> Result[None, ApplicationError]:
        """Handle DeleteCommunity command.

        Returns:
            Success(None): Community deleted.
            Failure(ApplicationError): NOT_FOUND if no such community.
        """
        deleted = await self._community_repo.delete(cmd.community_id)
        if not deleted:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message=CommunityError.NOT_FOUND,
                    domain_error=NotFoundError(
                        code=ErrorCode.COMMUNITY_NOT_FOUND,
                        message=CommunityError.NOT_FOUND,
                        resource_type="Community",
                        resource_id=str(cmd.community_id),
                    ),
                )
            )

        self._logger.info("community_deleted", community_id=cmd.community_id)
        return Success(value=None)
