"""CreateCommunity command handler.

Flow:
1. Build the entity from the command via Community.create
2. Insert it (store assigns the id)
3. Return the created community
"""

from src.application.commands.community_commands import CreateCommunity
from src.application.dtos.community_dtos import CommunityResult
from src.application.errors import ApplicationError
from src.core.result import Result, Success
from src.domain.entities.community import Community
from src.domain.protocols.community_repository import CommunityRepository
from src.domain.protocols.logger_protocol import LoggerProtocol


class CreateCommunityHandler:
    """Handler for CreateCommunity command."""

    def __init__(
        self,
        community_repo: CommunityRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._community_repo = community_repo
        self._logger = logger

    async def handle(
        self, cmd: CreateCommunity
    ) -> Result[CommunityResult, ApplicationError]:
        """Handle CreateCommunity command.

        Returns:
            Success(CommunityResult): Created community with its new id.

        Side Effects:
            - Inserts a community row.
        """
        community = Community.create(name=cmd.name, description=cmd.description)
        saved = await self._community_repo.add(community)

        self._logger.info("community_created", community_id=saved.id)
        return Success(value=CommunityResult.from_entity(saved))
