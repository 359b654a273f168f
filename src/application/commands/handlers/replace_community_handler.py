"""ReplaceCommunity command handler.

Flow:
1. Reject payloads whose id differs from the addressed id (no mutation)
2. Issue a full-row update
3. On a stale-row conflict, re-check existence:
   gone -> NOT_FOUND, still present -> re-raise

Architecture:
- Conflicts are never retried or merged
- The conflict is a domain exception raised by the repository port
"""

from src.application.commands.community_commands import ReplaceCommunity
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.errors import CommunityConcurrencyConflict, CommunityError
from src.domain.protocols.community_repository import CommunityRepository
from src.domain.protocols.logger_protocol import LoggerProtocol


class ReplaceCommunityHandler:
    """Handler for ReplaceCommunity command.

    Dependencies (injected via constructor):
        - CommunityRepository: For update and existence checks
        - LoggerProtocol: For conflict reporting
    """

    def __init__(
        self,
        community_repo: CommunityRepository,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            community_repo: Community repository.
            logger: Structured logger.
        """
        self._community_repo = community_repo
        self._logger = logger

    async def handle(self, cmd: ReplaceCommunity) -> Result[None, ApplicationError]:
        """Handle ReplaceCommunity command.

        Args:
            cmd: ReplaceCommunity command.

        Returns:
            Success(None): Row replaced.
            Failure(ApplicationError): COMMAND_VALIDATION_FAILED on id
                mismatch, NOT_FOUND if the row vanished.

        Raises:
            CommunityConcurrencyConflict: Conflict on a row that still exists.
        """
        if cmd.community_id != cmd.path_id:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                    message=CommunityError.ID_MISMATCH,
                    domain_error=ValidationError(
                        code=ErrorCode.COMMUNITY_ID_MISMATCH,
                        message=CommunityError.ID_MISMATCH,
                        field="id",
                    ),
                )
            )

        try:
            await self._community_repo.replace(
                cmd.path_id,
                name=cmd.name,
                description=cmd.description,
                created_at=cmd.created_at,
            )
        except CommunityConcurrencyConflict as e:
            if not await self._community_repo.exists(cmd.path_id):
                return Failure(
                    error=ApplicationError(
                        code=ApplicationErrorCode.NOT_FOUND,
                        message=CommunityError.NOT_FOUND,
                        domain_error=NotFoundError(
                            code=ErrorCode.COMMUNITY_NOT_FOUND,
                            message=CommunityError.NOT_FOUND,
                            resource_type="Community",
                            resource_id=str(cmd.path_id),
                        ),
                    )
                )
            self._logger.warning(
                "community_replace_conflict",
                community_id=cmd.path_id,
                error_message=str(e),
            )
            raise

        self._logger.info("community_replaced", community_id=cmd.path_id)
        return Success(value=None)
