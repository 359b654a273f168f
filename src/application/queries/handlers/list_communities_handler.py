"""ListCommunities query handler.

Flow:
1. Validate page size
2. Count communities matching the search term
3. Resolve the effective page window (clamped page number)
4. Fetch the sorted page
5. Map to DTOs

Any store failure is reported as QUERY_FAILED with the underlying message.
Partial pages are never returned.
"""

from src.application.dtos.community_dtos import CommunityPageResult, CommunityResult
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.queries.community_queries import ListCommunities
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.errors import CommunityError
from src.domain.protocols.community_repository import CommunityRepository
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects.page_window import PageWindow


class ListCommunitiesHandler:
    """Handler for ListCommunities query.

    Dependencies (injected via constructor):
        - CommunityRepository: For counting and paging
        - LoggerProtocol: For reporting store failures
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

    async def handle(
        self, query: ListCommunities
    ) -> Result[CommunityPageResult, ApplicationError]:
        """Handle ListCommunities query.

        Args:
            query: Paging, sorting and filtering parameters.

        Returns:
            Success(CommunityPageResult): Page and its metadata.
            Failure(ApplicationError): QUERY_VALIDATION_FAILED for a page size
                below 1, QUERY_FAILED if the store raised.
        """
        if query.page_size < 1:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.QUERY_VALIDATION_FAILED,
                    message=CommunityError.INVALID_PAGE_SIZE,
                    domain_error=ValidationError(
                        code=ErrorCode.INVALID_PAGE_SIZE,
                        message=CommunityError.INVALID_PAGE_SIZE,
                        field="pageSize",
                    ),
                )
            )

        search_term = query.search_term
        try:
            total_items = await self._community_repo.count(search_term)
            window = PageWindow.resolve(
                requested_page=query.page_number,
                page_size=query.page_size,
                total_items=total_items,
            )
            communities = await self._community_repo.list_page(
                search_term=search_term,
                sort_key=query.sort_key,
                ascending=query.ascending,
                offset=window.offset,
                limit=window.limit,
            )
        except Exception as e:
            self._logger.error(
                "community_listing_failed",
                error=e,
                page_number=query.page_number,
                page_size=query.page_size,
                sort_key=query.sort_key.value,
            )
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.QUERY_FAILED,
                    message=f"Internal server error: {e}",
                )
            )

        return Success(
            value=CommunityPageResult(
                total_items=window.total_items,
                total_pages=window.total_pages,
                page_number=window.page_number,
                page_size=window.page_size,
                items=[CommunityResult.from_entity(c) for c in communities],
            )
        )
