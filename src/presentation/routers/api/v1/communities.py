"""Communities resource handlers.

Handler functions for community endpoints.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    list_communities   - Filtered, sorted, paginated listing
    get_community      - Get community details
    replace_community  - Full replacement by id
    create_community   - Create community
    delete_community   - Delete community
"""

from typing import Annotated

from fastapi import Depends, Path, Query, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands.community_commands import (
    CreateCommunity,
    DeleteCommunity,
    ReplaceCommunity,
)
from src.application.commands.handlers import (
    CreateCommunityHandler,
    DeleteCommunityHandler,
    ReplaceCommunityHandler,
)
from src.application.queries.community_queries import GetCommunity, ListCommunities
from src.application.queries.handlers import (
    GetCommunityHandler,
    ListCommunitiesHandler,
)
from src.core.config import settings
from src.core.container import (
    get_create_community_handler,
    get_delete_community_handler,
    get_get_community_handler,
    get_list_communities_handler,
    get_replace_community_handler,
)
from src.core.result import Failure
from src.domain.enums import CommunitySortKey
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.community_schemas import (
    CommunityCreateRequest,
    CommunityReplaceRequest,
    CommunityResponse,
)

TOTAL_COUNT_HEADER = "X-Total-Count"
TOTAL_PAGES_HEADER = "X-Total-Pages"
CURRENT_PAGE_HEADER = "X-Current-Page"

CommunityId = Annotated[int, Path(description="Community identifier")]


async def list_communities(
    request: Request,
    response: Response,
    page_number: Annotated[
        int,
        Query(alias="pageNumber", description="1-indexed page (clamped into range)"),
    ] = 1,
    page_size: Annotated[
        int,
        Query(
            alias="pageSize",
            le=settings.max_page_size,
            description="Items per page",
        ),
    ] = settings.default_page_size,
    sort_key: Annotated[
        str,
        Query(
            alias="sortKey",
            description="id, createdAt, postsCount or subscribersCount (case-insensitive)",
        ),
    ] = CommunitySortKey.ID.value,
    is_ascending: Annotated[
        bool,
        Query(alias="isAscending", description="Ascending sort when true"),
    ] = True,
    search_key: Annotated[
        str | None,
        Query(alias="searchKey", description="Substring of name or description"),
    ] = None,
    handler: ListCommunitiesHandler = Depends(get_list_communities_handler),
) -> list[CommunityResponse] | JSONResponse:
    """List communities.

    GET /api/v1/communities → 200 OK

    Returns:
        List of CommunityResponse with pagination headers.
        JSONResponse with RFC 7807 error on failure.
    """
    query = ListCommunities(
        page_number=page_number,
        page_size=page_size,
        sort_key=CommunitySortKey.parse(sort_key),
        ascending=is_ascending,
        search_key=search_key,
    )
    result = await handler.handle(query)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
        )

    page = result.value
    response.headers[TOTAL_COUNT_HEADER] = str(page.total_items)
    response.headers[TOTAL_PAGES_HEADER] = str(page.total_pages)
    response.headers[CURRENT_PAGE_HEADER] = str(page.page_number)

    return [CommunityResponse.from_dto(item) for item in page.items]


async def get_community(
    request: Request,
    community_id: CommunityId,
    handler: GetCommunityHandler = Depends(get_get_community_handler),
) -> CommunityResponse | JSONResponse:
    """Get a specific community.

    GET /api/v1/communities/{id} → 200 OK
    """
    result = await handler.handle(GetCommunity(community_id=community_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
        )

    return CommunityResponse.from_dto(result.value)


async def replace_community(
    request: Request,
    community_id: CommunityId,
    data: CommunityReplaceRequest,
    handler: ReplaceCommunityHandler = Depends(get_replace_community_handler),
) -> Response:
    """Replace a community.

    PUT /api/v1/communities/{id} → 204 No Content

    Args:
        request: FastAPI request object.
        community_id: Id addressed by the path.
        data: Full replacement body (its id must equal community_id).
        handler: Replace community handler (injected).

    Returns:
        204 on success.
        JSONResponse with RFC 7807 error on id mismatch (400) or missing row (404).
    """
    command = ReplaceCommunity(
        path_id=community_id,
        community_id=data.id,
        name=data.name,
        description=data.description,
        created_at=data.created_at,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def create_community(
    request: Request,
    response: Response,
    data: CommunityCreateRequest,
    handler: CreateCommunityHandler = Depends(get_create_community_handler),
) -> CommunityResponse | JSONResponse:
    """Create a community.

    POST /api/v1/communities → 201 Created (Location: /api/v1/communities/{id})
    """
    command = CreateCommunity(name=data.name, description=data.description)
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
        )

    created = result.value
    response.headers["Location"] = str(
        request.url_for("get_community", community_id=created.id)
    )
    return CommunityResponse.from_dto(created)


async def delete_community(
    request: Request,
    community_id: CommunityId,
    handler: DeleteCommunityHandler = Depends(get_delete_community_handler),
) -> Response:
    """Delete a community.

    DELETE /api/v1/communities/{id} → 204 No Content
    """
    result = await handler.handle(DeleteCommunity(community_id=community_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
