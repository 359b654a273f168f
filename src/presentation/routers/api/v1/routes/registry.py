"""Every v1 endpoint of the communities API.

The v1 package mounts these entries through register_routes_from_registry(); the
registry compliance tests keep the mounted router and this list in sync.
"""

from src.presentation.routers.api.v1.communities import (
    create_community,
    delete_community,
    get_community,
    list_communities,
    replace_community,
)
from src.presentation.routers.api.v1.routes.metadata import (
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)
from src.schemas.community_schemas import CommunityResponse

ROUTE_REGISTRY: list[RouteMetadata] = [
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/communities",
        handler=list_communities,
        tags=["Communities"],
        summary="List communities",
        description=(
            "Filtered, sorted, paginated community listing. Pagination metadata "
            "is returned in the X-Total-Count, X-Total-Pages and X-Current-Page "
            "headers."
        ),
        operation_id="list_communities",
        response_model=list[CommunityResponse],
        status_code=200,
        errors=[
            ErrorSpec(status=400, description="Invalid page size"),
            ErrorSpec(status=422, description="Malformed query parameters"),
            ErrorSpec(status=500, description="Listing failed"),
        ],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/communities/{community_id}",
        handler=get_community,
        tags=["Communities"],
        summary="Get community",
        description="Get a single community with its post and subscriber counts.",
        operation_id="get_community",
        response_model=CommunityResponse,
        status_code=200,
        errors=[
            ErrorSpec(status=404, description="Community not found"),
        ],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/communities/{community_id}",
        handler=replace_community,
        tags=["Communities"],
        summary="Replace community",
        description="Replace every field of a community. The body id must match the path id.",
        operation_id="replace_community",
        response_model=None,
        status_code=204,
        errors=[
            ErrorSpec(status=400, description="Body id does not match path id"),
            ErrorSpec(status=404, description="Community not found"),
            ErrorSpec(status=500, description="Unresolvable update conflict"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/communities",
        handler=create_community,
        tags=["Communities"],
        summary="Create community",
        description="Create a community. The Location header points at the new resource.",
        operation_id="create_community",
        response_model=CommunityResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=422, description="Malformed body"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/communities/{community_id}",
        handler=delete_community,
        tags=["Communities"],
        summary="Delete community",
        description="Permanently delete a community with its posts and subscriptions.",
        operation_id="delete_community",
        response_model=None,
        status_code=204,
        errors=[
            ErrorSpec(status=404, description="Community not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
]
