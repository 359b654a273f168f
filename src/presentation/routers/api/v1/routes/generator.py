"""Mounts ROUTE_REGISTRY entries on the v1 APIRouter."""

from typing import Any

from fastapi import APIRouter

from src.presentation.routers.api.v1.errors.problem_details import ProblemDetails
from src.presentation.routers.api.v1.routes.metadata import ErrorSpec, RouteMetadata


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    """Add one API route per entry, named after its operation_id."""
    for metadata in registry:
        responses = _build_responses(metadata.errors) if metadata.errors else None

        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            name=metadata.operation_id,
            responses=responses,
        )


def _build_responses(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    # Every documented failure shares the ProblemDetails body
    return {
        error.status: {
            "description": error.description,
            "model": ProblemDetails,
        }
        for error in errors
    }
