"""Types describing one community endpoint in ROUTE_REGISTRY.

A RouteMetadata entry carries everything needed to mount the endpoint and
document it in OpenAPI; generator.py does the mounting.
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any


class HTTPMethod(str, Enum):
    """Verbs used by the communities resource."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class IdempotencyLevel(str, Enum):
    """Whether repeating a community request changes the outcome.

    Listing and reading are SAFE. Replace and delete are IDEMPOTENT: a
    second DELETE answers 404 but leaves the store as the first left it.
    Create is NON_IDEMPOTENT since every POST assigns a new id.
    """

    SAFE = "safe"
    IDEMPOTENT = "idempotent"
    NON_IDEMPOTENT = "non_idempotent"


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """A documented failure status, rendered as a ProblemDetails response."""

    status: int
    description: str


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """One endpoint of the communities API.

    `path` is relative to the v1 prefix. `operation_id` is both the OpenAPI
    operation ID and the route name, so handlers can call
    request.url_for(operation_id, ...) to build a Location header.
    `response_model` is None for 204 routes.
    """

    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]
    tags: Sequence[str]

    summary: str
    description: str | None = None
    operation_id: str

    response_model: Any = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    idempotency: IdempotencyLevel
