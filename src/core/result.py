"""Success/Failure results returned by every community handler.

Expected failures (unknown id, id mismatch, bad page size, listing error)
travel back as Failure; routes match on the type:

    match await handler.handle(GetCommunity(community_id=7)):
        case Success(value=community):
            return CommunityResponse.from_dto(community)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    error: E


type Result[T, E] = Success[T] | Failure[E]
