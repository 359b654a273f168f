"""DomainError: failure data carried inside a Failure result.

Not an Exception. ApplicationError.domain_error holds one so the Problem
Details body can name the offending field or resource.
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
