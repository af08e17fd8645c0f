"""Operation results for the article resource.

Service operations return one of these instead of raising HTTP errors;
the presentation layer maps each variant to a status code.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Ok:
    value: Any
    status_code: int = 200


@dataclass(frozen=True)
class BadRequest:
    message: str


@dataclass(frozen=True)
class Forbidden:
    message: str = ""


@dataclass(frozen=True)
class Unprocessable:
    """Validation failed; ``message`` lists every violation."""

    message: str


@dataclass(frozen=True)
class ServerError:
    message: str = "Internal Server Error"


ResourceResult = Ok | BadRequest | Forbidden | Unprocessable | ServerError
