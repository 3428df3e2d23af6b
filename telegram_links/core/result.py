"""Operation Results — tagged Ok/Err values returned by every link service operation.

Invariants:
    - A service operation returns exactly one of Ok(value) or Err(error)
    - Err always carries a LinkServiceError; its http_status is the only status mapping

Design Decisions:
    - Result over raising through the route: the endpoint layer maps outcomes in one helper
      instead of a try/except per handler
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from telegram_links.core.errors import LinkServiceError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: LinkServiceError


Result = Union[Ok[T], Err]
