from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

from enums import ErrorCode

T = TypeVar("T")


@dataclass(frozen=True)
class ActionSuccess(Generic[T]):
    """Successful outcome of a remote call."""

    data: T
    success: Literal[True] = True


@dataclass(frozen=True)
class ActionFailure:
    """Failed outcome of a remote call, safe to show in the UI."""

    error: str
    code: ErrorCode | None = None
    status: int | None = None
    success: Literal[False] = False


ActionResult = ActionSuccess[T] | ActionFailure
