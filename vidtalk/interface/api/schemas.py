"""Response envelope shared by every endpoint."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """``{success, data?, error?}`` wrapper for all responses."""

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None


def ok(data: T) -> Envelope[T]:
    """Wrap a successful result."""
    return Envelope(success=True, data=data)


def failure(error: str) -> Envelope[None]:
    """Wrap an error message."""
    return Envelope(success=False, error=error)
