"""Pin use cases."""

from .pin_comment import (
    PinCommentRequest,
    PinCommentResponse,
    PinCommentUseCase,
    UnpinCommentUseCase,
)

__all__ = [
    "PinCommentRequest",
    "PinCommentResponse",
    "PinCommentUseCase",
    "UnpinCommentUseCase",
]
