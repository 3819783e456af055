"""Vote use cases."""

from .vote_comment import VoteCommentRequest, VoteCommentResponse, VoteCommentUseCase

__all__ = [
    "VoteCommentRequest",
    "VoteCommentResponse",
    "VoteCommentUseCase",
]
