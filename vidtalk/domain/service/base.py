"""Base service class for domain services."""

from vidtalk.config import CommentSettings
from vidtalk.domain.error import ValidationError


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass


def page_window(page: int, limit: int, settings: CommentSettings) -> tuple[int, int]:
    """Resolve a 1-based page and a page size into (limit, offset).

    Oversized pages are clamped to ``settings.max_page_size``.

    Raises:
        ValidationError: If page or limit is below 1
    """
    if page < 1:
        raise ValidationError("Page must be at least 1")
    if limit < 1:
        raise ValidationError("Limit must be at least 1")
    limit = min(limit, settings.max_page_size)
    return limit, (page - 1) * limit
