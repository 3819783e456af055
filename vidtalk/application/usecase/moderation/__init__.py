"""Moderation use cases."""

from .bulk_moderate import (
    BulkModerateRequest,
    BulkModerateResponse,
    BulkModerateUseCase,
    BulkResultItem,
)
from .list_reports import ListReportsRequest, ListReportsResponse, ListReportsUseCase
from .report_comment import (
    ReportCommentRequest,
    ReportCommentResponse,
    ReportCommentUseCase,
    ReportView,
)
from .review_report import (
    ReviewReportRequest,
    ReviewReportResponse,
    ReviewReportUseCase,
)

__all__ = [
    "BulkModerateRequest",
    "BulkModerateResponse",
    "BulkModerateUseCase",
    "BulkResultItem",
    "ListReportsRequest",
    "ListReportsResponse",
    "ListReportsUseCase",
    "ReportCommentRequest",
    "ReportCommentResponse",
    "ReportCommentUseCase",
    "ReportView",
    "ReviewReportRequest",
    "ReviewReportResponse",
    "ReviewReportUseCase",
]
