"""Domain layer DI providers."""

from dishka import Scope, provide

from vidtalk.config import (
    AuthSettings,
    CommentSettings,
    ConcurrencySettings,
    ModerationSettings,
)
from vidtalk.domain.repository import (
    CommentRepository,
    NotificationRepository,
    ReportRepository,
    TransactionManager,
    VideoRepository,
    VoteRepository,
)
from vidtalk.domain.service import (
    CommentService,
    JWTService,
    ModerationService,
    NotificationService,
    PinService,
    ThreadService,
    VoteService,
)
from vidtalk.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        comment_settings: CommentSettings,
    ) -> NotificationService:
        """Provide notification dispatcher."""
        return NotificationService(
            notification_repository=notification_repository,
            comment_settings=comment_settings,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        video_repository: VideoRepository,
        transactions: TransactionManager,
        notification_service: NotificationService,
        comment_settings: CommentSettings,
        concurrency_settings: ConcurrencySettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            video_repository=video_repository,
            transactions=transactions,
            notification_service=notification_service,
            comment_settings=comment_settings,
            concurrency_settings=concurrency_settings,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        comment_repository: CommentRepository,
        transactions: TransactionManager,
        concurrency_settings: ConcurrencySettings,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            comment_repository=comment_repository,
            transactions=transactions,
            concurrency_settings=concurrency_settings,
        )

    @provide
    def get_pin_service(
        self,
        comment_repository: CommentRepository,
        video_repository: VideoRepository,
        transactions: TransactionManager,
        notification_service: NotificationService,
        concurrency_settings: ConcurrencySettings,
    ) -> PinService:
        """Provide pin coordinator."""
        return PinService(
            comment_repository=comment_repository,
            video_repository=video_repository,
            transactions=transactions,
            notification_service=notification_service,
            concurrency_settings=concurrency_settings,
        )

    @provide
    def get_moderation_service(
        self,
        comment_service: CommentService,
        comment_repository: CommentRepository,
        report_repository: ReportRepository,
        video_repository: VideoRepository,
        transactions: TransactionManager,
        moderation_settings: ModerationSettings,
        comment_settings: CommentSettings,
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(
            comment_service=comment_service,
            comment_repository=comment_repository,
            report_repository=report_repository,
            video_repository=video_repository,
            transactions=transactions,
            moderation_settings=moderation_settings,
            comment_settings=comment_settings,
        )

    @provide
    def get_thread_service(
        self,
        comment_repository: CommentRepository,
        video_repository: VideoRepository,
        vote_service: VoteService,
        comment_settings: CommentSettings,
    ) -> ThreadService:
        """Provide thread assembler."""
        return ThreadService(
            comment_repository=comment_repository,
            video_repository=video_repository,
            vote_service=vote_service,
            comment_settings=comment_settings,
        )
