"""Application layer DI providers."""

from dishka import Scope, provide

from vidtalk.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    EditCommentUseCase,
    ListCommentsUseCase,
    SetCommentStatusUseCase,
)
from vidtalk.application.usecase.moderation import (
    BulkModerateUseCase,
    ListReportsUseCase,
    ReportCommentUseCase,
    ReviewReportUseCase,
)
from vidtalk.application.usecase.notification import (
    ListNotificationsUseCase,
    MarkNotificationReadUseCase,
)
from vidtalk.application.usecase.pin import PinCommentUseCase, UnpinCommentUseCase
from vidtalk.application.usecase.vote import VoteCommentUseCase
from vidtalk.domain.service import (
    CommentService,
    ModerationService,
    NotificationService,
    PinService,
    ThreadService,
    VoteService,
)
from vidtalk.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, thread_service: ThreadService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_edit_comment_use_case(
        self, comment_service: CommentService
    ) -> EditCommentUseCase:
        """Provide edit comment use case."""
        return EditCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_set_comment_status_use_case(
        self, comment_service: CommentService
    ) -> SetCommentStatusUseCase:
        """Provide set comment status use case."""
        return SetCommentStatusUseCase(comment_service=comment_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_vote_comment_use_case(
        self, vote_service: VoteService, comment_service: CommentService
    ) -> VoteCommentUseCase:
        """Provide vote use case."""
        return VoteCommentUseCase(
            vote_service=vote_service, comment_service=comment_service
        )

    # Pin use cases
    @provide(scope=Scope.REQUEST)
    def get_pin_comment_use_case(self, pin_service: PinService) -> PinCommentUseCase:
        """Provide pin use case."""
        return PinCommentUseCase(pin_service=pin_service)

    @provide(scope=Scope.REQUEST)
    def get_unpin_comment_use_case(
        self, pin_service: PinService
    ) -> UnpinCommentUseCase:
        """Provide unpin use case."""
        return UnpinCommentUseCase(pin_service=pin_service)

    # Moderation use cases
    @provide(scope=Scope.REQUEST)
    def get_report_comment_use_case(
        self,
        moderation_service: ModerationService,
        comment_service: CommentService,
    ) -> ReportCommentUseCase:
        """Provide report use case."""
        return ReportCommentUseCase(
            moderation_service=moderation_service, comment_service=comment_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_reports_use_case(
        self, moderation_service: ModerationService
    ) -> ListReportsUseCase:
        """Provide list reports use case."""
        return ListReportsUseCase(moderation_service=moderation_service)

    @provide(scope=Scope.REQUEST)
    def get_review_report_use_case(
        self, moderation_service: ModerationService
    ) -> ReviewReportUseCase:
        """Provide review report use case."""
        return ReviewReportUseCase(moderation_service=moderation_service)

    @provide(scope=Scope.REQUEST)
    def get_bulk_moderate_use_case(
        self, moderation_service: ModerationService
    ) -> BulkModerateUseCase:
        """Provide bulk moderation use case."""
        return BulkModerateUseCase(moderation_service=moderation_service)

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_notification_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkNotificationReadUseCase:
        """Provide mark notification read use case."""
        return MarkNotificationReadUseCase(notification_service=notification_service)
