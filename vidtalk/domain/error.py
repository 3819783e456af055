"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts an action they are not allowed to perform."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidParentError(DomainError):
    """Raised when a reply targets something that cannot be replied to."""

    def __init__(self, parent_id: str, reason: str):
        self.parent_id = parent_id
        super().__init__(f"Invalid parent comment {parent_id}: {reason}")


class InvalidTargetError(DomainError):
    """Raised when a moderation action targets an ineligible comment."""

    def __init__(self, comment_id: str, reason: str):
        self.comment_id = comment_id
        super().__init__(f"Invalid target comment {comment_id}: {reason}")


class ConcurrencyConflictError(DomainError):
    """Raised when a unit of work lost a race with a concurrent writer.

    Callers retry the unit a bounded number of times before giving up.
    """

    pass


class PersistenceError(DomainError):
    """Raised when the store could not complete a unit of work."""

    pass
