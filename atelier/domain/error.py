"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when an account acts on a resource it does not own."""

    def __init__(self, resource: str, resource_id: str, account_id: str):
        super().__init__(
            f"Account {account_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AccountNotFoundError(NotFoundError):
    """Raised when a referenced liker, owner or follow target does not exist."""

    def __init__(self, identifier: str):
        super().__init__("Account", identifier)


class ContentNotFoundError(NotFoundError):
    """Raised when a content item is not in the catalog."""

    def __init__(self, identifier: str):
        super().__init__("Content", identifier)


class NotificationNotFoundError(NotFoundError):
    """Raised when a notification does not exist."""

    def __init__(self, identifier: str):
        super().__init__("Notification", identifier)


class SelfFollowRejectedError(BusinessRuleViolationError):
    """Raised when an account tries to follow itself."""

    def __init__(self, account_id: str):
        self.account_id = account_id
        super().__init__("Cannot follow yourself")


class StorageFailureError(DomainError):
    """Raised when an underlying store read or write fails.

    Earlier steps of the same request are rolled back with the request's
    transaction; callers cannot tell which step failed.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Storage failure during {operation}")


class NotificationDispatchError(DomainError):
    """Raised inside the dispatcher when a notification cannot be stored.

    Never propagated to the action that triggered the notification.
    """

    pass
