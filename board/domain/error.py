"""Domain layer errors.

Each class corresponds to one error code returned to clients; the mapping
lives in ``board.interface.error``.
"""


class DomainError(Exception):
    """Base domain error."""


class ValidationError(DomainError):
    """Input breaks a domain constraint, e.g. request text too long."""


class BusinessRuleViolationError(DomainError):
    """The operation is valid in form but not allowed in the current state."""


class AlreadyVotedError(BusinessRuleViolationError):
    """The user has already upvoted this request."""

    def __init__(self, user_id: str, request_id: str):
        self.user_id = user_id
        self.request_id = request_id
        super().__init__("You can only vote something up once")


class NotAuthenticatedError(DomainError):
    """The call carries no caller identity."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"only authenticated users can {action}")


class NotFoundError(DomainError):
    """A referenced user or request does not exist."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
