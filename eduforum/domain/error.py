"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (malformed id, blank field)."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error (duplicate account, duplicate vote)."""

    pass


class ContentRejectedError(DomainError):
    """Raised when moderation flags submitted text."""

    pass


class InvalidCredentialsError(DomainError):
    """Raised when a name/role/password triple does not match an account."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class NotAuthenticatedError(DomainError):
    """Raised when the caller has no live session."""

    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when the caller's role is not allowed to perform an operation."""

    def __init__(self, operation: str, role: str):
        self.operation = operation
        self.role = role
        super().__init__(f"Role {role} is not allowed to {operation}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AssistantError(DomainError):
    """Raised when the language-model provider cannot answer a request."""

    pass
