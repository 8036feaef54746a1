"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidInputError(DomainError):
    """Raised when a request carries a malformed value or misses a required field."""

    pass


class InvalidVoteValueError(InvalidInputError):
    """Raised when a vote value is anything other than +1 or -1."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Vote value must be 1 or -1, got {value!r}")


class ConflictError(DomainError):
    """Raised when creating something that must be unique and already exists."""

    pass


class AuthenticationError(DomainError):
    """Raised when credentials do not match a user."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts an action they lack permission for."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
