"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidEmailError(ValidationError):
    """Raised when an email address does not match the address grammar."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("The email address you entered is invalid")


class ConflictError(DomainError):
    """Raised when a write collides with existing state."""

    pass


class DuplicateUsernameError(ConflictError):
    """Raised when a username is already registered."""

    def __init__(self, username: str):
        self.username = username
        super().__init__("Username already taken")


class DuplicateEmailError(ConflictError):
    """Raised when an email is already registered."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("Email has already been taken")


class DuplicateLikeError(ConflictError):
    """Raised when a user likes the same post twice."""

    def __init__(self, post_id: str):
        self.post_id = post_id
        super().__init__("Already liked this post")


class AuthError(DomainError):
    """Base authentication error."""

    pass


class MissingTokenError(AuthError):
    """Raised when a request carries no bearer token."""

    def __init__(self) -> None:
        super().__init__("Auth token not provided")


class InvalidTokenError(AuthError):
    """Raised when a bearer token cannot be decoded to a user identity."""

    def __init__(self, reason: str = "Auth token invalid"):
        self.reason = reason
        super().__init__("Auth token invalid")


class InvalidCredentialsError(AuthError):
    """Raised when an email/password pair does not match a user."""

    def __init__(self) -> None:
        super().__init__("Incorrect email or password")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change a resource they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class UserNotFoundError(NotFoundError):
    """Raised when no user has the requested username."""

    def __init__(self, username: str):
        super().__init__("User", username)


class PersistenceError(DomainError):
    """Raised when the store reports that a write had no effect."""

    pass
