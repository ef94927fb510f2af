"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist (or is hidden from the caller)."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ValidationError(Exception):
    """Raised when input is rejected before it reaches persistence or storage."""


class UnsupportedMediaTypeError(ValidationError):
    """Raised when an upload's content type is not on the allow-list."""

    def __init__(self, content_type: str | None, allowed: list[str]):
        self.content_type = content_type
        self.allowed = allowed
        super().__init__(
            f"Unsupported file type '{content_type}'. Allowed: {', '.join(allowed)}"
        )


class UploadTooLargeError(ValidationError):
    """Raised when an upload exceeds the configured size limit."""

    def __init__(self, size: int, max_size: int):
        self.size = size
        self.max_size = max_size
        super().__init__(f"File is {size} bytes; the limit is {max_size} bytes")


class AuthenticationError(Exception):
    """Raised when a presented credential is rejected.

    The message is deliberately generic; callers never learn which check failed.
    """

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message)


class InvalidCredentialsError(AuthenticationError):
    """Raised when a login username/password pair does not match."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials.")


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token fails signature, claim or lifetime checks."""


class ConfigurationError(Exception):
    """Raised when a required setting is missing at the time it is needed."""


class StorageError(Exception):
    """Raised when the object store cannot be reached or rejects a request.

    Provider-agnostic — works for S3, DigitalOcean Spaces, MinIO, etc.
    """

    def __init__(self, operation: str, key: str, message: str):
        self.operation = operation
        self.key = key
        self.message = message
        super().__init__(f"[{operation}] {key}: {message}")
