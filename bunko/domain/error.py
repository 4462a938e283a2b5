"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ConfigurationError(DomainError):
    """Invalid content taxonomy declaration.

    Raised at startup; a misconfigured registry must abort the process.
    """

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Carries per-field messages so callers can report every problem at once.
    """

    def __init__(self, errors: dict[str, list[str]]):
        self.errors = errors
        details = "; ".join(
            f"{field} {message}"
            for field, messages in errors.items()
            for message in messages
        )
        super().__init__(f"Validation failed: {details}")


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class SlugConflictError(DomainError):
    """Raised by the store when (post_type_id, slug) is already taken."""

    def __init__(self, post_type_id: str, slug: str):
        self.post_type_id = post_type_id
        self.slug = slug
        super().__init__(f"Slug '{slug}' already exists for post type {post_type_id}")
