"""Domain-specific exceptions: framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class UnauthorizedAccessError(Exception):
    """Raised when a non-admin origin invokes an admin-only use case."""

    def __init__(self, origin: str | None, action: str):
        self.origin = origin
        self.action = action
        super().__init__(f"Unauthorized access from '{origin}' to '{action}'")


class ArticleNotPersistedError(Exception):
    """Raised when the store does not acknowledge an article write.

    Not a client error: the caller may simply try again.
    """

    def __init__(self, operation: str, article_id: str):
        self.operation = operation
        self.article_id = article_id
        super().__init__(f"Article '{article_id}' was not persisted ({operation})")


class ArticleValidationError(Exception):
    """Raised when article input is rejected before reaching the store."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")
