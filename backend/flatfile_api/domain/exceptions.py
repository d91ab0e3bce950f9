"""Domain-specific exceptions — framework-independent.

Every failure carries a human-readable ``message`` and the HTTP status the
boundary error handler should answer with.
"""


class AppError(Exception):
    """Base failure raised anywhere below the presentation layer."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class EntityNotFoundError(AppError):
    """Raised when a requested entity does not exist."""

    status_code = 404

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} not found")


class CollectionLoadError(AppError):
    """Raised when a collection file is missing, unreadable or corrupt."""

    def __init__(self, collection: str):
        self.collection = collection
        super().__init__(f"Could not load data from {collection}")


class CollectionSaveError(AppError):
    """Raised when a collection file cannot be written."""

    def __init__(self, collection: str):
        self.collection = collection
        super().__init__(f"Could not save data to {collection}")


class InvalidImageDimensionsError(AppError):
    """Raised when placeholder image dimensions are not positive integers."""

    status_code = 400

    def __init__(self, width: str, height: str):
        self.width = width
        self.height = height
        super().__init__("Invalid image dimensions")


class InvalidPayloadError(AppError):
    """Raised when a request body cannot be stored as a JSON record."""

    status_code = 400
