"""Domain-specific exceptions — framework-independent."""


class StoreError(Exception):
    """Base class for every failure the inspection store can report."""


class EntityNotFoundError(StoreError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class PropertyNotFoundError(EntityNotFoundError):
    def __init__(self, property_id: str):
        super().__init__("Property", property_id)


class RecordNotFoundError(EntityNotFoundError):
    def __init__(self, record_id: str):
        super().__init__("Record", record_id)


class RoomNotFoundError(EntityNotFoundError):
    def __init__(self, room_id: str):
        super().__init__("Room", room_id)


class StoreInitializationError(StoreError):
    """Raised when the backing database could not be opened or created.

    Fatal for the store instance: every later operation degrades to a no-op.
    """

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Store could not be initialized: {detail}")


class OperationFailedError(StoreError):
    """Raised when a transaction fails for reasons other than a missing key."""

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        self.detail = detail
        super().__init__(f"{operation} failed: {detail}")


class InvalidDataError(StoreError):
    """Raised for malformed input rejected before a transaction is opened."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"Invalid {field}: {message}")


class NoRecordsToDeleteError(StoreError):
    """Raised by clear_all when the store holds nothing."""

    def __init__(self) -> None:
        super().__init__("There is no data to delete")


class ImageNotFoundError(Exception):
    """Raised when a photo token does not resolve to a readable file."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Image '{token}' not found")


class FieldValidationError(Exception):
    """Raised by the UI-facing validation helpers, never by the store."""

    NAME_TOO_SHORT = "name_too_short"
    NAME_TOO_LONG = "name_too_long"
    INVALID_CHARACTERS = "invalid_characters"
    CONTAINS_DIGITS = "contains_digits"
    CONTAINS_SPECIAL_CHARACTERS = "contains_special_characters"
    TOO_LONG = "too_long"
    OUT_OF_RANGE = "out_of_range"

    def __init__(self, field: str, code: str, message: str):
        self.field = field
        self.code = code
        self.message = message
        super().__init__(f"{field}: {message}")
