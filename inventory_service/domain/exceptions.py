"""Domain exceptions"""


class InventoryError(Exception):
    """Base class for inventory errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(InventoryError):
    """A required field is missing or malformed"""


class ItemNotFoundError(InventoryError):
    """No item with the requested id"""

    def __init__(self, message: str = "Item not found"):
        super().__init__(message)


class PhotoNotFoundError(ItemNotFoundError):
    """Item is missing or has no stored photo"""

    def __init__(self, message: str = "Photo not found"):
        super().__init__(message)


class MethodNotAllowedError(InventoryError):
    """Request did not match any route"""

    def __init__(self, message: str = "Method not allowed"):
        super().__init__(message)
