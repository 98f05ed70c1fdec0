from typing import Any


class InvalidQuantity(ValueError):
    """User-supplied quantity is missing, non-numeric, non-finite or <= 0."""

    code = "InvalidQuantity"

    def __init__(self, category: str, field: str, value: Any):
        self.category = category
        self.field = field
        self.value = value
        super().__init__(f"{category}.{field} must be a number greater than 0, got {value!r}")


class UnknownCategory(ValueError):
    code = "UnknownCategory"

    def __init__(self, category: Any):
        self.category = category
        super().__init__(f"Unknown activity category: {category!r}")


class RemoteEstimationError(RuntimeError):
    """Raised by remote providers; the estimator recovers with the fallback."""
