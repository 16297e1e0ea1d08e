"""Errors raised by view-model create actions."""


class RecordValidationError(ValueError):
    """A create action was rejected; `field` names the offending input."""

    def __init__(self, field: str, message: str = ""):
        self.field = field
        self.message = message or f"{field} cannot be empty"
        super().__init__(self.message)
