from typing import Optional


class RecordsError(Exception):
    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(RecordsError):
    """A form was submitted with missing, unknown or out-of-range values."""

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        fields = ", ".join(sorted(errors))
        super().__init__(f"Invalid fields: {fields}", details={"errors": errors})


class PersistenceError(RecordsError):
    """The store rejected an insert, select or update."""

    def __init__(self, table: str, reason: str, details: Optional[dict] = None):
        self.table = table
        self.reason = reason
        super().__init__(f"{table}: {reason}", details)


class NotFoundError(PersistenceError):
    pass


class RecognitionError(RecordsError):
    """The OCR engine failed to extract text."""
