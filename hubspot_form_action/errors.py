class FormActionError(Exception):
    """Reported failure of the HubSpot form action."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class MissingReferenceError(FormActionError):
    """post_id missing, not numeric, or not pointing at existing content."""


class DeliveryError(FormActionError):
    def __init__(self, message: str, status_code: int | None = None, cause: Exception | None = None):
        super().__init__(message, cause=cause)
        self.status_code = status_code


class ContentLookupError(MissingReferenceError):
    """The content system could not be asked whether post_id exists."""
