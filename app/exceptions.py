from typing import Any, Mapping, Optional


class ServiceValidationError(Exception):
    """Raised when input data is invalid or a precondition for a service call is not met.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers (400)
    """

    http_status = 400

    def __init__(self, message: str = "Invalid input", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def __str__(self) -> str:
        return self.message


class NotFoundError(Exception):
    """Raised when an operation expected a meal and the remote source returned none.

    Attributes are similar to ServiceValidationError. http_status is 404.
    """

    http_status = 404

    def __init__(self, message: str = "Not found", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def __str__(self) -> str:
        return self.message


class TransportError(Exception):
    """Raised when a call to the remote meal API fails.

    ``status_code`` is the HTTP status returned by the remote source, or None
    when it could not be reached at all (connection error, timeout).
    http_status is the status handlers should answer with: the remote one when
    it is an error status, 502 otherwise.
    """

    def __init__(
        self,
        message: str = "Remote meal API request failed",
        status_code: Optional[int] = None,
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details
        self.code = code

    @property
    def http_status(self) -> int:
        if self.status_code is not None and 400 <= self.status_code < 600:
            return self.status_code
        return 502

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (status {self.status_code})"
