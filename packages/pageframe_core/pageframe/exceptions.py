"""Custom exceptions for pageframe."""

from typing import Optional


class PageframeError(Exception):
    """Base exception for pageframe errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class RequestValidationError(PageframeError):
    """Exception raised when a capture request or spacing value is invalid."""

    def __init__(self, message: str, field_name: Optional[str] = None, details: Optional[str] = None):
        super().__init__(message, details)
        self.field_name = field_name


class CaptureError(PageframeError):
    """Exception raised while capturing a page in the browser."""

    pass


class ElementNotFoundError(CaptureError):
    """The main selector matched nothing. Never retried."""

    def __init__(self, selector: str, url: str):
        super().__init__(f'Selector "{selector}" not found on {url}')
        self.selector = selector
        self.url = url


class CaptureFailedError(CaptureError):
    """Raised when every capture attempt for a URL failed."""

    def __init__(self, url: str, attempts: int, last_error: Optional[str] = None):
        super().__init__(f"Failed to capture {url} after {attempts} attempts", last_error)
        self.url = url
        self.attempts = attempts
        self.last_error = last_error


class CompilationError(PageframeError):
    """Exception raised during PDF composition."""

    pass


class StorageError(PageframeError):
    """Exception raised when the composed document cannot be stored."""

    pass
