"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when request input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class StoreError(AppError):
    """Raised when a query or write against the transaction store fails."""

    def __init__(self, operation: str, detail: str):
        super().__init__(f"Store {operation} failed: {detail}", code="STORE_ERROR")


class UpstreamError(AppError):
    """Raised when the remote dataset cannot be fetched or decoded."""

    def __init__(self, source: str, detail: str):
        super().__init__(f"Dataset fetch from {source} failed: {detail}", code="UPSTREAM_ERROR")
