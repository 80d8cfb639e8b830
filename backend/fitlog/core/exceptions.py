"""Custom exceptions for the fitlog backend"""


class FitlogError(Exception):
    """Base exception for fitlog errors"""
    pass


class StorageError(FitlogError):
    """Raised when the object store cannot read, write or remove a file"""
    pass


class InvalidSignedUrl(FitlogError):
    """Raised when a signed file token is malformed, tampered with or expired"""
    pass


class PushDeliveryError(FitlogError):
    """Raised when a push service rejects a notification"""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class SubscriptionGone(PushDeliveryError):
    """Raised when the push endpoint no longer exists (HTTP 404/410)"""
    pass
