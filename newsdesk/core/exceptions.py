"""
Custom Exception Classes for Newsdesk

Every failure the API turns into an error response derives from
NewsdeskError, so route handlers can catch by category.
"""


class NewsdeskError(Exception):
    """Base exception for all Newsdesk errors."""
    pass


# =============================================================================
# Storage Errors
# =============================================================================

class StoreError(NewsdeskError):
    """Raised when the news database cannot be opened, queried or written."""
    pass


# =============================================================================
# Upload Errors
# =============================================================================

class UploadError(NewsdeskError):
    """Raised when an uploaded image cannot be accepted or saved."""
    pass


class InvalidFileType(UploadError):
    """Raised when an upload's media type is not in the allow-list."""
    pass
