class ImageValidationError(Exception):
    """Raised when the uploaded image fails format or size checks."""


class InvalidImageFormatError(ImageValidationError):
    """Raised when the image is missing or is not an image data URL."""


class ImageTooLargeError(ImageValidationError):
    """Raised when the estimated decoded image size exceeds the limit."""


class NotHeritageError(Exception):
    """Raised when the heritage gate rejects the content."""

    def __init__(self, reason: str, keyword: str | None = None):
        super().__init__(reason)
        self.reason = reason
        self.keyword = keyword


class AnalysisError(Exception):
    """Raised when analysis fails for reasons unrelated to the input."""


class AuthenticationError(AnalysisError):
    """Raised when remote model credentials are missing or invalid."""


class IntegrationError(AnalysisError):
    """Raised when a remote model call or its response parsing fails."""


class RateLimitError(IntegrationError):
    """Raised when the remote model rate limit is hit."""
