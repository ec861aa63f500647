"""Domain exceptions for the glance system."""


class GlanceError(Exception):
    """Base exception for glance errors."""

    pass


class InvalidInputError(GlanceError):
    """Raised when a handle, question or other required input is missing."""

    pass


class NotFoundError(GlanceError):
    """Raised when an external handle or a cached summary does not exist."""

    pass


class UpstreamConfigError(GlanceError):
    """Raised when credentials for an external integration are absent."""

    pass


class UpstreamRateLimitError(GlanceError):
    """Raised when an external service signals rate limiting."""

    pass


class UpstreamError(GlanceError):
    """Raised when an external call fails for any other reason."""

    pass


class StorageError(UpstreamError):
    """Raised when writing to the cache store fails."""

    pass
