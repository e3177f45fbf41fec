"""
Error taxonomy for UNova.

Every error carries the HTTP status it maps to and a message that is safe to
show the client. The request boundary (see unova.main) turns them into
``{"message": ...}`` bodies.
"""


class UNovaError(Exception):
    """Base exception for all handled application errors"""
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(UNovaError):
    """Missing or malformed required input"""
    status_code = 400
    default_message = "Invalid request"


class AuthenticationError(UNovaError):
    """No valid credentials on the request"""
    status_code = 401
    default_message = "Unauthorized"


class NotFoundError(UNovaError):
    """
    Row missing, or owned by someone else.

    Ownership mismatches use this class too, never a 403, so callers cannot
    probe for the existence of other users' records.
    """
    status_code = 404
    default_message = "Not found"


class UpstreamError(UNovaError):
    """The text-generation endpoint failed or returned garbage"""
    status_code = 500
    default_message = "Failed to generate a response"


class ConfigurationError(UNovaError):
    """A required setting (e.g. the generation API key) is missing"""
    status_code = 500
    default_message = "Server is not configured for this operation"
