"""Gateway errors and the messages returned to API clients."""

from typing import Optional

VALIDATION_MESSAGE = "Champs text et targetLanguage requis."


class GatewayError(Exception):
    """Error rendered to the client as ``{"error": message}``."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class RequestValidationFailed(GatewayError):
    """Raised when text or targetLanguage is missing from the request."""

    status_code = 400

    def __init__(self):
        super().__init__(VALIDATION_MESSAGE)


class ProviderError(GatewayError):
    """Raised when the outbound provider call fails.

    The client only sees a fixed per-provider message; the underlying
    error is kept as ``__cause__`` for logging.
    """

    status_code = 500

    def __init__(self, display_name: str):
        super().__init__(f"Erreur lors de la traduction via {display_name}")
        self.display_name = display_name


class EmptyProviderResponse(Exception):
    """Provider answered successfully but without any extractable text."""

    def __init__(self, display_name: str):
        super().__init__(f"Empty response from {display_name}")
        self.display_name = display_name
