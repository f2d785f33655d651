class EsApiError(Exception):
    """Base class for errors raised by the bindings."""


class ConstructionError(EsApiError, ValueError):
    """Raised when a request cannot be built from the supplied input.

    This happens before anything is sent: a missing required path argument,
    an option the endpoint does not recognize, a value of the wrong type, or
    a method/url/body combination httpx refuses to turn into a request.
    """

    def __init__(self, message: str, endpoint: str | None = None) -> None:
        self.message = message
        self.endpoint = endpoint
        if endpoint:
            message = f"{endpoint}: {message}"
        super().__init__(message)


class TransportError(EsApiError):
    """Raised when the transport could not complete the exchange.

    HTTP error statuses are not transport errors; they come back as an
    ordinary response.
    """

    def __init__(self, message: str, request: object | None = None) -> None:
        self.message = message
        self.request = request
        super().__init__(message)


class RequestCancelledError(TransportError):
    """Raised when the cancellation token fired before or during the exchange."""

    def __init__(self, request: object | None = None) -> None:
        super().__init__("Request was cancelled", request=request)
