"""Exceptions raised by the API client."""


class ClientError(Exception):
    """Base class for all client errors."""
    pass


class RequestFailedError(ClientError):
    """The API answered with a non-success status code."""

    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body
        super().__init__(f"Request failed with status {status}: {body}")


class DeserializationError(ClientError):
    """The request could not be sent, or the response body could not be decoded."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Failed to deserialize response: {cause}")
