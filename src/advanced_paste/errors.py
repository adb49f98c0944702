"""Errors raised by completion clients."""


class RequestFailedError(Exception):
    """The completion service rejected or failed the request."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
