"""Base exception for errors reported back to API clients."""

from typing import ClassVar


class ServiceError(Exception):
    """Error with an HTTP status and a client-facing message.

    Subclasses set ``status_code`` and usually ``default_message``.
    Raised from business logic, rendered by ``ServiceErrorMiddleware``.
    """

    status_code: ClassVar[int] = 400
    default_message: ClassVar[str] = 'Bad request'

    def __init__(self, message: str | None = None) -> None:
        """Initialize ServiceError.

        Args:
            message: Client-facing message, defaults to ``default_message``.
        """
        self.message = message or self.default_message
        super().__init__(self.message)
