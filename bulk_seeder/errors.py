from typing import Optional


class SeederError(Exception):
    """Base error for everything a bulk seeding call can fail with.

    Each subclass sets ``kind`` so callers can branch on the failure type
    without isinstance chains. ``cause`` holds the underlying exception.
    """

    kind = "seeder"

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class AddressError(SeederError):
    """Backend address is not a valid scheme://host:port location."""

    kind = "address"


class TransportError(SeederError):
    """Client construction or the network call failed."""

    kind = "transport"


class BackendError(SeederError):
    """Backend answered with something the client could not parse."""

    kind = "backend"
