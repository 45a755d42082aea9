"""Custom exceptions for the species listing frontend.

Exception Hierarchy:
    SpeciesViewerError (base)
    └── FetchError
"""

from enum import Enum


class FetchErrorKind(str, Enum):
    """What went wrong while retrieving a remote resource.

    Only surfaced to logs; the page always shows the same message.
    """
    NETWORK = "network"
    PARSE = "parse"
    NOT_FOUND = "not_found"


class SpeciesViewerError(Exception):
    """Base exception for the species listing frontend.

    All custom exceptions in this application should inherit from this class.
    This allows catching all application-specific errors with a single except clause.
    """

    def __init__(self, message: str = "An error occurred in the species listing"):
        self.message = message
        super().__init__(self.message)


class FetchError(SpeciesViewerError):
    """Raised when a film or species resource cannot be fetched or parsed.

    The message is either fixed (film step) or the text of the failure that
    triggered it (species step). The original exception is never chained.

    Attributes:
        kind: FetchErrorKind of the failure
        url: URL of the resource that failed (optional)

    Example:
        >>> raise FetchError(
        ...     "There was an error fetching the film.",
        ...     kind=FetchErrorKind.NETWORK,
        ...     url="https://swapi.dev/api/films/2/"
        ... )
    """

    def __init__(
        self,
        message: str = "Fetch failed",
        kind: FetchErrorKind = FetchErrorKind.NETWORK,
        url: str = None
    ):
        self.kind = kind
        self.url = url
        super().__init__(message)

    def __repr__(self) -> str:
        return f"FetchError(message={self.message!r}, kind={self.kind.value!r}, url={self.url!r})"
