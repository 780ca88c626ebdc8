"""Domain errors raised while answering café lookups.

Each request error carries the fixed, single-line message that is sent
back to the client as the plain-text body of a 400 response.
"""


class CafeDirectoryError(Exception):
    """Base class for request validation errors."""

    message: str = "bad request"
    status_code: int = 400

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.message
        super().__init__(self.message)


class UnknownCityError(CafeDirectoryError):
    """The requested city is missing or not in the directory."""

    message = "unknown city"


class InvalidCountError(CafeDirectoryError):
    """The count parameter is not a non-negative integer."""

    message = "incorrect count"


class DirectoryLoadError(Exception):
    """A directory data file could not be read or validated."""
