# models/errors.py
"""Error types raised by the crossplot core.

Every failure the user can trigger (empty upload, unreadable file, a column that
does not exist, nothing to fit) derives from :class:`CrossplotError` so the
view model can report it with a single ``except`` clause.
"""


class CrossplotError(Exception):
    """Base class for user-facing crossplot failures."""


class EmptyInputError(CrossplotError):
    """Raised when the text to parse has no non-blank lines."""

    def __init__(self, message: str = "CSV is empty"):
        super().__init__(message)


class ReadFailureError(CrossplotError):
    """Raised when the file contents could not be acquired as text."""

    def __init__(self, message: str = "Failed to read file"):
        super().__init__(message)


class UnknownColumnError(CrossplotError):
    """Raised when a selected column name is not among the table headers."""

    def __init__(self, column: str):
        self.column = column
        super().__init__(f"Unknown column: '{column}'")


class EmptyPointSetError(CrossplotError):
    """Raised when auto-fit is requested for an empty point sequence."""

    def __init__(self, message: str = "No valid numeric data for the selected columns."):
        super().__init__(message)
