from typing import Any


class CursorPageError(Exception):
    """Base exception for all cursorpage errors."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class PaginationArgumentError(CursorPageError):
    """Raised when a caller-supplied pagination argument is malformed."""

    def __init__(
        self,
        message: str,
        argument: str,
        value: Any | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error)
        self.argument = argument
        self.value = value


class InvalidSizeError(PaginationArgumentError):
    """Raised when "first" or "last" is not a non-negative integer."""

    def __init__(
        self, argument: str, value: Any, original_error: Exception | None = None
    ) -> None:
        super().__init__(
            f'invalid value for "{argument}": {value!r}',
            argument=argument,
            value=value,
            original_error=original_error,
        )


class InvalidCursorTypeError(PaginationArgumentError):
    """Raised when "after" or "before" is not a string."""

    def __init__(
        self, argument: str, value: Any, original_error: Exception | None = None
    ) -> None:
        super().__init__(
            f'unexpected "{argument}" type: want=str got={type(value).__name__}',
            argument=argument,
            value=value,
            original_error=original_error,
        )


class InvalidDefaultError(CursorPageError):
    """
    Raised when a declaration carries a negative default page size.

    This is a setup defect rather than bad client input. It only surfaces
    when a resolution actually needs the default.
    """

    def __init__(self, argument: str, value: int) -> None:
        super().__init__(f"negative default size: {value}")
        self.argument = argument
        self.value = value
