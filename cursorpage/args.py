"""
Typed access to a dynamically-shaped pagination argument bag.

GraphQL layers hand resolvers a plain mapping of argument values. Nothing
guarantees those values were coerced upstream, so every lookup here returns
a presence flag together with a value that has been checked against the
expected scalar type.

Usage:
    present, size = lookup_size(args, "first")
    if present:
        ...
"""

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import Field, StrictInt, StrictStr, ValidationError
from pydantic.type_adapter import TypeAdapter

from .exceptions import InvalidCursorTypeError, InvalidSizeError

FIRST = "first"
AFTER = "after"
LAST = "last"
BEFORE = "before"

# Strict mode keeps bools and numeric strings out of page sizes
_SIZE_ADAPTER: TypeAdapter[int] = TypeAdapter(Annotated[StrictInt, Field(ge=0)])
_CURSOR_ADAPTER: TypeAdapter[str] = TypeAdapter(StrictStr)


def _lookup(args: Mapping[str, Any], name: str) -> tuple[bool, Any]:
    if name not in args:
        return False, None
    return True, args[name]


def lookup_size(args: Mapping[str, Any], name: str) -> tuple[bool, int]:
    """
    Look up a page size argument ("first" or "last").

    Args:
        args: The raw argument bag
        name: Argument name to read

    Returns:
        (present, size). size is 0 when the argument is absent.

    Raises:
        InvalidSizeError: If the value is present but not a non-negative int
    """
    present, value = _lookup(args, name)
    if not present:
        return False, 0
    try:
        return True, _SIZE_ADAPTER.validate_python(value)
    except ValidationError as e:
        raise InvalidSizeError(name, value, original_error=e) from e


def lookup_cursor(args: Mapping[str, Any], name: str) -> tuple[bool, str]:
    """
    Look up a cursor argument ("after" or "before").

    Returns:
        (present, cursor). cursor is "" when the argument is absent.

    Raises:
        InvalidCursorTypeError: If the value is present but not a string
    """
    present, value = _lookup(args, name)
    if not present:
        return False, ""
    try:
        return True, _CURSOR_ADAPTER.validate_python(value)
    except ValidationError as e:
        raise InvalidCursorTypeError(name, value, original_error=e) from e
