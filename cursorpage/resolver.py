"""
Pagination argument resolution for cursor connections.

Turns the first/after/last/before arguments of a list field into a single
PaginationParams, following a fixed precedence:

1. first (+ after) when forward paging is allowed
2. last (+ before) when backward paging is allowed
3. bare after, sized by the forward default
4. bare before, sized by the backward default
5. no recognized argument: the fallback direction, sized by the forward default

The first rule that matches wins, so a bag carrying both first and last
always resolves forward, whatever the mapping order.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ._logging import logger, redact_cursor
from .args import AFTER, BEFORE, FIRST, LAST, lookup_cursor, lookup_size
from .config import PaginationConfig
from .exceptions import InvalidDefaultError


@dataclass(frozen=True)
class PaginationParams:
    """
    A resolved request for one page of edges.

    Attributes:
        backward: True for backward traversal (last/before), False for forward
        pivot: Exclusive boundary cursor, "" to start from an end of the list
        size: Number of edges to return
    """

    backward: bool
    pivot: str
    size: int


def _checked_default(config: PaginationConfig, backward: bool) -> int:
    name = "default_last" if backward else "default_first"
    size = config.default_last if backward else config.default_first
    if size < 0:
        logger.warning(
            "Pagination declaration has a negative default size",
            extra={"direction": config.direction.value, "setting": name, "size": size},
        )
        raise InvalidDefaultError(name, size)
    return size


def _sized(args: Mapping[str, Any], backward: bool) -> PaginationParams | None:
    size_name, cursor_name = (LAST, BEFORE) if backward else (FIRST, AFTER)
    present, size = lookup_size(args, size_name)
    if not present:
        return None
    _, pivot = lookup_cursor(args, cursor_name)
    return PaginationParams(backward=backward, pivot=pivot, size=size)


def _bare_cursor(
    config: PaginationConfig, args: Mapping[str, Any], backward: bool
) -> PaginationParams | None:
    present, pivot = lookup_cursor(args, BEFORE if backward else AFTER)
    if not present:
        return None
    return PaginationParams(backward=backward, pivot=pivot, size=_checked_default(config, backward))


def _resolve(config: PaginationConfig, args: Mapping[str, Any]) -> PaginationParams:
    if config.allows_forward():
        params = _sized(args, backward=False)
        if params is not None:
            return params

    if config.allows_backward():
        params = _sized(args, backward=True)
        if params is not None:
            return params

    if config.allows_forward():
        params = _bare_cursor(config, args, backward=False)
        if params is not None:
            return params

    if config.allows_backward():
        params = _bare_cursor(config, args, backward=True)
        if params is not None:
            return params

    backward = config.fallback_backward()
    return PaginationParams(backward=backward, pivot="", size=_checked_default(config, False))


def resolve(config: PaginationConfig, args: Mapping[str, Any]) -> PaginationParams:
    """
    Resolve a pagination argument bag against a field's declaration.

    Args:
        config: The list field's pagination declaration
        args: Raw argument values keyed by name (first, after, last, before)

    Returns:
        The resolved PaginationParams

    Raises:
        InvalidSizeError: If first/last is not a non-negative integer
        InvalidCursorTypeError: If after/before is not a string
        InvalidDefaultError: If the default size needed by the request is negative
    """
    params = _resolve(config, args)
    logger.debug(
        "Resolved pagination arguments",
        extra={
            "direction": config.direction.value,
            "backward": params.backward,
            "size": params.size,
            "pivot": redact_cursor(params.pivot),
        },
    )
    return params
