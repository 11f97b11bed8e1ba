from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from .args import AFTER, BEFORE, FIRST, LAST

if TYPE_CHECKING:
    from .resolver import PaginationParams

SIZE_DESCRIPTION = "number of edges to get"
AFTER_DESCRIPTION = "cursor for edge. after the edge to get (exclusively)"
BEFORE_DESCRIPTION = "cursor for edge. before the edge to get (exclusively)"


class Direction(str, Enum):
    """Pagination directions a list field supports."""

    BOTH = "both"
    FORWARD = "forward"
    BACKWARD = "backward"


@dataclass(frozen=True)
class ArgumentSpec:
    """
    Describes one pagination argument a list field should expose.

    The default is informational (e.g. for schema generation); resolution
    applies the declaration's defaults on its own.
    """

    name: str
    type: str
    description: str
    default: int | None = None


@dataclass(frozen=True)
class PaginationConfig:
    """
    Capability declaration for a paginated list field.

    Built once per field and shared read-only between resolutions.
    Negative defaults are accepted here and reported by the resolver
    when a request actually falls back on them.
    """

    direction: Direction = Direction.BOTH
    default_first: int = 0
    default_last: int = 0

    # Fallback direction when both are allowed and no argument selects one
    prefer_backward: bool = False

    def allows_forward(self) -> bool:
        """Returns True if first/after are accepted."""
        return self.direction in (Direction.BOTH, Direction.FORWARD)

    def allows_backward(self) -> bool:
        """Returns True if last/before are accepted."""
        return self.direction in (Direction.BOTH, Direction.BACKWARD)

    def fallback_backward(self) -> bool:
        """
        Direction used when the argument bag selects none.

        Returns:
            True for backward traversal, False for forward
        """
        if not self.allows_forward():
            return True
        return self.allows_backward() and self.prefer_backward

    def field_arguments(self) -> dict[str, ArgumentSpec]:
        """
        Build the argument descriptions a list field should expose.

        Returns:
            Mapping of argument name to ArgumentSpec, forward arguments first
        """
        args: dict[str, ArgumentSpec] = {}
        if self.allows_forward():
            args[FIRST] = ArgumentSpec(
                name=FIRST,
                type="Int",
                description=SIZE_DESCRIPTION,
                default=self.default_first if self.default_first > 0 else None,
            )
            args[AFTER] = ArgumentSpec(name=AFTER, type="String", description=AFTER_DESCRIPTION)
        if self.allows_backward():
            args[LAST] = ArgumentSpec(
                name=LAST,
                type="Int",
                description=SIZE_DESCRIPTION,
                default=self.default_last if self.default_last > 0 else None,
            )
            args[BEFORE] = ArgumentSpec(
                name=BEFORE, type="String", description=BEFORE_DESCRIPTION
            )
        return args

    def parse(self, args: Mapping[str, Any]) -> PaginationParams:
        """Shortcut for resolve(self, args)."""
        from .resolver import resolve

        return resolve(self, args)
