"""
Connection result containers for cursorpage.

This module provides the data structures a list field returns after a page
has been fetched for a resolved PaginationParams: the edges, the page
information and an optional total count. Dumping with by_alias=True yields
the camelCase names used by cursor connection clients.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from .resolver import PaginationParams

T = TypeVar("T")


class PageInfo(BaseModel):
    """
    Pagination information for one page of edges.

    Attributes:
        has_next_page: Whether more edges exist after end_cursor
        has_prev_page: Whether more edges exist before start_cursor
        start_cursor: Cursor of the first edge in the page
        end_cursor: Cursor of the last edge in the page
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    has_next_page: bool = Field(alias="hasNextPage")
    has_prev_page: bool = Field(alias="hasPrevPage")
    start_cursor: str = Field(default="", alias="startCursor")
    end_cursor: str = Field(default="", alias="endCursor")


class Edge(BaseModel, Generic[T]):
    """A node together with its cursor."""

    node: T
    cursor: str


class Connection(BaseModel, Generic[T]):
    """One page of a cursor connection."""

    model_config = ConfigDict(populate_by_name=True)

    total_count: int | None = Field(default=None, alias="totalCount")
    edges: list[Edge[T]] = Field(default_factory=list)
    page_info: PageInfo = Field(alias="pageInfo")

    @classmethod
    def from_edges(
        cls,
        edges: Sequence[Edge[T]],
        params: PaginationParams,
        has_more: bool,
        total_count: int | None = None,
    ) -> Connection[T]:
        """
        Build a connection for a page fetched with the given params.

        Edges are expected in list order (oldest to newest), whichever
        direction the page was fetched in.

        Args:
            edges: The page's edges
            params: The resolved request that produced the page
            has_more: Whether the fetch saw edges beyond the page in its direction
            total_count: Optional size of the whole list

        Returns:
            A Connection with page_info filled in
        """
        # A pivot means at least one edge lies behind the page
        behind = params.pivot != ""
        page_info = PageInfo(
            has_next_page=behind if params.backward else has_more,
            has_prev_page=has_more if params.backward else behind,
            start_cursor=edges[0].cursor if edges else "",
            end_cursor=edges[-1].cursor if edges else "",
        )
        return cls(total_count=total_count, edges=list(edges), page_info=page_info)
