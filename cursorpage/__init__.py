from .config import ArgumentSpec, Direction, PaginationConfig
from .exceptions import (
    CursorPageError,
    InvalidCursorTypeError,
    InvalidDefaultError,
    InvalidSizeError,
    PaginationArgumentError,
)
from .pagination import Connection, Edge, PageInfo
from .resolver import PaginationParams, resolve

__all__ = [
    "Direction",
    "PaginationConfig",
    "ArgumentSpec",
    "PaginationParams",
    "resolve",
    # Connection results
    "Connection",
    "Edge",
    "PageInfo",
    # Exceptions
    "CursorPageError",
    "PaginationArgumentError",
    "InvalidSizeError",
    "InvalidCursorTypeError",
    "InvalidDefaultError",
]
