"""
Unit tests for the connection result containers.

Tests PageInfo serialization and Connection.from_edges for both directions.
"""

from cursorpage import Connection, Edge, PageInfo, PaginationParams


def _edges(*cursors: str) -> list[Edge]:
    return [Edge(node={"id": c}, cursor=c) for c in cursors]


class TestPageInfo:
    """Test the PageInfo model."""

    def test_dump_by_alias(self):
        info = PageInfo(has_next_page=True, has_prev_page=False, start_cursor="a", end_cursor="c")
        assert info.model_dump(by_alias=True) == {
            "hasNextPage": True,
            "hasPrevPage": False,
            "startCursor": "a",
            "endCursor": "c",
        }

    def test_validate_from_aliases(self):
        info = PageInfo.model_validate({"hasNextPage": False, "hasPrevPage": True})
        assert info.has_prev_page is True
        assert info.start_cursor == ""
        assert info.end_cursor == ""


class TestConnectionFromEdges:
    """Test building a connection for a resolved request."""

    def test_forward_first_page(self):
        params = PaginationParams(backward=False, pivot="", size=2)
        conn = Connection.from_edges(_edges("a", "b"), params, has_more=True, total_count=5)

        assert conn.total_count == 5
        assert [e.cursor for e in conn.edges] == ["a", "b"]
        assert conn.page_info == PageInfo(
            has_next_page=True, has_prev_page=False, start_cursor="a", end_cursor="b"
        )

    def test_forward_after_pivot(self):
        params = PaginationParams(backward=False, pivot="b", size=2)
        conn = Connection.from_edges(_edges("c", "d"), params, has_more=False)

        assert conn.page_info.has_next_page is False
        assert conn.page_info.has_prev_page is True
        assert conn.total_count is None

    def test_backward_before_pivot(self):
        params = PaginationParams(backward=True, pivot="e", size=2)
        conn = Connection.from_edges(_edges("c", "d"), params, has_more=True)

        assert conn.page_info.has_next_page is True
        assert conn.page_info.has_prev_page is True
        assert conn.page_info.start_cursor == "c"
        assert conn.page_info.end_cursor == "d"

    def test_backward_from_end(self):
        params = PaginationParams(backward=True, pivot="", size=2)
        conn = Connection.from_edges(_edges("d", "e"), params, has_more=False)

        assert conn.page_info.has_next_page is False
        assert conn.page_info.has_prev_page is False

    def test_empty_page(self):
        params = PaginationParams(backward=False, pivot="", size=10)
        conn = Connection.from_edges([], params, has_more=False, total_count=0)

        assert conn.edges == []
        assert conn.page_info.start_cursor == ""
        assert conn.page_info.end_cursor == ""

    def test_dump_by_alias(self):
        params = PaginationParams(backward=False, pivot="", size=1)
        conn = Connection.from_edges(_edges("a"), params, has_more=True, total_count=3)

        assert conn.model_dump(by_alias=True) == {
            "totalCount": 3,
            "edges": [{"node": {"id": "a"}, "cursor": "a"}],
            "pageInfo": {
                "hasNextPage": True,
                "hasPrevPage": False,
                "startCursor": "a",
                "endCursor": "a",
            },
        }
