"""
FastAPI Integration Example

Demonstrates resolving cursor pagination arguments in a list endpoint and
returning a Connection. Rows live in memory; the cursor is simply the row id.
"""

from fastapi import FastAPI, HTTPException, status
from pydantic import BaseModel

from cursorpage import Connection, CursorPageError, Edge, PaginationConfig, PaginationParams


class Movie(BaseModel):
    """Movie node"""

    movie_id: str
    title: str
    year: int


MOVIES = [
    Movie(movie_id=f"m{i:03d}", title=f"Movie {i}", year=1990 + i) for i in range(1, 51)
]

# One declaration per list field, shared by every request
MOVIES_PAGINATION = PaginationConfig(default_first=10, default_last=10)

app = FastAPI(title="cursorpage + FastAPI Example")


def fetch_page(params: PaginationParams) -> tuple[list[Movie], bool]:
    """Slice the in-memory table for a resolved request"""
    ids = [m.movie_id for m in MOVIES]
    if params.pivot and params.pivot not in ids:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=f"Unknown cursor '{params.pivot}'"
        )
    if params.backward:
        end = ids.index(params.pivot) if params.pivot else len(ids)
        start = max(end - params.size, 0)
        return MOVIES[start:end], start > 0
    start = ids.index(params.pivot) + 1 if params.pivot else 0
    end = start + params.size
    return MOVIES[start:end], end < len(ids)


@app.get("/movies", response_model=Connection[Movie], response_model_by_alias=True)
def list_movies(
    first: int | None = None,
    after: str | None = None,
    last: int | None = None,
    before: str | None = None,
) -> Connection[Movie]:
    """List movies, one page at a time"""
    try:
        # Unset query parameters are None; leave them out of the argument bag
        args = {"first": first, "after": after, "last": last, "before": before}
        params = MOVIES_PAGINATION.parse({k: v for k, v in args.items() if v is not None})
    except CursorPageError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e

    movies, has_more = fetch_page(params)
    edges = [Edge[Movie](node=m, cursor=m.movie_id) for m in movies]
    return Connection[Movie].from_edges(edges, params, has_more, total_count=len(MOVIES))


# Run with: uvicorn main:app --reload
# Visit: http://localhost:8000/movies?first=5
