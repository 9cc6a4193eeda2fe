"""
Paged reads for Supabase queries.

PostgREST caps every response (1000 rows by default), so reading a user's
full history means requesting consecutive ranges until a short page comes
back.
"""
from typing import Any, Callable, Dict, List, Optional

PAGE_SIZE = 1000


def fetch_all_rows(
    build_query: Callable[[], Any],
    page_size: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """
    Execute a query page by page and return every row.

    Args:
        build_query: Returns a fresh, fully filtered and ordered query.
            The order must be total so pages do not overlap.
        page_size: Rows per request; defaults to PAGE_SIZE

    Returns:
        All rows, in query order
    """
    page_size = page_size or PAGE_SIZE
    rows: List[Dict[str, Any]] = []
    offset = 0

    while True:
        result = build_query() \
            .range(offset, offset + page_size - 1) \
            .execute()
        page = result.data or []
        rows.extend(page)
        if len(page) < page_size:
            return rows
        offset += page_size
