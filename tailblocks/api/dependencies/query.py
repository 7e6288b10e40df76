"""
Catalog query dependency.
"""
from typing import Annotated, Optional

from fastapi import Depends, Query

from tailblocks.shared.models.enums import SortKey
from tailblocks.shared.schemas.component import ComponentQuery


async def get_component_query(
    search: Optional[str] = Query(None, description="Whitespace-separated search terms"),
    category: Optional[str] = Query(None, description="Component category"),
    sort: SortKey = Query(SortKey.NEWEST, description="newest, name or popular"),
    favorites: bool = Query(False, description="Only the caller's favorites"),
) -> ComponentQuery:
    """Listing query parameters dependency."""
    search_term = search.strip() if search else None
    return ComponentQuery(
        search_term=search_term or None,
        category=category or None,
        sort=sort,
        favorites_only=favorites,
    )


ComponentQueryParams = Annotated[ComponentQuery, Depends(get_component_query)]
