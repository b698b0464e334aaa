from fastapi import APIRouter, Depends
from typing import Tuple

from models.item import Item
from models.link import PaginatedResponse
from services.catalog import Catalog, get_catalog
from utils.link_route import LinkHeaderRoute, pagination_params


router = APIRouter(
    prefix="/items",
    tags=["Items"],
    route_class=LinkHeaderRoute,
)


# -----------------------------------------------------------------------------
# GET Endpoints
# -----------------------------------------------------------------------------

@router.get("", response_model=PaginatedResponse[Item], status_code=200, name="list_items")
async def list_items(
    pagination: Tuple[int, int] = Depends(pagination_params),
    catalog: Catalog = Depends(get_catalog),
):
    """List catalogue items one page at a time. Navigation is in the Link header."""
    page, per_page = pagination
    resource, total_docs = catalog.page(page, per_page)
    return PaginatedResponse[Item](resource=resource, totalDocs=total_docs)
