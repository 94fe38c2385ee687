"""API endpoints for retrieving the product catalog."""

import logging
from typing import List

from fastapi import APIRouter, HTTPException, Response, status
from fastapi.responses import JSONResponse

from brhygiene.models.product import Product
from brhygiene.services.catalog_service import catalog_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=List[Product],
    status_code=status.HTTP_200_OK,
    summary="List products",
    description="List the product catalog shown on the website",
)
async def list_products() -> List[Product]:
    """Return every catalog product ordered by id.

    Raises:
        HTTPException: If the catalog cannot be built
    """
    try:
        logger.info("Products requested")
        return catalog_service.list_products()
    except Exception as e:
        logger.error(f"Error fetching products: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch products. Please try again later.",
        )


@router.options("", include_in_schema=False)
async def products_preflight() -> Response:
    return Response(status_code=status.HTTP_200_OK)


@router.api_route("", methods=["POST", "PUT", "PATCH", "DELETE"], include_in_schema=False)
async def products_method_not_allowed() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        content={"error": "Method not allowed. Use GET."},
        headers={"Allow": "GET, OPTIONS"},
    )
