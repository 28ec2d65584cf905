from typing import Any

from fastapi import APIRouter, Depends, Query

from swplanets.core.dependencies import get_directory
from swplanets.services.directory.service import DirectoryService

router = APIRouter(prefix="/api", tags=["planets"])


@router.get("/planets")
async def get_planets(
    page: int | None = Query(default=None, ge=1, description="Catalog page number"),
    directory: DirectoryService = Depends(get_directory),
) -> dict[str, Any]:
    """Proxy one page of the remote catalog as-is."""
    return await directory.get_page(page)
