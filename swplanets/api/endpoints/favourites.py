from fastapi import APIRouter, Depends, Response

from swplanets.core.config import settings
from swplanets.core.dependencies import get_favourites
from swplanets.core.exceptions import NotFoundError
from swplanets.models.planet import Planet
from swplanets.services.favourites import FavouritesStore

router = APIRouter(prefix="/api/favourite", tags=["favourites"])


@router.post("", status_code=201, response_model=Planet)
async def add_favourite(planet: Planet, favourites: FavouritesStore = Depends(get_favourites)) -> Planet:
    return await favourites.add(planet)


@router.get("", response_model=list[Planet])
async def list_favourites(favourites: FavouritesStore = Depends(get_favourites)) -> list[Planet]:
    planets = await favourites.list_all()
    if not planets and settings.FAVOURITES_EMPTY_IS_NOT_FOUND:
        raise NotFoundError("No planets found in favourites")
    return planets


@router.delete("/{name}", status_code=204, response_class=Response)
async def remove_favourite(name: str, favourites: FavouritesStore = Depends(get_favourites)) -> Response:
    await favourites.remove(name)
    return Response(status_code=204)
