from fastapi import APIRouter, Depends

from jokebox import schemas
from jokebox.core.client import get_controller
from jokebox.services.controller import JokeController

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.get("", response_model=list[schemas.Joke])
async def list_favorites(controller: JokeController = Depends(get_controller)):
    return controller.favorites.items


@router.post("/toggle", response_model=schemas.ViewResponse)
async def toggle_favorite(controller: JokeController = Depends(get_controller)):
    controller.toggle_favorite()
    return controller.view()


@router.post("/panel", response_model=schemas.ViewResponse)
async def toggle_panel(controller: JokeController = Depends(get_controller)):
    controller.toggle_favorites_panel()
    return controller.view()


@router.delete("/{joke_id}", response_model=schemas.ViewResponse)
async def remove_favorite(joke_id: int, controller: JokeController = Depends(get_controller)):
    controller.remove_favorite(joke_id)
    return controller.view()
