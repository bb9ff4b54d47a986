from fastapi import APIRouter, Depends

from jokebox import schemas
from jokebox.core.client import get_controller
from jokebox.services.controller import JokeController

router = APIRouter(prefix="/keys", tags=["keyboard"])


@router.post("", response_model=schemas.ViewResponse)
async def key_pressed(payload: schemas.KeyPress, controller: JokeController = Depends(get_controller)):
    """Keyboard shortcuts: Enter/Space fetch, R reveals, F toggles the favorite."""
    await controller.handle_key(payload.key, payload.target)
    return controller.view()
