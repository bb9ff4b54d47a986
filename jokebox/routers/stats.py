from fastapi import APIRouter, Depends

from jokebox import schemas
from jokebox.core.client import get_controller
from jokebox.services.controller import JokeController

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=schemas.Counts)
async def current_counts(controller: JokeController = Depends(get_controller)):
    return controller.stats.current_counts()
