from fastapi import APIRouter, Depends

from jokebox import schemas
from jokebox.core.client import get_controller
from jokebox.services.controller import JokeController

router = APIRouter(prefix="/joke", tags=["joke"])


@router.get("", response_model=schemas.ViewResponse)
async def current_view(controller: JokeController = Depends(get_controller)):
    return controller.view()


@router.post("/fetch", response_model=schemas.ViewResponse)
async def fetch_joke(controller: JokeController = Depends(get_controller)):
    await controller.fetch_joke()
    return controller.view()


@router.post("/reveal", response_model=schemas.ViewResponse)
async def reveal_punchline(controller: JokeController = Depends(get_controller)):
    controller.reveal()
    return controller.view()


@router.post("/category", response_model=schemas.ViewResponse)
async def select_category(
    payload: schemas.CategoryRequest,
    controller: JokeController = Depends(get_controller),
):
    controller.select_category(payload.category)
    await controller.fetch_joke(payload.category)
    return controller.view()


@router.post("/share", response_model=schemas.ViewResponse)
async def share_joke(
    payload: schemas.ShareRequest,
    controller: JokeController = Depends(get_controller),
):
    action = controller.share_current_joke(payload.can_share)
    return controller.view(action)


@router.post("/share/result", response_model=schemas.ViewResponse)
async def share_result(
    payload: schemas.ShareResultRequest,
    controller: JokeController = Depends(get_controller),
):
    action = controller.share_result(payload.outcome, payload.text)
    return controller.view(action)


@router.post("/copy", response_model=schemas.ViewResponse)
async def copy_joke(controller: JokeController = Depends(get_controller)):
    action = controller.copy_current_joke()
    return controller.view(action)


@router.post("/copy/result", response_model=schemas.ViewResponse)
async def copy_result(
    payload: schemas.ClipboardResultRequest,
    controller: JokeController = Depends(get_controller),
):
    controller.clipboard_result(payload.ok)
    return controller.view()
