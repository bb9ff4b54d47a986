import re
import uuid
from collections import OrderedDict
from typing import Annotated

from fastapi import Depends, Request, Response
from sqlalchemy.orm import sessionmaker

from jokebox.config import settings
from jokebox.database import SessionLocal
from jokebox.services.controller import JokeController
from jokebox.services.joke_api import JokeApiClient
from jokebox.services.storage import BrowserStorage

CLIENT_ID_PATTERN = re.compile(r"[0-9a-f]{32}")


class ControllerRegistry:
    """One controller per browser, created on first use.

    Least recently used controllers are dropped past ``max_clients``; a
    dropped browser gets a fresh session rebuilt from its stored favorites
    and counter.
    """

    def __init__(
        self,
        session_factory: sessionmaker,
        api: JokeApiClient,
        max_clients: int = settings.max_clients,
    ):
        self.session_factory = session_factory
        self.api = api
        self.max_clients = max_clients
        self._controllers: OrderedDict[str, JokeController] = OrderedDict()

    def __len__(self) -> int:
        return len(self._controllers)

    def get(self, client_id: str) -> JokeController:
        controller = self._controllers.get(client_id)
        if controller is not None:
            self._controllers.move_to_end(client_id)
            return controller
        controller = JokeController(BrowserStorage(self.session_factory, client_id), self.api)
        self._controllers[client_id] = controller
        while len(self._controllers) > self.max_clients:
            self._controllers.popitem(last=False)
        return controller


_registry: ControllerRegistry | None = None


def get_registry() -> ControllerRegistry:
    global _registry
    if _registry is None:
        _registry = ControllerRegistry(SessionLocal, JokeApiClient())
    return _registry


def set_client_cookie(response: Response, client_id: str, request: Request) -> None:
    response.set_cookie(
        settings.client_cookie_name,
        client_id,
        max_age=settings.client_cookie_max_age_days * 24 * 60 * 60,
        httponly=True,
        samesite="lax",
        secure=request.url.scheme == "https",
        path="/",
    )


def get_client_id(request: Request, response: Response) -> str:
    client_id = request.cookies.get(settings.client_cookie_name)
    if client_id and CLIENT_ID_PATTERN.fullmatch(client_id):
        return client_id
    client_id = uuid.uuid4().hex
    set_client_cookie(response, client_id, request)
    return client_id


async def get_controller(
    client_id: Annotated[str, Depends(get_client_id)],
    registry: Annotated[ControllerRegistry, Depends(get_registry)],
) -> JokeController:
    return registry.get(client_id)
