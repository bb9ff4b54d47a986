import logging

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from jokebox.config import settings
from jokebox.core.client import get_controller
from jokebox.database import Base, engine
from jokebox.routers import favorites, jokes, keyboard, stats
from jokebox.services.controller import JokeController

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def serve_index(controller: JokeController = Depends(get_controller)):
        return controller.presenter.render_page(controller.view())

    app.include_router(jokes.router)
    app.include_router(favorites.router)
    app.include_router(stats.router)
    app.include_router(keyboard.router)

    @app.get("/health")
    def health():
        return {"status": "ok", "app": settings.app_name}

    logger.info("%s ready, joke provider at %s", settings.app_name, settings.joke_api_base_url)
    return app


Base.metadata.create_all(bind=engine)
app = create_app()
