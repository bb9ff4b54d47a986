from pathlib import Path

import jinja2

from jokebox import schemas
from jokebox.config import settings
from jokebox.models import Category

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=True,
    keep_trailing_newline=True,
)


class Presenter:
    """Pure projections of state to HTML; same input, same bytes."""

    def __init__(
        self,
        env: jinja2.Environment = _jinja_env,
        notification_seconds: float = settings.notification_seconds,
    ):
        self.env = env
        self.notification_seconds = notification_seconds

    def _render(self, name: str, **context) -> str:
        return self.env.get_template(name).render(**context)

    def render_favorites_list(self, favorites: list[schemas.Joke]) -> str:
        return self._render("favorites_list.html", favorites=favorites)

    def render_favorite_button(self, is_favorite: bool) -> str:
        return self._render("favorite_button.html", is_favorite=is_favorite)

    def render_stats(self, counts: schemas.Counts) -> str:
        return self._render("stats.html", counts=counts)

    def render_notification(self, notification: schemas.Notification | None) -> str:
        return self._render("notification.html", notification=notification)

    def render_page(self, view: schemas.ViewResponse) -> str:
        return self._render(
            "page.html",
            view=view,
            categories=list(Category),
            notification_html=self.render_notification(view.notification),
            notification_seconds=self.notification_seconds,
        )
