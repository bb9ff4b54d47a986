"""Per-browser controller: the joke session plus every user action.

All methods run on the event loop thread. The only await point is the
provider call in :meth:`JokeController.fetch_joke`; overlapping fetches are
sequenced so that only the newest request is applied.
"""

import logging
from dataclasses import dataclass

from jokebox import schemas
from jokebox.config import settings
from jokebox.core.errors import NO_JOKE_MESSAGE, JokeFetchError, NoJokeLoadedError
from jokebox.models import Category, ClientActionKind, Severity, ShareOutcome, ToggleOutcome
from jokebox.services.favorites import FavoritesStore
from jokebox.services.joke_api import JokeApiClient
from jokebox.services.notifications import Notifier
from jokebox.services.presentation import Presenter
from jokebox.services.stats import StatsCounter
from jokebox.services.storage import BrowserStorage

logger = logging.getLogger(__name__)

FETCH_FAILED = "Failed to fetch joke. Please try again!"

FETCH_KEYS = {"Enter", " "}
REVEAL_KEYS = {"r", "R"}
FAVORITE_KEYS = {"f", "F"}


@dataclass
class AppState:
    current_joke: schemas.Joke | None = None
    revealed: bool = False
    category: Category = Category.RANDOM
    favorites_open: bool = False
    in_flight: int = 0
    request_seq: int = 0

    @property
    def loading(self) -> bool:
        return self.in_flight > 0


def joke_text(joke: schemas.Joke) -> str:
    return f"{joke.setup}\n\n{joke.punchline}"


class JokeController:
    def __init__(
        self,
        storage: BrowserStorage,
        api: JokeApiClient,
        notifier: Notifier | None = None,
        presenter: Presenter | None = None,
    ):
        self.api = api
        self.state = AppState()
        self.favorites = FavoritesStore(storage)
        self.stats = StatsCounter(storage, self.favorites)
        self.notifier = notifier or Notifier()
        self.presenter = presenter or Presenter()

    # -- joke session -----------------------------------------------------

    async def fetch_joke(self, category: Category | None = None) -> bool:
        """Fetch a joke and make it current. Returns True if it was applied."""
        category = category or self.state.category
        self.state.request_seq += 1
        token = self.state.request_seq
        self.state.in_flight += 1
        try:
            joke = await self.api.fetch(category)
        except JokeFetchError as exc:
            logger.warning("Error fetching %s joke: %s", category.value, exc)
            if token == self.state.request_seq:
                self.notifier.notify(FETCH_FAILED, Severity.ERROR)
            return False
        finally:
            self.state.in_flight -= 1

        if token != self.state.request_seq:
            logger.debug("Discarding stale joke %s (request %s < %s)", joke.id, token, self.state.request_seq)
            return False

        self.state.current_joke = joke
        self.state.revealed = False
        self.stats.record_view()
        logger.info("Loaded joke %s (%s)", joke.id, joke.type)
        return True

    def reveal(self) -> bool:
        if self.state.current_joke is None:
            self.notifier.notify(NO_JOKE_MESSAGE, Severity.ERROR)
            return False
        self.state.revealed = True
        return True

    def select_category(self, category: Category) -> None:
        self.state.category = category

    def toggle_favorites_panel(self) -> bool:
        self.state.favorites_open = not self.state.favorites_open
        return self.state.favorites_open

    # -- favorites --------------------------------------------------------

    def toggle_favorite(self) -> ToggleOutcome | None:
        try:
            outcome = self.favorites.toggle(self.state.current_joke)
        except NoJokeLoadedError as exc:
            self.notifier.notify(str(exc), Severity.ERROR)
            return None
        if outcome == ToggleOutcome.ADDED:
            self.notifier.notify("Added to favorites!", Severity.SUCCESS)
        else:
            self.notifier.notify("Removed from favorites!", Severity.INFO)
        return outcome

    def remove_favorite(self, joke_id: int) -> None:
        self.favorites.remove(joke_id)
        self.notifier.notify("Removed from favorites!", Severity.INFO)

    def is_current_favorite(self) -> bool:
        joke = self.state.current_joke
        return joke is not None and self.favorites.is_favorite(joke.id)

    # -- share and copy ---------------------------------------------------

    def share_current_joke(self, can_share: bool) -> schemas.ClientAction | None:
        joke = self.state.current_joke
        if joke is None:
            self.notifier.notify(NO_JOKE_MESSAGE, Severity.ERROR)
            return None
        text = f"{joke_text(joke)}\n\n{settings.share_attribution}"
        if can_share:
            return schemas.ClientAction(kind=ClientActionKind.SHARE, title=settings.share_title, text=text)
        return schemas.ClientAction(kind=ClientActionKind.CLIPBOARD, text=text)

    def copy_current_joke(self) -> schemas.ClientAction | None:
        joke = self.state.current_joke
        if joke is None:
            self.notifier.notify(NO_JOKE_MESSAGE, Severity.ERROR)
            return None
        return schemas.ClientAction(kind=ClientActionKind.CLIPBOARD, text=joke_text(joke))

    def share_result(self, outcome: ShareOutcome, text: str) -> schemas.ClientAction | None:
        if outcome == ShareOutcome.SHARED:
            self.notifier.notify("Joke shared!", Severity.SUCCESS)
        elif outcome == ShareOutcome.FAILED:
            logger.info("Platform share failed; falling back to clipboard")
            return schemas.ClientAction(kind=ClientActionKind.CLIPBOARD, text=text)
        return None

    def clipboard_result(self, ok: bool) -> None:
        if ok:
            self.notifier.notify("Copied to clipboard!", Severity.SUCCESS)
        else:
            self.notifier.notify("Failed to copy", Severity.ERROR)

    # -- keyboard ---------------------------------------------------------

    async def handle_key(self, key: str, target: str) -> None:
        if target.upper() == "BUTTON":
            return
        if key in FETCH_KEYS:
            await self.fetch_joke()
        elif key in REVEAL_KEYS:
            self.reveal()
        elif key in FAVORITE_KEYS:
            self.toggle_favorite()

    # -- view -------------------------------------------------------------

    def view(self, action: schemas.ClientAction | None = None) -> schemas.ViewResponse:
        state = self.state
        joke = state.current_joke
        joke_view = None
        if joke is not None:
            joke_view = schemas.JokeView(
                id=joke.id,
                type=joke.type,
                setup=joke.setup,
                punchline=joke.punchline if state.revealed else None,
            )
        is_favorite = self.is_current_favorite()
        counts = self.stats.current_counts()
        return schemas.ViewResponse(
            category=state.category,
            joke=joke_view,
            revealed=state.revealed,
            loading=state.loading,
            is_favorite=is_favorite,
            favorites_open=state.favorites_open,
            stats=counts,
            notification=self.notifier.current(),
            action=action,
            favorite_button_html=self.presenter.render_favorite_button(is_favorite),
            favorites_html=self.presenter.render_favorites_list(self.favorites.items),
            stats_html=self.presenter.render_stats(counts),
        )
