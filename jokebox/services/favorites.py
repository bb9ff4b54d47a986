import json
import logging

from pydantic import ValidationError

from jokebox import schemas
from jokebox.core.errors import NoJokeLoadedError
from jokebox.models import ToggleOutcome
from jokebox.services.storage import BrowserStorage

logger = logging.getLogger(__name__)

FAVORITES_KEY = "favorites"


def load_favorites(raw: str | None) -> list[schemas.Joke]:
    """Parse the stored favorites array, treating anything unreadable as empty."""
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except ValueError:
        logger.warning("Stored favorites are not valid JSON; starting empty")
        return []
    if not isinstance(data, list):
        logger.warning("Stored favorites are not a list; starting empty")
        return []

    favorites: list[schemas.Joke] = []
    seen: set[int] = set()
    for entry in data:
        try:
            joke = schemas.Joke.model_validate(entry)
        except ValidationError:
            logger.warning("Dropping unreadable favorite entry")
            continue
        if joke.id in seen:
            continue
        seen.add(joke.id)
        favorites.append(joke)
    return favorites


def dump_favorites(favorites: list[schemas.Joke]) -> str:
    return json.dumps([joke.model_dump() for joke in favorites])


class FavoritesStore:
    def __init__(self, storage: BrowserStorage):
        self.storage = storage
        self._items = load_favorites(storage.get_item(FAVORITES_KEY))

    @property
    def items(self) -> list[schemas.Joke]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def is_favorite(self, joke_id: int) -> bool:
        return any(fav.id == joke_id for fav in self._items)

    def toggle(self, joke: schemas.Joke | None) -> ToggleOutcome:
        if joke is None:
            raise NoJokeLoadedError()
        if self.is_favorite(joke.id):
            self._items = [fav for fav in self._items if fav.id != joke.id]
            outcome = ToggleOutcome.REMOVED
        else:
            self._items.append(joke)
            outcome = ToggleOutcome.ADDED
        self._save()
        return outcome

    def remove(self, joke_id: int) -> None:
        self._items = [fav for fav in self._items if fav.id != joke_id]
        self._save()

    def _save(self) -> None:
        self.storage.set_item(FAVORITES_KEY, dump_favorites(self._items))
