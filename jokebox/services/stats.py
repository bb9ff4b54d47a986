import logging

from jokebox import schemas
from jokebox.services.favorites import FavoritesStore
from jokebox.services.storage import BrowserStorage

logger = logging.getLogger(__name__)

VIEWED_KEY = "jokesViewed"


def _parse_count(raw: str | None) -> int:
    if raw is None:
        return 0
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning("Stored view counter %r is not a number; starting at 0", raw)
        return 0
    return max(value, 0)


class StatsCounter:
    def __init__(self, storage: BrowserStorage, favorites: FavoritesStore):
        self.storage = storage
        self.favorites = favorites
        self.viewed = _parse_count(storage.get_item(VIEWED_KEY))

    def record_view(self) -> int:
        self.viewed += 1
        self.storage.set_item(VIEWED_KEY, str(self.viewed))
        return self.viewed

    def current_counts(self) -> schemas.Counts:
        return schemas.Counts(viewed=self.viewed, favorites_count=len(self.favorites))
