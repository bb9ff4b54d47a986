from jokebox import schemas
from jokebox.services.favorites import FavoritesStore
from jokebox.services.stats import VIEWED_KEY, StatsCounter


def test_record_view_persists_counter(storage):
    stats = StatsCounter(storage, FavoritesStore(storage))
    stats.record_view()
    stats.record_view()
    assert storage.get_item(VIEWED_KEY) == "2"
    assert StatsCounter(storage, FavoritesStore(storage)).viewed == 2


def test_counts_include_favorites(storage):
    favorites = FavoritesStore(storage)
    favorites.toggle(schemas.Joke(id=1, type="general", setup="S", punchline="P"))
    stats = StatsCounter(storage, favorites)
    assert stats.current_counts() == schemas.Counts(viewed=0, favorites_count=1)


def test_corrupt_counter_starts_at_zero(storage):
    storage.set_item(VIEWED_KEY, "lots")
    assert StatsCounter(storage, FavoritesStore(storage)).viewed == 0

    storage.set_item(VIEWED_KEY, "-4")
    assert StatsCounter(storage, FavoritesStore(storage)).viewed == 0
