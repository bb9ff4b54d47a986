from sqlalchemy.orm import Session, sessionmaker

from jokebox.models import StorageItem


class BrowserStorage:
    """String key/value store scoped to one browser, like ``localStorage``.

    Every call opens its own short session and writes are committed before
    returning.
    """

    def __init__(self, session_factory: sessionmaker, client_id: str):
        self.session_factory = session_factory
        self.client_id = client_id

    def _find(self, db: Session, key: str) -> StorageItem | None:
        return (
            db.query(StorageItem)
            .filter(StorageItem.client_id == self.client_id, StorageItem.key == key)
            .first()
        )

    def get_item(self, key: str) -> str | None:
        with self.session_factory() as db:
            item = self._find(db, key)
            return item.value if item else None

    def set_item(self, key: str, value: str) -> None:
        with self.session_factory() as db:
            item = self._find(db, key)
            if item:
                item.value = value
            else:
                db.add(StorageItem(client_id=self.client_id, key=key, value=value))
            db.commit()
