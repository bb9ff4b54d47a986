import time
from typing import Callable

from jokebox import schemas
from jokebox.config import settings
from jokebox.models import Severity


class Notifier:
    """Holds at most one toast; a new one replaces the current one."""

    def __init__(
        self,
        duration: float = settings.notification_seconds,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.duration = duration
        self.clock = clock
        self._current: schemas.Notification | None = None
        self._expires_at = 0.0
        self._issued = 0

    def notify(self, message: str, severity: Severity = Severity.SUCCESS) -> schemas.Notification:
        self._issued += 1
        self._current = schemas.Notification(id=self._issued, message=message, severity=severity)
        self._expires_at = self.clock() + self.duration
        return self._current

    def current(self) -> schemas.Notification | None:
        if self._current is not None and self.clock() >= self._expires_at:
            self._current = None
        return self._current
