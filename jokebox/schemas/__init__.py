from jokebox.schemas.schemas import (
    CategoryRequest,
    ClientAction,
    ClipboardResultRequest,
    Counts,
    Joke,
    JokeView,
    KeyPress,
    Notification,
    ShareRequest,
    ShareResultRequest,
    ViewResponse,
)

__all__ = [
    "CategoryRequest",
    "ClientAction",
    "ClipboardResultRequest",
    "Counts",
    "Joke",
    "JokeView",
    "KeyPress",
    "Notification",
    "ShareRequest",
    "ShareResultRequest",
    "ViewResponse",
]
