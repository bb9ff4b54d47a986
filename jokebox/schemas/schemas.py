from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from jokebox.models import Category, ClientActionKind, Severity, ShareOutcome


class Joke(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    type: str = ""
    setup: str = Field(min_length=1)
    punchline: str = ""


class JokeView(BaseModel):
    id: int
    type: str
    setup: str
    # Hidden until the punchline is revealed
    punchline: Optional[str] = None


class Counts(BaseModel):
    viewed: int
    favorites_count: int


class Notification(BaseModel):
    id: int
    message: str
    severity: Severity = Severity.SUCCESS


class ClientAction(BaseModel):
    kind: ClientActionKind
    text: str
    title: Optional[str] = None


class ViewResponse(BaseModel):
    category: Category
    joke: Optional[JokeView] = None
    revealed: bool = False
    loading: bool = False
    is_favorite: bool = False
    favorites_open: bool = False
    stats: Counts
    notification: Optional[Notification] = None
    action: Optional[ClientAction] = None
    favorite_button_html: str
    favorites_html: str
    stats_html: str


class CategoryRequest(BaseModel):
    category: Category


class ShareRequest(BaseModel):
    can_share: bool = False


class ShareResultRequest(BaseModel):
    outcome: ShareOutcome
    text: str


class ClipboardResultRequest(BaseModel):
    ok: bool


class KeyPress(BaseModel):
    key: str = Field(min_length=1)
    # Tag name of the focused element, e.g. "BUTTON" or "BODY"
    target: str = "BODY"
