"""Client for the official joke API.

Two endpoint shapes are used: ``/random_joke`` for an unscoped joke and
``/jokes/{category}/random`` for a category-scoped one. The scoped endpoint
wraps its record in a one-element array, so :func:`normalize_payload`
accepts both shapes.
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from jokebox import schemas
from jokebox.config import settings
from jokebox.core.errors import InvalidJokeError, JokeFetchError
from jokebox.models import Category

logger = logging.getLogger(__name__)


def build_url(base_url: str, category: Category) -> str:
    base_url = base_url.rstrip("/")
    if category == Category.RANDOM:
        return f"{base_url}/random_joke"
    return f"{base_url}/jokes/{category.value}/random"


def normalize_payload(data: Any, category: Category) -> schemas.Joke:
    """Turn a provider response body into a :class:`schemas.Joke`.

    A list is reduced to its first element. A missing ``type`` falls back to
    the requested category.
    """
    if isinstance(data, list):
        data = data[0] if data else None
    if not isinstance(data, dict) or not data.get("setup"):
        raise InvalidJokeError("Invalid joke data")
    record = dict(data)
    if not record.get("type"):
        record["type"] = category.value
    try:
        return schemas.Joke.model_validate(record)
    except ValidationError as exc:
        raise InvalidJokeError(f"Invalid joke data: {exc.error_count()} field error(s)") from exc


class JokeApiClient:
    def __init__(
        self,
        base_url: str = settings.joke_api_base_url,
        timeout: float | None = settings.request_timeout,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    async def fetch(self, category: Category) -> schemas.Joke:
        url = build_url(self.base_url, category)
        logger.debug("Requesting joke from %s", url)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as exc:
            raise JokeFetchError(str(exc)) from exc
        except ValueError as exc:
            raise InvalidJokeError("Response body is not JSON") from exc
        return normalize_payload(data, category)
