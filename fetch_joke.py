"""Simple helper to fetch one joke from the official joke API.

Usage: python fetch_joke.py [random|general|programming|knock-knock|dad]
"""

import sys

import requests

from jokebox.config import settings
from jokebox.core.errors import JokeFetchError
from jokebox.models import Category
from jokebox.services.joke_api import build_url, normalize_payload


def fetch_joke(category: Category = Category.RANDOM) -> dict:
    """Call the public API and return the normalized joke, or an error entry."""
    url = build_url(settings.joke_api_base_url, category)
    try:
        response = requests.get(url, timeout=settings.request_timeout)
        response.raise_for_status()
        joke = normalize_payload(response.json(), category)
    except (requests.RequestException, ValueError, JokeFetchError) as exc:
        return {"error": str(exc)}
    return joke.model_dump()


if __name__ == "__main__":
    category = Category(sys.argv[1]) if len(sys.argv) > 1 else Category.RANDOM
    joke = fetch_joke(category)
    if "error" in joke:
        print(joke["error"], file=sys.stderr)
        sys.exit(1)
    print(f"{joke['setup']}\n\n{joke['punchline']}")
