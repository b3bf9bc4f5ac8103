import json
import logging
import re
from typing import Any, Callable, Optional, Union

import httpx
from pydantic import ValidationError

from config import API_KEY_SENTINEL
from fallback import FALLBACK_MOVIES
from models import MovieDetail, MovieSummary

logger = logging.getLogger(__name__)

TMDB_BASE = "https://api.themoviedb.org/3"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

FallbackHook = Callable[[str, Optional[Exception]], None]


class MalformedPayload(ValueError):
    """The catalog answered 2xx but the body is not the expected shape."""


REMOTE_ERRORS = (httpx.HTTPError, json.JSONDecodeError, ValidationError, MalformedPayload)


def parse_movie_id(movie_id: Union[int, str]) -> Optional[int]:
    """Read the leading integer of a route id ("12", " 12abc" -> 12), or None."""
    match = _LEADING_INT.match(str(movie_id))
    return int(match.group(1)) if match else None


def fallback_movies() -> list[MovieSummary]:
    return [MovieSummary.model_validate(record) for record in FALLBACK_MOVIES]


def fallback_search(query: str) -> list[MovieSummary]:
    needle = query.lower()
    return [movie for movie in fallback_movies() if needle in movie.title.lower()]


def fallback_detail(movie_id: Union[int, str], default_to_first: bool = True) -> Optional[MovieDetail]:
    wanted = parse_movie_id(movie_id)
    for record in FALLBACK_MOVIES:
        if record["id"] == wanted:
            return MovieDetail.model_validate(record)
    if default_to_first:
        return MovieDetail.model_validate(FALLBACK_MOVIES[0])
    return None


class CatalogClient:
    """Read-only TMDB movie catalog.

    Every operation makes at most one remote attempt. A missing API key,
    transport error, non-2xx status or malformed body is never raised to the
    caller: the fixed fallback dataset is served instead, and ``on_fallback``
    (if given) is told which operation fell back and why.
    """

    def __init__(
        self,
        api_key: Optional[str],
        *,
        base_url: str = TMDB_BASE,
        language: str = "en-US",
        timeout: float = 10.0,
        http: Optional[httpx.AsyncClient] = None,
        on_fallback: Optional[FallbackHook] = None,
        default_to_first: bool = True,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.language = language
        self.timeout = timeout
        self.default_to_first = default_to_first
        self._http = http
        self._on_fallback = on_fallback

    @property
    def configured(self) -> bool:
        return bool(self.api_key) and self.api_key != API_KEY_SENTINEL

    async def list_popular(self, page: int = 1) -> list[MovieSummary]:
        if not self.configured:
            self._fell_back("list_popular")
            return fallback_movies()
        try:
            return await self._get_results("/movie/popular", {"page": page})
        except REMOTE_ERRORS as exc:
            self._fell_back("list_popular", exc)
            return fallback_movies()

    async def search(self, query: str, page: int = 1) -> list[MovieSummary]:
        if not query.strip():
            return []
        if not self.configured:
            self._fell_back("search")
            return fallback_search(query)
        try:
            return await self._get_results("/search/movie", {"query": query, "page": page})
        except REMOTE_ERRORS as exc:
            self._fell_back("search", exc)
            return fallback_search(query)

    async def get_by_id(self, movie_id: Union[int, str]) -> Optional[MovieDetail]:
        """Fetch one movie. Unknown ids in fallback mode resolve to the first
        fallback record unless ``default_to_first`` is off, then to None."""
        if not self.configured:
            self._fell_back("get_by_id")
            return fallback_detail(movie_id, self.default_to_first)
        try:
            payload = await self._get(f"/movie/{movie_id}", {})
            if not isinstance(payload, dict):
                raise MalformedPayload(f"movie {movie_id} response is not an object")
            return MovieDetail.model_validate(payload)
        except REMOTE_ERRORS as exc:
            self._fell_back("get_by_id", exc)
            return fallback_detail(movie_id, self.default_to_first)

    async def _get(self, path: str, params: dict[str, Any]) -> Any:
        query = {"api_key": self.api_key, "language": self.language, **params}
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
        url = f"{self.base_url}{path}"
        if self._http is not None:
            response = await self._http.get(url, params=query, headers=headers)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, params=query, headers=headers)
        response.raise_for_status()
        return response.json()

    async def _get_results(self, path: str, params: dict[str, Any]) -> list[MovieSummary]:
        payload = await self._get(path, params)
        results = payload.get("results") if isinstance(payload, dict) else None
        if not isinstance(results, list):
            raise MalformedPayload(f"{path} response has no results list")
        return [MovieSummary.model_validate(item) for item in results]

    def _fell_back(self, operation: str, error: Optional[Exception] = None) -> None:
        if error is None:
            logger.warning("TMDB API key not configured, serving fallback data for %s", operation)
        else:
            logger.warning("TMDB %s failed, serving fallback data: %s", operation, error)
        if self._on_fallback is not None:
            self._on_fallback(operation, error)
