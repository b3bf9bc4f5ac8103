import logging
from typing import Annotated, Awaitable, Callable, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from catalog import CatalogClient
from debounce import Debouncer
from models import MovieDetail, MovieSummary

logger = logging.getLogger(__name__)

LOAD_ERROR = "Failed to load movies. Please try again later."
SEARCH_ERROR = "Failed to search movies. Please try again."
DETAIL_ERROR = "Failed to load movie details. Please try again."
NOT_FOUND = "Movie not found"


class Loading(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["loading"] = "loading"


class ListReady(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["ready"] = "ready"
    movies: list[MovieSummary] = Field(default_factory=list)
    searching: bool = False
    query: str = ""


class ListError(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    message: str
    movies: list[MovieSummary] = Field(default_factory=list)  # stale results shown under the banner


class DetailReady(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["ready"] = "ready"
    movie: MovieDetail


class DetailError(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    message: str


class NotFound(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["not_found"] = "not_found"
    message: str = NOT_FOUND


ListState = Annotated[Union[Loading, ListReady, ListError], Field(discriminator="kind")]
DetailState = Annotated[
    Union[Loading, DetailReady, DetailError, NotFound], Field(discriminator="kind")
]
StateListener = Callable[[BaseModel], Awaitable[None]]


class _View:
    """Holds the current state and the request generation counter.

    Every request takes a new generation; a response is applied only if its
    generation is still the latest, so a slow stale response is dropped.
    """

    def __init__(self, catalog: CatalogClient, on_change: Optional[StateListener] = None) -> None:
        self.catalog = catalog
        self.on_change = on_change
        self.state: BaseModel = Loading()
        self._generation = 0

    async def _begin(self) -> int:
        self._generation += 1
        generation = self._generation
        await self._transition(Loading())
        return generation

    async def _settle(self, generation: int, state: BaseModel) -> bool:
        if generation != self._generation:
            logger.debug(
                "Dropping stale %s response (generation %d, current %d)",
                type(self).__name__,
                generation,
                self._generation,
            )
            return False
        await self._transition(state)
        return True

    async def _transition(self, state: BaseModel) -> None:
        self.state = state
        if self.on_change is not None:
            await self.on_change(state)


class ListView(_View):
    """Popular movies plus debounced title search."""

    state: ListState

    def __init__(
        self,
        catalog: CatalogClient,
        *,
        debounce_seconds: float = 0.5,
        on_change: Optional[StateListener] = None,
    ) -> None:
        super().__init__(catalog, on_change)
        self.query = ""
        self.searching = False
        self._movies: list[MovieSummary] = []
        self._debouncer = Debouncer(debounce_seconds, self._search)

    @property
    def search_pending(self) -> bool:
        return self._debouncer.pending

    async def enter(self) -> None:
        await self._load_popular()

    def resume_search(self, query: str) -> None:
        """Pick up a page that was already rendered with search results for
        ``query``, so clearing the box later goes back to popular movies."""
        self.query = query
        self.searching = bool(query.strip())

    async def set_query(self, text: str) -> None:
        self.query = text
        if text.strip():
            self._debouncer.trigger(text)
            return
        self._debouncer.cancel()
        if self.searching:
            self.searching = False
            await self._load_popular()

    async def submit(self) -> None:
        """Search right away with the current text, skipping the debounce."""
        self._debouncer.cancel()
        await self._search(self.query)

    def select(self, movie_id: int) -> str:
        return f"/movie/{movie_id}"

    def close(self) -> None:
        self._debouncer.cancel_all()

    async def _load_popular(self) -> None:
        generation = await self._begin()
        try:
            movies = await self.catalog.list_popular()
        except Exception:
            logger.exception("Error loading popular movies")
            await self._settle(generation, ListError(message=LOAD_ERROR, movies=self._movies))
            return
        await self._settle_movies(generation, ListReady(movies=movies))

    async def _search(self, query: str) -> None:
        self.searching = True
        generation = await self._begin()
        try:
            movies = await self.catalog.search(query)
        except Exception:
            logger.exception("Error searching movies for %r", query)
            await self._settle(generation, ListError(message=SEARCH_ERROR, movies=self._movies))
            return
        await self._settle_movies(
            generation, ListReady(movies=movies, searching=True, query=query)
        )

    async def _settle_movies(self, generation: int, state: ListReady) -> None:
        if generation == self._generation:
            self._movies = state.movies
        await self._settle(generation, state)


class DetailView(_View):
    """Single movie keyed by the route id."""

    state: DetailState

    def __init__(self, catalog: CatalogClient, *, on_change: Optional[StateListener] = None) -> None:
        super().__init__(catalog, on_change)
        self.movie_id: Optional[Union[int, str]] = None

    async def navigate(self, movie_id: Union[int, str]) -> None:
        if movie_id != self.movie_id:
            await self.load(movie_id)

    async def load(self, movie_id: Union[int, str]) -> None:
        self.movie_id = movie_id
        generation = await self._begin()
        try:
            movie = await self.catalog.get_by_id(movie_id)
        except Exception:
            logger.exception("Error loading movie details for %s", movie_id)
            await self._settle(generation, DetailError(message=DETAIL_ERROR))
            return
        state = DetailReady(movie=movie) if movie is not None else NotFound()
        await self._settle(generation, state)
