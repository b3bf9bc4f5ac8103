import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import httpx
from fastapi import Depends, FastAPI, HTTPException, Query, WebSocket, WebSocketDisconnect
from fastapi.requests import HTTPConnection, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from catalog import CatalogClient
from config import settings
from formatting import format_date, format_money, format_rating, format_runtime, image_url, release_year
from models import MovieDetail, MovieSummary
from views import DetailError, DetailView, ListError, ListReady, ListView, NotFound

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent

templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))
templates.env.filters.update(
    image_url=image_url,
    format_date=format_date,
    format_rating=format_rating,
    format_money=format_money,
    format_runtime=format_runtime,
    release_year=release_year,
)


def build_catalog(http: Optional[httpx.AsyncClient] = None) -> CatalogClient:
    return CatalogClient(
        settings.tmdb_api_key,
        base_url=settings.tmdb_base_url,
        language=settings.tmdb_language,
        timeout=settings.request_timeout,
        http=http,
        default_to_first=settings.fallback_default_to_first,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with httpx.AsyncClient(timeout=settings.request_timeout) as http:
        app.state.catalog = build_catalog(http)
        if not app.state.catalog.configured:
            logger.warning("TMDB_API_KEY is not set, all pages will show fallback movies")
        yield


app = FastAPI(lifespan=lifespan)
app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")


def get_catalog(connection: HTTPConnection) -> CatalogClient:
    return connection.app.state.catalog


def _render_grid(movies: list[MovieSummary]) -> str:
    return templates.env.get_template("partials/movie_grid.html").render(movies=movies)


def _list_message(state: BaseModel) -> dict:
    message = {
        "state": state.kind,
        "searching": False,
        "query": "",
        "count": 0,
        "message": None,
        "html": "",
    }
    if isinstance(state, (ListReady, ListError)):
        message["count"] = len(state.movies)
        message["html"] = _render_grid(state.movies)
    if isinstance(state, ListReady):
        message["searching"] = state.searching
        message["query"] = state.query
    if isinstance(state, ListError):
        message["message"] = state.message
    return message


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    q: str = "",
    catalog: CatalogClient = Depends(get_catalog),
):
    view = ListView(catalog)
    if q.strip():
        view.query = q
        await view.submit()
    else:
        await view.enter()
    return templates.TemplateResponse(
        request,
        "index.html",
        {"state": view.state, "query": q, "movies": getattr(view.state, "movies", [])},
    )


@app.get("/movie/{movie_id}", response_class=HTMLResponse)
async def movie_detail(
    request: Request,
    movie_id: str,
    catalog: CatalogClient = Depends(get_catalog),
):
    view = DetailView(catalog)
    await view.navigate(movie_id)
    status_code = 200
    if isinstance(view.state, NotFound):
        status_code = 404
    elif isinstance(view.state, DetailError):
        status_code = 500
    return templates.TemplateResponse(
        request,
        "movie.html",
        {"state": view.state},
        status_code=status_code,
    )


@app.get("/api/movies/popular", response_model=list[MovieSummary])
async def api_popular(
    page: int = Query(default=1, ge=1),
    catalog: CatalogClient = Depends(get_catalog),
):
    return await catalog.list_popular(page)


@app.get("/api/movies/search", response_model=list[MovieSummary])
async def api_search(
    q: str = "",
    page: int = Query(default=1, ge=1),
    catalog: CatalogClient = Depends(get_catalog),
):
    return await catalog.search(q, page)


@app.get("/api/movies/{movie_id}", response_model=MovieDetail)
async def api_movie(movie_id: str, catalog: CatalogClient = Depends(get_catalog)):
    movie = await catalog.get_by_id(movie_id)
    if movie is None:
        raise HTTPException(status_code=404, detail="Movie not found")
    return movie


@app.websocket("/ws/search")
async def live_search(
    websocket: WebSocket,
    q: str = "",
    catalog: CatalogClient = Depends(get_catalog),
):
    await websocket.accept()

    async def push(state: BaseModel) -> None:
        await websocket.send_json(_list_message(state))

    view = ListView(
        catalog,
        debounce_seconds=settings.search_debounce_ms / 1000,
        on_change=push,
    )
    view.resume_search(q)
    try:
        while True:
            await view.set_query(await websocket.receive_text())
    except WebSocketDisconnect:
        logger.debug("Live search client disconnected")
    finally:
        view.close()
