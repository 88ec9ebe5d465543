import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query, Request
from pydantic import BaseModel

from src.catalog import CatalogLoadError, load_catalog_async
from src.config import PATHS, SHOWCASE
from src.core.bookmarks import BookmarkStore
from src.core.contracts import ProjectCard
from src.core.ratings import RatingBook
from src.core.sorting import SORT_MODES
from src.core.storage import JsonFileStore
from src.markdown_preview import render_markdown
from src.showcase import LOAD_ERROR_MESSAGE, ShowcaseApp

logger = logging.getLogger(__name__)


async def build_showcase() -> ShowcaseApp:
    loaded = await load_catalog_async(PATHS.manifest, PATHS.legacy_catalog, timeout=SHOWCASE.http_timeout)
    store = JsonFileStore(PATHS.state_file)
    return ShowcaseApp(
        loaded.projects,
        ratings=RatingBook(store, key=SHOWCASE.ratings_key),
        bookmarks=BookmarkStore(store, key=SHOWCASE.bookmarks_key),
        config=SHOWCASE,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        app.state.showcase = await build_showcase()
    except CatalogLoadError as exc:
        logger.error("Catalog unavailable, serving 503 for project routes: %s", exc)
        app.state.showcase = None
    yield


app = FastAPI(
    title="OpenPlayground Showcase API",
    description="Read-only JSON access to the project catalog and its filter/sort/page pipeline.",
    version="1.0.0",
    lifespan=lifespan,
)


# Pydantic models for responses
class ProjectOut(BaseModel):
    title: str
    link: str
    category: str
    description: Optional[str] = None
    tech: List[str] = []
    icon: Optional[str] = None
    coverStyle: Optional[str] = None
    coverClass: Optional[str] = None


class ProjectCardOut(BaseModel):
    project: ProjectOut
    rating_average: float
    rating_count: int
    rating_label: str
    stars: List[str]
    category_label: str
    source_url: str


class ProjectPage(BaseModel):
    items: List[ProjectCardOut]
    page: int
    total_pages: int
    total_items: int
    sort: str
    pagination: List[int | str]


class MarkdownRequest(BaseModel):
    text: str


def _showcase(request: Request) -> ShowcaseApp:
    showcase = getattr(request.app.state, "showcase", None)
    if showcase is None:
        raise HTTPException(status_code=503, detail=LOAD_ERROR_MESSAGE)
    return showcase


def _card_out(card: ProjectCard) -> ProjectCardOut:
    return ProjectCardOut(
        project=ProjectOut(**card.project.to_dict()),
        rating_average=card.rating.average,
        rating_count=card.rating.count,
        rating_label=card.rating_label,
        stars=list(card.stars),
        category_label=card.category_label,
        source_url=card.source_url,
    )


@app.get("/projects", response_model=ProjectPage, summary="Filtered, sorted page of projects")
def list_projects(
    request: Request,
    q: str = "",
    category: str = "all",
    sort: str = "default",
    page: int = Query(1, ge=1),
):
    """
    Runs the same pipeline as the UI: category + search filter, sort, then the
    requested page. Pages past the end are clamped to the last page.
    """
    if sort not in SORT_MODES:
        raise HTTPException(status_code=422, detail=f"Unknown sort mode {sort!r}. Expected one of {list(SORT_MODES)}.")

    source = _showcase(request)
    # Fresh view per request; the shared instance only supplies data and stores.
    view_app = ShowcaseApp(
        source.projects,
        ratings=source.ratings,
        bookmarks=source.bookmarks,
        config=source.config,
    )
    view_app.set_search_query(q)
    view_app.set_category(category)
    view_app.set_sort_mode(sort)
    view_app.go_to_page(page)
    view = view_app.render()

    return ProjectPage(
        items=[_card_out(c) for c in view.items],
        page=view.page,
        total_pages=view.total_pages,
        total_items=view.total_items,
        sort=view.sort_mode,
        pagination=view.pagination,
    )


@app.get("/projects/random", response_model=ProjectOut, summary="A random project")
def random_project(request: Request):
    project = _showcase(request).random_project()
    if project is None:
        raise HTTPException(status_code=404, detail="No projects available.")
    return ProjectOut(**project.to_dict())


@app.get("/categories", summary="Known categories")
def categories(request: Request):
    return {"categories": _showcase(request).categories()}


@app.post("/markdown/preview", summary="Render Markdown to HTML")
def markdown_preview(body: MarkdownRequest):
    return {"html": render_markdown(body.text)}


@app.get("/health", summary="Health check", response_description="API health status")
async def health_check(request: Request):
    """
    Checks the health of the API and whether the catalog loaded.
    """
    showcase = getattr(request.app.state, "showcase", None)
    return {"status": "ok", "projects": len(showcase.projects) if showcase else 0}

# To run this API:
# uvicorn api.main:app --reload --port 8000
# Then access http://127.0.0.1:8000/docs for Swagger UI
