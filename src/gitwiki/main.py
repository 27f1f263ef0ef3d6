"""GitWiki FastAPI application."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from gitwiki.config import Settings, settings
from gitwiki.core.exceptions import PageNotFound
from gitwiki.core.parser import extract_wiki_words
from gitwiki.core.store import PageStore

logger = logging.getLogger(__name__)


def open_store(config: Settings) -> PageStore:
    """Open the configured git repository and wrap it in a page store."""
    from git import Actor

    from gitwiki.core.gitrepo import GitRepository

    repository = GitRepository(
        config.repo_dir,
        create=config.create_repo,
        author=Actor(config.author_name, config.author_email),
    )
    logger.info("Serving wiki from %s", repository.working_dir)
    return PageStore(repository, config)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open the page store unless one is injected."""
    if getattr(app.state, "store", None) is None:
        app.state.store = open_store(settings)
    yield


# Initialize app
app = FastAPI(
    title=settings.app_title,
    debug=settings.debug,
    lifespan=lifespan,
)

# Setup templates
templates_path = Path(__file__).parent / "templates"
templates = Jinja2Templates(directory=str(templates_path))


def get_store(request: Request) -> PageStore:
    """Page store bound to the running application."""
    return request.app.state.store


# Template context helper
def get_context(request: Request, store: PageStore, **kwargs) -> dict:
    """Create base context for templates."""
    return {
        "request": request,
        "app_title": store.config.app_title,
        "homepage": store.config.homepage,
        **kwargs,
    }


@app.exception_handler(PageNotFound)
async def page_not_found(request: Request, exc: PageNotFound):
    """Missing pages are created through the editor."""
    return RedirectResponse(url=f"/{exc.name}/edit", status_code=302)


@app.get("/")
async def index(store: PageStore = Depends(get_store)):
    """Redirect to the homepage."""
    return RedirectResponse(url=f"/{store.config.homepage}", status_code=302)


@app.get("/pages", response_class=HTMLResponse)
async def list_pages(request: Request, store: PageStore = Depends(get_store)):
    """List all pages."""
    pages = store.find_all()
    return templates.TemplateResponse(
        request,
        "list.html",
        get_context(request, store, title="Listing pages", pages=pages),
    )


@app.get("/{name}/edit", response_class=HTMLResponse)
async def edit_page(
    request: Request, name: str, store: PageStore = Depends(get_store)
):
    """Edit page form."""
    page = store.find_or_create(name)
    return templates.TemplateResponse(
        request,
        "edit.html",
        get_context(request, store, title=f"Editing {page.name}", page=page),
    )


@app.get("/{name}", response_class=HTMLResponse)
async def view_page(
    request: Request, name: str, store: PageStore = Depends(get_store)
):
    """View a wiki page."""
    page = store.find(name)
    references = [
        (word, store.classify(word).value)
        for word in extract_wiki_words(page.content)
    ]
    return templates.TemplateResponse(
        request,
        "show.html",
        get_context(
            request,
            store,
            title=page.name,
            page=page,
            html_content=page.to_html(),
            references=references,
        ),
    )


@app.post("/{name}")
async def save_page(
    name: str, body: str = Form(""), store: PageStore = Depends(get_store)
):
    """Save page content and show the page."""
    page = store.find_or_create(name)
    page.update_content(body)
    return RedirectResponse(url=f"/{page}", status_code=302)
