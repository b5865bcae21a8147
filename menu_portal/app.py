import asyncio
import contextlib
import functools
import logging
from typing import Any, Awaitable, Callable

from jinja2 import Environment, FileSystemLoader, select_autoescape
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse
from starlette.routing import Route, WebSocketRoute
from starlette.websockets import WebSocket, WebSocketDisconnect

from menu_portal import config
from menu_portal.domain.catalog import CATALOG
from menu_portal.domain.generation import GenerationClient, connect
from menu_portal.html.portal import Portal
from menu_portal.renderer import MenuRenderer


logger = logging.getLogger(__name__)


CONFIG = config.Config()


TEMPLATES = Environment(
    loader=FileSystemLoader(CONFIG.html_dir),
    autoescape=select_autoescape(),
)


def aHTMLResponse(route: Callable[..., Awaitable[str | tuple[str, int]]]):
    @functools.wraps(route)
    async def wrapper(*args: Any, **kwargs: Any) -> HTMLResponse:
        resp = await route(*args, **kwargs)
        if not isinstance(resp, tuple):
            html, code = resp, 200
        else:
            html, code = resp
        return HTMLResponse(html, status_code=code)

    return wrapper


@contextlib.asynccontextmanager
async def lifespan(app: Starlette):
    config.configure_logging(CONFIG.log_level)
    app.state.client = connect(CONFIG)
    yield
    if isinstance(app.state.client, GenerationClient):
        await app.state.client.close()


@aHTMLResponse
async def homepage(request: Request) -> str:
    return TEMPLATES.get_template("index.html").render(
        title="Catering Menu",
        mount_id=CONFIG.mount_id,
    )


async def menu(ws: WebSocket) -> None:
    """Renders the menu into the page's mount point, then streams the patches."""
    await ws.accept()

    fragments: asyncio.Queue[str] = asyncio.Queue()
    portal_id = ws.query_params.get("portal")
    portal = (
        Portal(CONFIG.mount_id, environment=TEMPLATES, publish=fragments.put_nowait)
        if portal_id == CONFIG.mount_id
        else None
    )
    if portal is None:
        logger.warning("Page asked for unknown mount point %r.", portal_id)

    renderer = MenuRenderer(CATALOG, ws.app.state.client)
    pending = set(renderer.render_menu(portal))

    try:
        while True:
            while not fragments.empty():
                await ws.send_text(fragments.get_nowait())
            if not pending:
                break
            _, pending = await asyncio.wait(
                pending, return_when=asyncio.FIRST_COMPLETED
            )
    except WebSocketDisconnect:
        logger.info("Page went away with %d generations in flight.", len(pending))
        return

    await ws.close()


app = Starlette(
    debug=True if CONFIG.env == config.Env.local else False,
    routes=[
        Route("/", homepage),
        WebSocketRoute("/menu", menu),
    ],
    lifespan=lifespan,
)
