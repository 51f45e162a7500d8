"""SK-27 Landing Page: FastAPI Application.

This module is the single entry point for the web application.  It defines
the FastAPI ``app`` instance, all routes, and the ``main()`` CLI function
that launches the uvicorn server.

Architecture
------------
- **The HTML page** is rendered on the server from a fresh
  :class:`~sk27.ui.state.PageSession` for every request, so it always
  reflects the initial state: splash up, dark theme, first FAQ entry open,
  image slots loading, reveal targets hidden except the hero copy.
- **Image generation** runs server-side through
  :class:`~sk27.core.image_fetch.ImageFetchAdapter`, keeping the API
  credential off the client.  The browser asks for each slot through
  ``GET /api/slots/{slot_id}``.  Only the slot ids declared in
  :data:`~sk27.core.content.IMAGE_SLOTS` are accepted, so arbitrary prompts
  cannot be relayed.
- **Static assets** (CSS, JS) are served by FastAPI's ``StaticFiles``.

Endpoints
---------
========  ============================  ====================================
Method    Path                          Purpose
========  ============================  ====================================
GET       ``/``                         Server-rendered landing page
GET       ``/api/config``               Timings, nav links, FAQ, slot ids
GET       ``/api/slots/{slot_id}``      Mount one image slot and settle it
========  ============================  ====================================

Usage
-----
CLI (installed entry point)::

    sk27

Direct invocation::

    python -m sk27.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from sk27 import __version__
from sk27.api.models import FaqModel, NavLinkModel, PageConfigResponse, SlotResponse
from sk27.core.config import config
from sk27.core.content import FAQS, IMAGE_SLOTS, NAV_LINKS
from sk27.core.image_fetch import ImageFetchAdapter
from sk27.ui.components import image_slot
from sk27.ui.image_slot import DeferredImageSlot
from sk27.ui.sections import build_reveal_targets, render_page
from sk27.ui.state import PageSession

logger = logging.getLogger(__name__)

STATIC_DIR: Path = config.static_dir

# ---------------------------------------------------------------------------
# Application lifecycle: image adapter setup.
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the shared :class:`ImageFetchAdapter` on startup.

    The Gemini client inside the adapter is created lazily on the first
    slot request, so startup succeeds even without a credential.  Slots
    then settle as unavailable.
    """
    app.state.image_fetcher = ImageFetchAdapter(config)
    if config.api_key is None:
        logger.warning("No image service credential configured; image slots will fall back.")
    logger.info("ImageFetchAdapter initialised (model=%s).", config.image_model)

    yield

    logger.info("Shutting down.")


app = FastAPI(
    title="SK-27 Gym",
    description="One-page landing site for SK-27 GYM, Hauz Khas Village.",
    version=__version__,
    lifespan=lifespan,
)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@app.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    """Render the landing page in its initial state."""
    session = PageSession(config, app.state.image_fetcher, targets=build_reveal_targets())
    return HTMLResponse(content=render_page(session))


@app.get("/api/config", response_model=PageConfigResponse)
async def get_config() -> PageConfigResponse:
    """Return the timings and content ids the browser script needs."""
    return PageConfigResponse(
        version=__version__,
        splash_duration_ms=config.splash_duration_ms,
        reveal_settle_ms=config.reveal_settle_ms,
        reveal_threshold=config.reveal_threshold,
        navbar_scroll_offset=config.navbar_scroll_offset,
        nav_links=[NavLinkModel(name=link.name, href=link.href) for link in NAV_LINKS],
        faqs=[FaqModel(question=f.question, answer=f.answer) for f in FAQS],
        faq_initial_active=0 if FAQS else None,
        slot_ids=list(IMAGE_SLOTS),
    )


@app.get("/api/slots/{slot_id}", response_model=SlotResponse)
async def get_slot(slot_id: str) -> SlotResponse:
    """Mount a deferred image slot and return it once settled.

    A failed image is not an HTTP error: the slot settles as
    ``unavailable`` and the fallback markup is returned.

    Raises:
        HTTPException: 404 if *slot_id* is not declared on the page.
    """
    slot_spec = IMAGE_SLOTS.get(slot_id)
    if slot_spec is None:
        raise HTTPException(status_code=404, detail=f"Unknown image slot: {slot_id}")

    slot = DeferredImageSlot(slot_spec.slot_id, slot_spec.prompt, app.state.image_fetcher)
    state = await slot.mount()
    return SlotResponse(
        slot_id=slot.slot_id,
        state=state.value,
        src=slot.result.src,
        html=image_slot(slot, slot_spec.css_class),
    )


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Configure logging and launch the uvicorn ASGI server.

    Host, port and log level come from :data:`~sk27.core.config.config`
    (``SK27_SERVER_HOST``, ``SK27_SERVER_PORT``, ``SK27_LOG_LEVEL``).

    This function is registered as the ``sk27`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(
        "sk27.api.main:app",
        host=config.server_host,
        port=config.server_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
