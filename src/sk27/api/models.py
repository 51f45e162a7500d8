"""Pydantic response models for the landing page API.

Models
------
SlotResponse
    Body of ``GET /api/slots/{slot_id}``: the settled state of one deferred
    image slot plus its rendered markup.
PageConfigResponse
    Body of ``GET /api/config``: timings and content ids ``app.js`` needs.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class SlotResponse(BaseModel):
    """Response body for ``GET /api/slots/{slot_id}``.

    Attributes:
        slot_id: Identifier of the slot that was mounted.
        state: ``"ready"`` or ``"unavailable"``.  Never ``"loading"``: the
            endpoint waits for the fetch to settle.
        src: ``data:`` URI of the image when ``state`` is ``"ready"``.
        html: Replacement markup for the slot element.
    """

    slot_id: str = Field(..., description="Slot identifier.")
    state: Literal["ready", "unavailable"] = Field(..., description="Settled slot state.")
    src: str | None = Field(default=None, description="Image data URI when ready.")
    html: str = Field(..., description="Rendered slot markup.")


class NavLinkModel(BaseModel):
    name: str
    href: str


class FaqModel(BaseModel):
    question: str
    answer: str


class PageConfigResponse(BaseModel):
    """Response body for ``GET /api/config``.

    Attributes:
        version: Package version string.
        splash_duration_ms: Splash duration before sections are shown.
        reveal_settle_ms: Delay after the splash before reveal observation.
        reveal_threshold: Visible area fraction that counts as entry.
        navbar_scroll_offset: Scroll offset for the navbar glass style.
        nav_links: In-page navigation anchors.
        faqs: FAQ entries in display order.
        faq_initial_active: Index expanded on load.
        slot_ids: Every deferred image slot on the page.
    """

    version: str
    splash_duration_ms: int
    reveal_settle_ms: int
    reveal_threshold: float
    navbar_scroll_offset: int
    nav_links: list[NavLinkModel]
    faqs: list[FaqModel]
    faq_initial_active: int | None = 0
    slot_ids: list[str]
