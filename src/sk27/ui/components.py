"""Reusable HTML fragments shared by the page sections.

Every function returns a plain HTML string.  Text from content tables is
escaped with :func:`esc`; class names and ids come from code and are
trusted.
"""

from __future__ import annotations

import html

from .image_slot import DeferredImageSlot
from .models import SlotState

# Simplified stroke icons, 24x24 viewBox.
_ICON_PATHS: dict[str, str] = {
    "trophy": '<path d="M8 21h8M12 17v4M7 4h10v5a5 5 0 0 1-10 0V4z"/>'
    '<path d="M17 5h3v2a3 3 0 0 1-3 3M7 5H4v2a3 3 0 0 0 3 3"/>',
    "menu": '<path d="M4 6h16M4 12h16M4 18h16"/>',
    "x": '<path d="M18 6 6 18M6 6l12 12"/>',
    "sun": '<circle cx="12" cy="12" r="4"/>'
    '<path d="M12 2v2M12 20v2M4.9 4.9l1.4 1.4M17.7 17.7l1.4 1.4M2 12h2M20 12h2'
    'M4.9 19.1l1.4-1.4M17.7 6.3l1.4-1.4"/>',
    "moon": '<path d="M12 3a6 6 0 0 0 9 9 9 9 0 1 1-9-9z"/>',
    "arrow-right": '<path d="M5 12h14M12 5l7 7-7 7"/>',
    "arrow-up-right": '<path d="M7 17 17 7M7 7h10v10"/>',
    "star": '<path d="m12 2 3.1 6.3 6.9 1-5 4.9 1.2 6.8L12 17.8 5.8 21l1.2-6.8-5-4.9 6.9-1z"/>',
    "check": '<circle cx="12" cy="12" r="10"/><path d="m9 12 2 2 4-4"/>',
    "clock": '<circle cx="12" cy="12" r="10"/><path d="M12 6v6l4 2"/>',
    "map-pin": '<path d="M20 10c0 6-8 12-8 12s-8-6-8-12a8 8 0 0 1 16 0z"/>'
    '<circle cx="12" cy="10" r="3"/>',
    "phone": '<path d="M22 16.9v3a2 2 0 0 1-2.2 2 19.8 19.8 0 0 1-8.6-3.1 19.5 19.5 0 0 1-6-6'
    'A19.8 19.8 0 0 1 2.1 4.2 2 2 0 0 1 4.1 2h3a2 2 0 0 1 2 1.7l.5 3a2 2 0 0 1-.6 1.8L7.7 9.8'
    'a16 16 0 0 0 6 6l1.3-1.3a2 2 0 0 1 1.8-.6l3 .5a2 2 0 0 1 1.7 2z"/>',
    "quote": '<path d="M3 21c3 0 7-1 7-8V5H3v7h4c0 4-2 6-4 6zM14 21c3 0 7-1 7-8V5h-7v7h4'
    'c0 4-2 6-4 6z"/>',
    "chevron-down": '<path d="m6 9 6 6 6-6"/>',
    "dumbbell": '<path d="M6.5 6.5h11M6.5 17.5h11M6 20V4M18 20V4M3 17V7M21 17V7"/>',
    "timer": '<circle cx="12" cy="14" r="8"/><path d="M10 2h4M12 14l3-3"/>',
    "heart-pulse": '<path d="M19 14c1.5-1.5 3-3.2 3-5.5A5.5 5.5 0 0 0 16.5 3c-1.8 0-3 .5-4.5 2'
    '-1.5-1.5-2.7-2-4.5-2A5.5 5.5 0 0 0 2 8.5c0 2.3 1.5 4 3 5.5l7 7z"/>'
    '<path d="M3.2 12H9l.5-1 2 4.5 2-7 1.5 3.5h5.3"/>',
    "target": '<circle cx="12" cy="12" r="10"/><circle cx="12" cy="12" r="6"/>'
    '<circle cx="12" cy="12" r="2"/>',
    "users": '<path d="M16 21v-2a4 4 0 0 0-4-4H6a4 4 0 0 0-4 4v2"/><circle cx="9" cy="7" r="4"/>'
    '<path d="M22 21v-2a4 4 0 0 0-3-3.9M16 3.1a4 4 0 0 1 0 7.8"/>',
    "award": '<circle cx="12" cy="8" r="6"/><path d="M15.5 12.9 17 22l-5-3-5 3 1.5-9.1"/>',
    "loader": '<path d="M21 12a9 9 0 1 1-6.2-8.6"/>',
    "instagram": '<rect x="2" y="2" width="20" height="20" rx="5"/><circle cx="12" cy="12" r="4"/>'
    '<path d="M17.5 6.5h.01"/>',
    "facebook": '<path d="M18 2h-3a5 5 0 0 0-5 5v3H7v4h3v8h4v-8h3l1-4h-4V7a1 1 0 0 1 1-1h3z"/>',
    "twitter": '<path d="M22 4s-.7 2.1-2 3.4c1.6 10-9.4 17.3-18 11.6 2.2.1 4.4-.6 6-2'
    'C3 15.5.5 9.6 3 5c2.2 2.6 5.6 4.1 9 4-.9-4.2 4-6.6 7-3.8 1.1 0 3-1.2 3-1.2z"/>',
}


def esc(text) -> str:
    """HTML-escape a string."""
    return html.escape(str(text)) if text else ""


def icon(name: str, size: int = 24, css_class: str = "") -> str:
    """Inline SVG icon.  Unknown names raise ``KeyError``."""
    cls = f"icon icon-{name} {css_class}".strip()
    return (
        f'<svg class="{cls}" width="{size}" height="{size}" viewBox="0 0 24 24" fill="none" '
        f'stroke="currentColor" stroke-width="2" stroke-linecap="round" '
        f'stroke-linejoin="round" aria-hidden="true">{_ICON_PATHS[name]}</svg>'
    )


def star_row(count: int = 5, size: int = 16) -> str:
    stars = "".join(icon("star", size, "icon-filled") for _ in range(count))
    return f'<div class="star-row">{stars}</div>'


def section_heading(element_id: str, classes: str, subtitle: str, title: str, align: str = "center") -> str:
    """Eyebrow + display title block used at the top of most sections."""
    return (
        f'<div id="{element_id}" class="section-heading align-{align} {classes}">'
        f'<span class="eyebrow">{esc(subtitle)}</span>'
        f'<h2 class="display-title">{esc(title)}</h2>'
        f"</div>"
    )


def image_slot(slot: DeferredImageSlot, css_class: str = "") -> str:
    """Markup for a deferred image slot in its current state.

    LOADING renders a spinner placeholder, READY the image itself and
    UNAVAILABLE a static muted panel.
    """
    state = slot.state
    if state is SlotState.READY:
        inner = f'<img class="slot-image" src="{esc(slot.result.src)}" alt="{esc(slot.prompt)}">'
    elif state is SlotState.UNAVAILABLE:
        inner = '<div class="slot-fallback"><span>Media unavailable</span></div>'
    else:
        inner = f'<div class="slot-placeholder">{icon("loader", 32, "spin")}</div>'
    return (
        f'<div id="slot-{slot.slot_id}" class="nano-image {css_class}" '
        f'data-slot="{slot.slot_id}" data-state="{state.value}">'
        f'{inner}<div class="slot-shade"></div></div>'
    )
