"""State management for one rendering of the landing page.

A :class:`PageSession` owns every piece of UI state a single page
composition needs: the splash lifecycle, the reveal controller, the theme,
the FAQ accordion, the navbar chrome and the deferred image slots.  Nothing
here is process-wide: each session builds its own controller and slots, and
:meth:`PageSession.unmount` tears them down again.

Lifecycle
---------
::

    session = PageSession(config, fetcher, targets=build_reveal_targets())
    await session.boot()         # splash -> sections -> reveal observation
    session.scroll_to(1400)      # reveals whatever crossed the threshold
    session.unmount()
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Sequence

from sk27.core.config import LandingConfig
from sk27.core.content import FAQS, IMAGE_SLOTS, FaqEntry, ImageSlotSpec

from .image_slot import DeferredImageSlot, ImageFetcher
from .models import LayoutBox, NavbarState, RevealTarget, Theme, Viewport
from .reveal import RevealController

logger = logging.getLogger(__name__)

DARK_MARKER = "dark"
DEFAULT_VIEWPORT_HEIGHT = 900


class ThemeToggle:
    """Two-value theme flag applied as a marker class on the document root."""

    def __init__(self, theme: Theme = Theme.DARK) -> None:
        self.theme = theme

    def toggle(self) -> Theme:
        self.theme = self.theme.toggled()
        logger.debug("Theme switched to %s", self.theme.value)
        return self.theme

    def apply(self, root_classes: set[str]) -> set[str]:
        """Add or remove the dark marker on *root_classes* in place."""
        if self.theme is Theme.DARK:
            root_classes.add(DARK_MARKER)
        else:
            root_classes.discard(DARK_MARKER)
        return root_classes


class FaqAccordion:
    """Single-selection accordion over an ordered list of entries.

    The first entry starts expanded.  Clicking the active entry collapses
    it; clicking any other entry makes it the only expanded one.
    """

    def __init__(self, entries: Sequence[FaqEntry], active: int | None = 0) -> None:
        self.entries = tuple(entries)
        if active is not None and not self.entries:
            active = None
        self.active = active

    def click(self, index: int) -> int | None:
        if not 0 <= index < len(self.entries):
            raise IndexError(f"FAQ entry {index} does not exist")
        self.active = None if self.active == index else index
        return self.active

    def is_expanded(self, index: int) -> bool:
        return self.active == index


class PageSession:
    """Owns the UI state of one page composition.

    Attributes:
        config: Application configuration (timings and thresholds).
        splash_visible: True until the splash duration has elapsed.
        theme: The :class:`ThemeToggle`.
        faq: The :class:`FaqAccordion`.
        navbar: Navbar chrome state.
        reveal: The session's own :class:`RevealController`.
        slots: Deferred image slots keyed by slot id.
        viewport: Last known viewport.
    """

    def __init__(
        self,
        config: LandingConfig,
        fetcher: ImageFetcher,
        *,
        targets: Iterable[RevealTarget] = (),
        slot_specs: Iterable[ImageSlotSpec] | None = None,
        faqs: Sequence[FaqEntry] = FAQS,
        viewport_height: float = DEFAULT_VIEWPORT_HEIGHT,
    ) -> None:
        self.config = config
        self.splash_visible = True
        self.mounted = True
        self.theme = ThemeToggle()
        self.faq = FaqAccordion(faqs)
        self.navbar = NavbarState()
        self.viewport = Viewport(scroll_y=0, height=viewport_height)

        self.reveal = RevealController(threshold=config.reveal_threshold)
        self._reveal_index: dict[str, RevealTarget] = {}
        for target in targets:
            self.reveal.register(target)
            self._index_target(target)

        specs = IMAGE_SLOTS.values() if slot_specs is None else slot_specs
        self.slots: dict[str, DeferredImageSlot] = {
            spec.slot_id: DeferredImageSlot(spec.slot_id, spec.prompt, fetcher) for spec in specs
        }

    # -- Reveal lookups -------------------------------------------------------

    def _index_target(self, target: RevealTarget) -> None:
        self._reveal_index[target.element_id] = target
        for child in target.children:
            self._index_target(child)

    def reveal_target(self, element_id: str) -> RevealTarget:
        """Find a registered target or stagger child by element id."""
        return self._reveal_index[element_id]

    def has_reveal_target(self, element_id: str) -> bool:
        return element_id in self._reveal_index

    def reveal_classes(self, element_id: str) -> str:
        return self.reveal_target(element_id).css_classes()

    def measure(self, boxes: dict[str, LayoutBox]) -> None:
        """Record measured layout boxes for reveal targets."""
        for element_id, box in boxes.items():
            self.reveal_target(element_id).box = box

    # -- Lifecycle ------------------------------------------------------------

    async def boot(self) -> None:
        """Run the splash, then mount the sections and start reveal observation.

        Image slots only start fetching once the splash is gone.  Reveal
        observation starts after a further settle delay, while the slots
        may still be loading.
        """
        await asyncio.sleep(self.config.splash_duration_ms / 1000)
        if not self.mounted:
            return
        self.splash_visible = False
        logger.debug("Splash removed")
        slots = asyncio.create_task(self.mount_slots())

        await asyncio.sleep(self.config.reveal_settle_ms / 1000)
        if self.mounted:
            self.reveal.start()
            self.reveal.on_scroll(self.viewport)
        await slots

    async def mount_slots(self) -> None:
        """Mount every image slot concurrently and wait for them to settle."""
        await asyncio.gather(*(slot.mount() for slot in self.slots.values()))

    def unmount(self) -> None:
        """Tear down the page: drop pending image results and stop observing."""
        self.mounted = False
        for slot in self.slots.values():
            slot.unmount()
        self.reveal.disconnect()
        logger.debug("Page session unmounted")

    # -- User actions ---------------------------------------------------------

    def scroll_to(self, scroll_y: float) -> list[str]:
        """Move the viewport and return the ids revealed by the move."""
        self.viewport = Viewport(scroll_y=max(scroll_y, 0), height=self.viewport.height)
        self.navbar.scrolled = self.viewport.scroll_y > self.config.navbar_scroll_offset
        if not self.reveal.started:
            return []
        return self.reveal.on_scroll(self.viewport)

    def scroll_to_top(self) -> list[str]:
        return self.scroll_to(0)

    def toggle_theme(self, *, from_menu: bool = False) -> Theme:
        theme = self.theme.toggle()
        if from_menu:
            self.close_menu()
        return theme

    def open_menu(self) -> None:
        self.navbar.menu_open = True

    def close_menu(self) -> None:
        self.navbar.menu_open = False

    def follow_menu_link(self, href: str) -> str:
        """Follow an in-page anchor from the mobile menu, which closes it."""
        self.close_menu()
        return href

    def click_faq(self, index: int) -> int | None:
        return self.faq.click(index)

    @property
    def root_classes(self) -> set[str]:
        return self.theme.apply(set())
