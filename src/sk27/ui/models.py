"""Data models for the landing page UI state."""

from dataclasses import dataclass, field
from enum import Enum


class SlotState(str, Enum):
    """Lifecycle of a deferred image slot.

    LOADING is the only initial state.  READY and UNAVAILABLE are terminal.
    """

    LOADING = "loading"
    READY = "ready"
    UNAVAILABLE = "unavailable"

    @property
    def is_terminal(self) -> bool:
        return self is not SlotState.LOADING


class Theme(str, Enum):
    """Page colour theme.  Exactly two values are reachable."""

    DARK = "dark"
    LIGHT = "light"

    def toggled(self) -> "Theme":
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK


@dataclass(frozen=True)
class ImageResult:
    """Outcome held by a deferred image slot.

    ``src`` is only set when ``state`` is READY.
    """

    state: SlotState = SlotState.LOADING
    src: str | None = None


@dataclass(frozen=True)
class LayoutBox:
    """Vertical extent of an element in document coordinates (px)."""

    top: float
    height: float

    @property
    def bottom(self) -> float:
        return self.top + self.height


@dataclass(frozen=True)
class Viewport:
    """The visible window: current scroll offset and window height (px)."""

    scroll_y: float
    height: float

    def intersection_ratio(self, box: LayoutBox) -> float:
        """Fraction of *box* currently inside the viewport, 0.0 to 1.0.

        Zero-height boxes count as fully visible while their top edge is
        inside the viewport, matching how browsers report them.
        """
        view_top = self.scroll_y
        view_bottom = self.scroll_y + self.height
        if box.height <= 0:
            return 1.0 if view_top <= box.top <= view_bottom else 0.0
        overlap = min(box.bottom, view_bottom) - max(box.top, view_top)
        if overlap <= 0:
            return 0.0
        return min(overlap / box.height, 1.0)


@dataclass(frozen=True)
class IntersectionEntry:
    """One observer notification: a target and how much of it is visible."""

    element_id: str
    intersection_ratio: float


@dataclass
class RevealTarget:
    """A page element whose entrance animation waits for viewport entry.

    Attributes
    ----------
    element_id : str
        DOM id of the element.
    variant : str
        Animation flavour: ``reveal``, ``reveal-left``, ``reveal-right`` or
        ``reveal-scale``.
    visible : bool
        Flips False -> True once and never back.
    stagger_index : int | None
        Position (1-5) within the parent's stagger group, if any.
    children : list[RevealTarget]
        Stagger children that become visible together with this target.
    box : LayoutBox | None
        Measured layout, when known.
    """

    element_id: str
    variant: str = "reveal"
    visible: bool = False
    stagger_index: int | None = None
    children: list["RevealTarget"] = field(default_factory=list)
    box: LayoutBox | None = None

    def reveal(self) -> None:
        """Mark this target and its stagger children visible, permanently."""
        self.visible = True
        for child in self.children:
            child.reveal()

    def css_classes(self) -> str:
        """Classes the renderer puts on the element."""
        classes = [self.variant] if self.variant else []
        if self.stagger_index is not None:
            classes.append(f"stagger-{self.stagger_index}")
        if self.visible:
            classes.append("active")
        return " ".join(classes)


@dataclass
class NavbarState:
    """Navbar chrome: glass style once scrolled, and the mobile menu."""

    scrolled: bool = False
    menu_open: bool = False
