"""Headless UI state and server-side rendering for the landing page."""

from .image_slot import DeferredImageSlot
from .models import ImageResult, LayoutBox, RevealTarget, SlotState, Theme, Viewport
from .reveal import RevealController
from .state import FaqAccordion, PageSession, ThemeToggle

__all__ = [
    "DeferredImageSlot",
    "FaqAccordion",
    "ImageResult",
    "LayoutBox",
    "PageSession",
    "RevealController",
    "RevealTarget",
    "SlotState",
    "Theme",
    "ThemeToggle",
    "Viewport",
]
