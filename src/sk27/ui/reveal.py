"""Reveal-on-scroll controller.

Watches reveal targets and flips them to visible once at least
``threshold`` of their area has entered the viewport.  Visibility is
one-shot: a revealed target is unobserved and never hidden again, even when
the user scrolls back past it.

The controller is owned by a :class:`~sk27.ui.state.PageSession` and handed
to whatever registers targets.  It does nothing until :meth:`start` is
called, which the session does once the splash has finished and layout has
settled.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .models import IntersectionEntry, RevealTarget, Viewport

logger = logging.getLogger(__name__)


class RevealController:
    """Intersection observer for reveal targets.

    Attributes:
        threshold: Minimum visible area fraction that counts as entry.
    """

    def __init__(self, threshold: float = 0.1) -> None:
        if not 0.0 < threshold <= 1.0:
            raise ValueError(f"threshold must be in (0, 1], got {threshold}")
        self.threshold = threshold
        self._targets: dict[str, RevealTarget] = {}
        self._observed: set[str] = set()
        self._started = False
        self._disconnected = False

    # -- Registration ---------------------------------------------------------

    def register(self, target: RevealTarget) -> RevealTarget:
        """Declare a reveal target.  Observation begins when the controller starts."""
        self._targets[target.element_id] = target
        if self._started and not target.visible:
            self._observed.add(target.element_id)
        return target

    def target(self, element_id: str) -> RevealTarget:
        return self._targets[element_id]

    @property
    def targets(self) -> list[RevealTarget]:
        return list(self._targets.values())

    @property
    def observed_ids(self) -> frozenset[str]:
        return frozenset(self._observed)

    @property
    def started(self) -> bool:
        return self._started

    # -- Lifecycle ------------------------------------------------------------

    def start(self) -> None:
        """Begin observing every registered target that is not yet visible."""
        if self._disconnected:
            raise RuntimeError("reveal controller has been disconnected")
        if self._started:
            return
        self._started = True
        self._observed = {tid for tid, t in self._targets.items() if not t.visible}
        logger.debug("Reveal controller observing %d targets", len(self._observed))

    def disconnect(self) -> None:
        """Stop observing everything.  Visible targets keep their state."""
        self._observed.clear()
        self._started = False
        self._disconnected = True

    # -- Notifications --------------------------------------------------------

    def handle_entries(self, entries: Iterable[IntersectionEntry]) -> list[str]:
        """Process observer notifications.

        Returns:
            Ids of the targets revealed by this batch.
        """
        revealed: list[str] = []
        for entry in entries:
            if entry.element_id not in self._observed:
                continue
            if entry.intersection_ratio < self.threshold:
                continue
            target = self._targets[entry.element_id]
            target.reveal()
            self._observed.discard(entry.element_id)
            revealed.append(entry.element_id)
        if revealed:
            logger.debug("Revealed %s", ", ".join(revealed))
        return revealed

    def on_scroll(self, viewport: Viewport) -> list[str]:
        """Measure every observed target with a known layout against *viewport*."""
        entries = [
            IntersectionEntry(tid, viewport.intersection_ratio(self._targets[tid].box))
            for tid in sorted(self._observed)
            if self._targets[tid].box is not None
        ]
        return self.handle_entries(entries)
