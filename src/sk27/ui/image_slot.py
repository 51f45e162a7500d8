"""Deferred image slot: a placeholder that fills with a generated image.

State machine::

    LOADING --(fetch resolves with payload)--> READY
    LOADING --(fetch resolves with None)-----> UNAVAILABLE

There is no transition back to LOADING and no manual retry.

Cancellation
------------
Unmounting a slot while its fetch is in flight must not touch the slot's
state once the fetch resolves.  Each mount captures the current generation
number as a token.  :meth:`DeferredImageSlot.unmount` bumps the generation,
so a late resolution carries a stale token and is dropped.  The network
call itself is not cancelled.
"""

from __future__ import annotations

import logging
from typing import Protocol

from .models import ImageResult, SlotState

logger = logging.getLogger(__name__)


class ImageFetcher(Protocol):
    """Anything that can turn a prompt into a ``data:`` URI or ``None``."""

    async def fetch(self, prompt: str) -> str | None: ...


class DeferredImageSlot:
    """One decorative image region on the page.

    Attributes:
        slot_id: Stable identifier of the slot.
        prompt: Photography description requested on mount.
        result: Current :class:`ImageResult`.
    """

    def __init__(self, slot_id: str, prompt: str, fetcher: ImageFetcher) -> None:
        self.slot_id = slot_id
        self.prompt = prompt
        self._fetcher = fetcher
        self._generation = 0
        self._mounted = False
        self.result = ImageResult()

    @property
    def state(self) -> SlotState:
        return self.result.state

    @property
    def mounted(self) -> bool:
        return self._mounted

    async def mount(self) -> SlotState:
        """Request the image and apply the outcome if still mounted.

        A slot that has already resolved does not request again.

        Returns:
            The slot state after the request settles.  This is still
            LOADING when the slot was unmounted before resolution.
        """
        if self.state.is_terminal:
            return self.state

        self._mounted = True
        token = self._generation
        payload = await self._fetcher.fetch(self.prompt)
        self._resolve(token, payload)
        return self.state

    def unmount(self) -> None:
        """Detach the slot.  Any pending resolution is discarded."""
        self._mounted = False
        self._generation += 1

    def _resolve(self, token: int, payload: str | None) -> bool:
        """Apply a fetch outcome if *token* is still current.

        Returns:
            True if the state changed.
        """
        if token != self._generation:
            logger.debug("Discarding stale image result for slot %s", self.slot_id)
            return False
        if self.state.is_terminal:
            return False

        if payload:
            self.result = ImageResult(state=SlotState.READY, src=payload)
        else:
            self.result = ImageResult(state=SlotState.UNAVAILABLE)
        logger.info("Slot %s resolved as %s", self.slot_id, self.state.value)
        return True
