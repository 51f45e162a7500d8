"""Tests for sk27.ui.image_slot: deferred image slot state machine."""

from __future__ import annotations

import asyncio

from sk27.ui.image_slot import DeferredImageSlot
from sk27.ui.models import SlotState


class TestSlotTransitions:
    """LOADING -> READY | UNAVAILABLE, and nothing else."""

    def test_initial_state_is_loading(self, fake_fetcher):
        slot = DeferredImageSlot("hero-backdrop", "gym", fake_fetcher)
        assert slot.state is SlotState.LOADING
        assert slot.result.src is None

    def test_payload_makes_slot_ready(self, fake_fetcher):
        slot = DeferredImageSlot("hero-backdrop", "gym", fake_fetcher)

        state = asyncio.run(slot.mount())

        assert state is SlotState.READY
        assert slot.result.src == fake_fetcher.payload
        assert fake_fetcher.prompts == ["gym"]

    def test_none_makes_slot_unavailable(self, failing_fetcher):
        slot = DeferredImageSlot("hero-backdrop", "gym", failing_fetcher)

        assert asyncio.run(slot.mount()) is SlotState.UNAVAILABLE
        assert slot.result.src is None

    def test_empty_payload_counts_as_unavailable(self, fetcher_factory):
        slot = DeferredImageSlot("s", "gym", fetcher_factory(payload=""))
        assert asyncio.run(slot.mount()) is SlotState.UNAVAILABLE

    def test_terminal_slot_does_not_refetch(self, fake_fetcher):
        slot = DeferredImageSlot("s", "gym", fake_fetcher)
        asyncio.run(slot.mount())
        asyncio.run(slot.mount())
        assert len(fake_fetcher.prompts) == 1

    def test_unavailable_is_final(self, fetcher_factory):
        """No retry: a failed slot stays failed even if the service recovers."""
        fetcher = fetcher_factory(payload=None)
        slot = DeferredImageSlot("s", "gym", fetcher)
        asyncio.run(slot.mount())
        fetcher.payload = "data:image/png;base64,AAAA"
        assert asyncio.run(slot.mount()) is SlotState.UNAVAILABLE


class TestSlotCancellation:
    """Unmounting while a fetch is in flight discards its result."""

    def test_unmount_during_fetch_discards_result(self, fetcher_factory):
        async def scenario():
            gate = asyncio.Event()
            fetcher = fetcher_factory(gate=gate)
            slot = DeferredImageSlot("s", "gym", fetcher)
            task = asyncio.create_task(slot.mount())
            while not fetcher.prompts:
                await asyncio.sleep(0)
            slot.unmount()
            gate.set()
            return slot, await task

        slot, state = asyncio.run(scenario())

        assert state is SlotState.LOADING
        assert slot.result.src is None
        assert not slot.mounted

    def test_unmount_after_resolution_keeps_state(self, fake_fetcher):
        slot = DeferredImageSlot("s", "gym", fake_fetcher)
        asyncio.run(slot.mount())
        slot.unmount()
        assert slot.state is SlotState.READY

    def test_stale_token_is_rejected(self, fake_fetcher):
        slot = DeferredImageSlot("s", "gym", fake_fetcher)
        slot.unmount()
        assert slot._resolve(0, "data:image/png;base64,AAAA") is False
        assert slot.state is SlotState.LOADING
