"""Tests for sk27.ui.state: page session, theme and FAQ accordion."""

from __future__ import annotations

import asyncio

import pytest

from sk27.core.content import FAQS, IMAGE_SLOTS
from sk27.ui.models import LayoutBox, SlotState, Theme
from sk27.ui.state import DARK_MARKER, FaqAccordion, PageSession, ThemeToggle


class TestThemeToggle:
    """Two-value theme applied as a root marker class."""

    def test_starts_dark(self):
        assert ThemeToggle().theme is Theme.DARK
        assert DARK_MARKER in ThemeToggle().apply(set())

    def test_toggle_twice_is_identity(self):
        toggle = ThemeToggle()
        toggle.toggle()
        assert toggle.theme is Theme.LIGHT
        toggle.toggle()
        assert toggle.theme is Theme.DARK

    def test_light_removes_marker(self):
        toggle = ThemeToggle(Theme.LIGHT)
        assert toggle.apply({"dark", "other"}) == {"other"}


class TestFaqAccordion:
    """Single-selection accordion, first entry open on load."""

    def test_first_entry_open(self):
        faq = FaqAccordion(FAQS)
        assert faq.active == 0
        assert faq.is_expanded(0)
        assert not faq.is_expanded(1)

    def test_click_active_collapses(self):
        faq = FaqAccordion(FAQS)
        assert faq.click(0) is None
        assert not any(faq.is_expanded(i) for i in range(len(FAQS)))

    def test_click_other_switches(self):
        faq = FaqAccordion(FAQS)
        assert faq.click(2) == 2
        assert faq.is_expanded(2)
        assert not faq.is_expanded(0)

    def test_at_most_one_expanded(self):
        faq = FaqAccordion(FAQS)
        for i in (1, 3, 3, 0, 2):
            faq.click(i)
            assert sum(faq.is_expanded(j) for j in range(len(FAQS))) <= 1

    def test_out_of_range(self):
        with pytest.raises(IndexError):
            FaqAccordion(FAQS).click(len(FAQS))

    def test_empty_list_has_no_active(self):
        assert FaqAccordion(()).active is None


class TestNavbarAndMenu:
    def test_navbar_scrolled_past_offset(self, session):
        session.scroll_to(50)
        assert not session.navbar.scrolled
        session.scroll_to(51)
        assert session.navbar.scrolled
        session.scroll_to_top()
        assert not session.navbar.scrolled

    def test_menu_link_closes_menu(self, session):
        session.open_menu()
        assert session.navbar.menu_open
        assert session.follow_menu_link("#faq") == "#faq"
        assert not session.navbar.menu_open

    def test_theme_from_menu_closes_menu(self, session):
        session.open_menu()
        assert session.toggle_theme(from_menu=True) is Theme.LIGHT
        assert not session.navbar.menu_open
        assert DARK_MARKER not in session.root_classes

    def test_theme_from_navbar_keeps_menu(self, session):
        session.open_menu()
        session.toggle_theme()
        assert session.navbar.menu_open


class TestPageSessionLifecycle:
    """Splash, reveal start and slot teardown."""

    def test_initial_state(self, session):
        assert session.splash_visible
        assert session.theme.theme is Theme.DARK
        assert session.faq.active == 0
        assert set(session.slots) == set(IMAGE_SLOTS)
        assert all(s.state is SlotState.LOADING for s in session.slots.values())
        assert session.reveal_target("hero-copy").visible
        assert not session.reveal_target("about-media").visible

    def test_sessions_do_not_share_controllers(self, test_config, fake_fetcher):
        from sk27.ui.sections import build_reveal_targets

        a = PageSession(test_config, fake_fetcher, targets=build_reveal_targets())
        b = PageSession(test_config, fake_fetcher, targets=build_reveal_targets())
        assert a.reveal is not b.reveal
        a.unmount()
        assert not b.reveal_target("about-media").visible

    def test_boot_hides_splash_and_starts_reveal(self, session):
        asyncio.run(session.boot())
        assert not session.splash_visible
        assert session.reveal.started

    def test_no_reveal_before_boot(self, session):
        session.measure({"about-media": LayoutBox(0, 100)})
        assert session.scroll_to(0) == []
        assert not session.reveal_target("about-media").visible

    def test_about_revealed_exactly_once(self, session):
        """Scrolling to About reveals it; scrolling away and back changes nothing."""
        session.measure(
            {
                "about-media": LayoutBox(top=1200, height=700),
                "about-copy": LayoutBox(top=1200, height=700),
            }
        )
        asyncio.run(session.boot())
        assert not session.reveal_target("about-media").visible

        revealed = session.scroll_to(1000)
        assert set(revealed) == {"about-media", "about-copy"}
        assert session.reveal_target("slot-about-interior").visible
        assert "active" in session.reveal_classes("about-copy-5")

        session.scroll_to(0)
        assert session.scroll_to(1000) == []
        assert session.reveal_target("about-media").visible

    def test_boot_after_unmount_is_inert(self, session):
        session.unmount()
        asyncio.run(session.boot())
        assert session.splash_visible
        assert not session.reveal.started

    def test_mount_slots_settles_all(self, session):
        asyncio.run(session.mount_slots())
        assert all(s.state is SlotState.READY for s in session.slots.values())

    def test_unmount_discards_pending_slots(self, test_config, fetcher_factory):
        async def scenario():
            gate = asyncio.Event()
            fetcher = fetcher_factory(gate=gate)
            session = PageSession(test_config, fetcher)
            task = asyncio.create_task(session.mount_slots())
            while len(fetcher.prompts) < len(IMAGE_SLOTS):
                await asyncio.sleep(0)
            session.unmount()
            gate.set()
            await task
            return session

        session = asyncio.run(scenario())
        assert all(s.state is SlotState.LOADING for s in session.slots.values())


class TestBootOrdering:
    """Sections, and with them the image slots, mount after the splash."""

    def test_no_fetch_while_splash_visible(self, fetcher_factory):
        from sk27.core.config import LandingConfig

        cfg = LandingConfig(_env_file=None, api_key=None, splash_duration_ms=200, reveal_settle_ms=0)
        fetcher = fetcher_factory()
        session = PageSession(cfg, fetcher)

        async def scenario():
            task = asyncio.create_task(session.boot())
            await asyncio.sleep(0.02)
            during_splash = (session.splash_visible, list(fetcher.prompts))
            await task
            return during_splash

        splash_visible, prompts = asyncio.run(scenario())

        assert splash_visible
        assert prompts == []
        assert len(fetcher.prompts) == len(IMAGE_SLOTS)
        assert all(s.state is SlotState.READY for s in session.slots.values())

    def test_boot_settles_slots(self, session):
        asyncio.run(session.boot())
        assert all(s.state is SlotState.READY for s in session.slots.values())

    def test_unmount_before_splash_ends_fetches_nothing(self, test_config, fake_fetcher):
        session = PageSession(test_config, fake_fetcher)
        session.unmount()
        asyncio.run(session.boot())
        assert fake_fetcher.prompts == []
