"""Section renderers and page composition for the landing page.

Each ``render_*`` function turns a :class:`~sk27.ui.state.PageSession` into
the HTML of one section, reflecting the session's current state: the theme
marker, the expanded FAQ entry, which reveal targets are visible and what
each image slot holds.  :func:`render_page` composes them linearly into the
full document.

Reveal targets are declared once, in :func:`build_reveal_targets`, and every
renderer looks its classes up through the session by element id.
"""

from __future__ import annotations

import logging

from sk27 import __version__
from sk27.core.content import (
    ABOUT_HIGHLIGHTS,
    BRAND_LOCALITY,
    BRAND_NAME,
    CONTACT_GOALS,
    FAQS,
    FULL_ADDRESS,
    IMAGE_SLOTS,
    NAV_LINKS,
    OPENING_HOURS,
    PHONE_DISPLAY,
    REVIEWS,
    SERVICES,
    current_year,
    map_search_url,
    tel_link,
)

from .components import esc, icon, image_slot, section_heading, star_row
from .models import RevealTarget, Theme
from .state import PageSession

logger = logging.getLogger(__name__)


def _stagger(element_id: str, index: int) -> RevealTarget:
    return RevealTarget(element_id, variant="", stagger_index=index)


def build_reveal_targets() -> list[RevealTarget]:
    """Declare every reveal target on the page, in document order.

    The hero copy starts visible so the first screen is never blank.
    """
    hero_copy = RevealTarget(
        "hero-copy",
        variant="reveal",
        stagger_index=1,
        children=[
            _stagger("hero-title", 2),
            _stagger("hero-lede", 3),
            _stagger("hero-ctas", 4),
        ],
    )
    hero_copy.reveal()

    targets = [
        hero_copy,
        RevealTarget("hero-portrait-panel", variant="reveal-right", stagger_index=3),
        RevealTarget(
            "about-media",
            variant="reveal-left",
            children=[
                RevealTarget("slot-about-interior", variant="reveal-scale", stagger_index=1),
                _stagger("about-rating", 2),
                _stagger("about-hours", 3),
                RevealTarget("slot-about-barbell", variant="reveal-scale", stagger_index=4),
            ],
        ),
        RevealTarget(
            "about-copy",
            variant="reveal-right",
            children=[_stagger(f"about-copy-{i}", i) for i in range(1, 6)],
        ),
        RevealTarget("services-heading"),
    ]
    targets += [
        RevealTarget(f"service-{i}", variant="reveal-scale", stagger_index=(i % 3) + 1)
        for i in range(len(SERVICES))
    ]
    targets.append(RevealTarget("testimonials-heading"))
    targets += [
        RevealTarget(f"review-{i}", stagger_index=i + 1) for i in range(len(REVIEWS))
    ]
    targets.append(RevealTarget("faq-heading"))
    targets += [RevealTarget(f"faq-item-{i}", stagger_index=1) for i in range(len(FAQS))]
    targets += [
        RevealTarget(
            "contact-details",
            variant="reveal-left",
            children=[RevealTarget("contact-heading")],
        ),
        RevealTarget("contact-form-panel", variant="reveal-right"),
    ]
    return targets


def _slot(session: PageSession, slot_id: str) -> str:
    classes = IMAGE_SLOTS[slot_id].css_class
    element_id = f"slot-{slot_id}"
    if session.has_reveal_target(element_id):
        classes = f"{classes} {session.reveal_classes(element_id)}"
    return image_slot(session.slots[slot_id], classes)


def _rc(session: PageSession, element_id: str) -> str:
    return session.reveal_classes(element_id)


def _themed(session: PageSession, theme: Theme, content: str) -> str:
    """Wrap *content* so it only shows while *theme* is active.

    ``app.js`` flips the ``hidden`` attribute on every ``data-theme-show``
    element when the theme changes.
    """
    hidden = "" if session.theme.theme is theme else " hidden"
    return f'<span class="theme-variant" data-theme-show="{theme.value}"{hidden}>{content}</span>'


# ---------------------------------------------------------------------------
# Chrome.
# ---------------------------------------------------------------------------


def render_splash(session: PageSession) -> str:
    if not session.splash_visible:
        return ""
    return f'''<div id="splash" class="splash" data-splash-ms="{session.config.splash_duration_ms}">
  <div class="splash-mark">{icon("trophy", 80, "spin-slow")}<div class="splash-glow"></div></div>
  <div class="splash-copy">
    <span class="splash-title">ESTABLISHING CONNECTION</span>
    <span class="splash-sub">SK-27 ELITE HUB</span>
  </div>
</div>'''


def render_navbar(session: PageSession) -> str:
    nav = session.navbar
    theme_icon = _themed(session, Theme.DARK, icon("sun", 18)) + _themed(
        session, Theme.LIGHT, icon("moon", 18)
    )
    theme_label = _themed(session, Theme.DARK, f"LIGHT MODE {icon('sun', 18)}") + _themed(
        session, Theme.LIGHT, f"DARK MODE {icon('moon', 18)}"
    )
    links = "\n".join(
        f'      <a class="nav-link" href="{link.href}">{esc(link.name)}</a>' for link in NAV_LINKS
    )
    menu_links = "\n".join(
        f'    <a class="menu-link" href="{link.href}" data-close-menu '
        f'style="transition-delay: {i * 100}ms">{esc(link.name)}</a>'
        for i, link in enumerate(NAV_LINKS)
    )
    return f'''<nav id="navbar" class="navbar{" is-scrolled" if nav.scrolled else ""}" data-scroll-offset="{session.config.navbar_scroll_offset}">
  <div class="container navbar-inner">
    <a href="#home" class="brand">
      <span class="brand-badge">{icon("trophy", 24)}</span>
      <span class="brand-text"><span class="brand-name">{esc(BRAND_NAME)}</span><span class="brand-locality">{esc(BRAND_LOCALITY)}</span></span>
    </a>
    <div class="nav-desktop">
{links}
      <button type="button" class="theme-toggle" data-theme-toggle aria-label="Toggle theme">{theme_icon}</button>
      <a href="{tel_link()}" class="btn btn-primary btn-small">JOIN NOW</a>
    </div>
    <button type="button" class="menu-open" data-menu-open aria-label="Open menu">{icon("menu", 28)}</button>
  </div>
  <div id="mobile-menu" class="mobile-menu{" is-open" if nav.menu_open else ""}">
    <button type="button" class="menu-close" data-menu-close aria-label="Close menu">{icon("x", 40)}</button>
{menu_links}
    <button type="button" class="menu-theme" data-theme-toggle data-close-menu>{theme_label}</button>
    <a href="{tel_link()}" class="btn btn-primary btn-large">JOIN THE ELITE</a>
  </div>
</nav>'''


def render_scroll_top() -> str:
    return (
        '<button type="button" id="scroll-top" class="scroll-top" data-scroll-top '
        f'aria-label="Back to top">{icon("arrow-up-right", 24)}</button>'
    )


# ---------------------------------------------------------------------------
# Sections.
# ---------------------------------------------------------------------------


def render_hero(session: PageSession) -> str:
    return f'''<section id="home" class="hero">
  <div class="hero-backdrop">
    {_slot(session, "hero-backdrop")}
    <div class="hero-fade"></div>
  </div>
  <div class="container hero-grid">
    <div id="hero-copy" class="hero-copy {_rc(session, "hero-copy")}">
      <div class="badge"><span class="badge-dot"></span><span>NOW OPEN AT {esc(BRAND_LOCALITY)}</span></div>
      <h1 id="hero-title" class="hero-title {_rc(session, "hero-title")}">BEYOND THE <br><span class="accent outline">LIMITS</span></h1>
      <p id="hero-lede" class="hero-lede {_rc(session, "hero-lede")}">Step into Delhi's most luxurious fitness sanctuary. Imported machinery, elite coaching, and a space designed for ultimate transformation.</p>
      <div id="hero-ctas" class="hero-ctas {_rc(session, "hero-ctas")}">
        <a href="#contact" class="btn btn-primary btn-large">BOOK A TRIAL {icon("arrow-right", 24)}</a>
        <a href="#about" class="btn btn-ghost btn-large">EXPLORE THE GYM</a>
      </div>
    </div>
    <div id="hero-portrait-panel" class="hero-portrait {_rc(session, "hero-portrait-panel")}">
      {_slot(session, "hero-portrait")}
      <div class="status-card">
        {star_row(5, 20)}
        <p class="status-title">ELITE STATUS</p>
        <p class="status-sub">96+ GOOGLE REVIEWS</p>
      </div>
    </div>
  </div>
  <div class="scroll-cue"></div>
</section>'''


def render_about(session: PageSession) -> str:
    highlights = "\n".join(
        f'        <div class="highlight">{icon("check", 18)}<span>{esc(item)}</span></div>'
        for item in ABOUT_HIGHLIGHTS
    )
    return f'''<div class="clip-slant">
<section id="about" class="about">
  <div class="container about-grid">
    <div id="about-media" class="about-media {_rc(session, "about-media")}">
      <div class="about-column">
        {_slot(session, "about-interior")}
        <div id="about-rating" class="stat-card stat-dark {_rc(session, "about-rating")}">
          <h3 class="stat-figure">4.6</h3>
          <p class="stat-label">RATING ON GOOGLE REVIEWS</p>
        </div>
      </div>
      <div class="about-column offset">
        <div id="about-hours" class="stat-card stat-primary {_rc(session, "about-hours")}">
          {icon("clock", 40)}
          <h3 class="stat-figure">17H</h3>
          <p class="stat-label">OPEN FROM 6AM TO 11PM</p>
        </div>
        {_slot(session, "about-barbell")}
      </div>
    </div>
    <div id="about-copy" class="about-copy {_rc(session, "about-copy")}">
      <span id="about-copy-1" class="eyebrow {_rc(session, "about-copy-1")}">The Sanctuary</span>
      <h2 id="about-copy-2" class="display-title {_rc(session, "about-copy-2")}">DELHI'S ELITE <br><span class="accent outline">EXPERIENCE</span></h2>
      <p id="about-copy-3" class="about-body {_rc(session, "about-copy-3")}">Located at {esc(FULL_ADDRESS)}, {esc(BRAND_NAME)} is the pinnacle of strength training in the city. We combine high-performance equipment with a space designed for focus and luxury.</p>
      <div id="about-copy-4" class="highlights {_rc(session, "about-copy-4")}">
{highlights}
      </div>
      <a id="about-copy-5" href="#contact" class="text-link {_rc(session, "about-copy-5")}">VISIT THE FACILITY {icon("arrow-up-right", 20)}</a>
    </div>
  </div>
</section>
</div>'''


def render_services(session: PageSession) -> str:
    cards = "\n".join(
        f'''    <div id="service-{i}" class="service-card {_rc(session, f"service-{i}")}">
      <div class="service-icon">{icon(s.icon, 32)}</div>
      <h3 class="card-title">{esc(s.title)}</h3>
      <p class="card-body">{esc(s.desc)}</p>
    </div>'''
        for i, s in enumerate(SERVICES)
    )
    heading = section_heading(
        "services-heading", _rc(session, "services-heading"), "The Arsenal", "PREMIUM AMENITIES"
    )
    return f'''<section id="services" class="services">
  <div class="container">
  {heading}
  <div class="card-grid">
{cards}
  </div>
  </div>
</section>'''


def render_testimonials(session: PageSession) -> str:
    cards = "\n".join(
        f'''    <div id="review-{i}" class="review-card {_rc(session, f"review-{i}")}">
      {icon("quote", 60, "review-quote")}
      {star_row()}
      <p class="review-text">"{esc(r.content)}"</p>
      <div class="reviewer">
        <div class="avatar">{esc(r.initial)}</div>
        <div><h4 class="reviewer-name">{esc(r.name)}</h4><span class="reviewer-role">{esc(r.role)}</span></div>
      </div>
    </div>'''
        for i, r in enumerate(REVIEWS)
    )
    heading = section_heading(
        "testimonials-heading",
        _rc(session, "testimonials-heading"),
        "The Reputation",
        "MEMBER FEEDBACK",
    )
    return f'''<section id="testimonials" class="testimonials">
  <div class="container">
  {heading}
  <div class="review-grid">
{cards}
  </div>
  </div>
</section>'''


def render_faq(session: PageSession) -> str:
    """FAQ accordion.  Every answer is always in the markup; only the
    expanded one carries ``is-open``."""
    items = []
    for i, entry in enumerate(session.faq.entries):
        is_open = session.faq.is_expanded(i)
        state = " is-open" if is_open else ""
        items.append(
            f'''    <div id="faq-item-{i}" class="faq-item{state} {_rc(session, f"faq-item-{i}")}">
      <button type="button" class="faq-question" data-faq-index="{i}" aria-expanded="{"true" if is_open else "false"}">
        <span>{esc(entry.question)}</span>{icon("chevron-down", 24, "faq-chevron")}
      </button>
      <div class="faq-answer"><div class="faq-answer-body">{esc(entry.answer)}</div></div>
    </div>'''
        )
    heading = section_heading(
        "faq-heading", _rc(session, "faq-heading"), "Information", "COMMON QUERIES"
    )
    active = "" if session.faq.active is None else session.faq.active
    body = "\n".join(items)
    return f'''<section id="faq" class="faq">
  <div class="container narrow">
  {heading}
  <div class="faq-list" data-faq-active="{active}">
{body}
  </div>
  </div>
</section>'''


def render_contact(session: PageSession) -> str:
    """Contact details and the enquiry form.

    The form is a placeholder: ``app.js`` intercepts submission and nothing
    is sent anywhere.
    """
    options = "".join(f"<option>{esc(goal)}</option>" for goal in CONTACT_GOALS)
    heading = section_heading(
        "contact-heading", _rc(session, "contact-heading"), "Reach Out", "GET IN TOUCH", "left"
    )
    hours = "".join(f'<p class="contact-text">{esc(line)}</p>' for line in OPENING_HOURS)
    return f'''<section id="contact" class="contact">
  <div class="container contact-grid">
    <div id="contact-details" class="contact-details {_rc(session, "contact-details")}">
      {heading}
      <div class="contact-row">
        <div class="contact-icon">{icon("map-pin", 32)}</div>
        <div><h4 class="contact-label">The Command Center</h4>
          <a href="{esc(map_search_url())}" target="_blank" rel="noopener" class="contact-text">{esc(FULL_ADDRESS)}</a></div>
      </div>
      <div class="contact-row">
        <div class="contact-icon">{icon("phone", 32)}</div>
        <div><h4 class="contact-label">Hotline</h4>
          <a href="{tel_link()}" class="hotline">{esc(PHONE_DISPLAY)}</a></div>
      </div>
      <div class="contact-row">
        <div class="contact-icon">{icon("clock", 32)}</div>
        <div><h4 class="contact-label">Hours</h4>{hours}</div>
      </div>
    </div>
    <div id="contact-form-panel" class="contact-form-panel {_rc(session, "contact-form-panel")}">
      <h3 class="form-title">READY TO <span class="accent">START?</span></h3>
      <form id="contact-form" class="contact-form" data-intercept>
        <input type="text" name="name" placeholder="YOUR FULL NAME">
        <input type="tel" name="phone" placeholder="MOBILE NUMBER">
        <select name="goal">{options}</select>
        <button type="submit" class="btn btn-primary btn-block">SEND TRANSMISSION</button>
      </form>
    </div>
  </div>
</section>'''


def render_footer() -> str:
    socials = "".join(
        f'<a href="#" class="social-link" aria-label="{name}">{icon(name, 24)}</a>'
        for name in ("instagram", "facebook", "twitter")
    )
    return f'''<footer class="footer">
  <div class="container footer-inner">
    <div class="footer-brand">
      <div class="brand"><span class="brand-badge">{icon("trophy", 20)}</span><span class="brand-name">{esc(BRAND_NAME)}</span></div>
      <p class="footer-locality">{esc(BRAND_LOCALITY)} &bull; NEW DELHI</p>
    </div>
    <div class="footer-socials">{socials}</div>
    <p class="footer-legal">&copy; {current_year()} {esc(BRAND_NAME)} &bull; BEYOND THE LIMITS <br>DESIGNED FOR ELITE ATHLETES</p>
  </div>
</footer>'''


# ---------------------------------------------------------------------------
# Page composition.
# ---------------------------------------------------------------------------


def render_body(session: PageSession) -> str:
    """All sections in page order, without the document shell."""
    return "\n".join(
        [
            render_navbar(session),
            render_hero(session),
            render_about(session),
            render_services(session),
            render_testimonials(session),
            render_faq(session),
            render_contact(session),
            render_footer(),
            render_scroll_top(),
        ]
    )


def render_page(session: PageSession) -> str:
    """The complete HTML document for *session*."""
    root_classes = " ".join(sorted(session.root_classes))
    logger.debug("Rendering page (theme=%s)", session.theme.theme.value)
    return f'''<!DOCTYPE html>
<html lang="en" class="{root_classes}">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{esc(BRAND_NAME)} | Luxury Fitness in Hauz Khas Village</title>
<link rel="stylesheet" href="/static/css/site.css?v={__version__}">
</head>
<body data-reveal-threshold="{session.config.reveal_threshold}" data-reveal-settle-ms="{session.config.reveal_settle_ms}">
{render_splash(session)}
<div id="page" class="page">
{render_body(session)}
</div>
<script type="module" src="/static/js/app.js?v={__version__}"></script>
</body>
</html>'''
