"""Static business content for the SK-27 landing page.

Everything the sections print lives here: contact details, navigation,
amenities, reviews, FAQ entries and the prompts for every image slot.
Nothing is loaded at runtime and nothing is persisted.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from urllib.parse import quote

BRAND_NAME = "SK-27 GYM"
BRAND_LOCALITY = "HAUZ KHAS VILLAGE"
FULL_ADDRESS = (
    "Building no 30, near Deer Park, Hauz Khas Village, Deer Park, Hauz Khas, "
    "New Delhi, Delhi 110016"
)
PHONE_DIAL = "09907050705"
PHONE_DISPLAY = "099070 50705"
MAP_SEARCH_BASE = "https://www.google.com/maps/search/"

# Characters that JavaScript's encodeURIComponent leaves untouched.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    """Percent-encode *value* the way JavaScript ``encodeURIComponent`` does."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


def map_search_url(address: str = FULL_ADDRESS) -> str:
    """Build the map-provider search link for a postal address."""
    return f"{MAP_SEARCH_BASE}{encode_uri_component(address)}"


def tel_link(number: str = PHONE_DIAL) -> str:
    """Build a telephone-dial link."""
    return f"tel:{number}"


def current_year(today: date | None = None) -> int:
    """Year shown in the footer copyright line."""
    return (today or date.today()).year


@dataclass(frozen=True)
class NavLink:
    name: str
    href: str


@dataclass(frozen=True)
class Service:
    icon: str
    title: str
    desc: str


@dataclass(frozen=True)
class Review:
    name: str
    role: str
    content: str

    @property
    def initial(self) -> str:
        return self.name[:1]


@dataclass(frozen=True)
class FaqEntry:
    question: str
    answer: str


@dataclass(frozen=True)
class ImageSlotSpec:
    """A decorative image slot declared by a section.

    Attributes:
        slot_id: Stable identifier used by ``/api/slots/{slot_id}``.
        prompt: Photography description sent to the image service.
        css_class: Extra sizing classes for the slot element.
    """

    slot_id: str
    prompt: str
    css_class: str = ""


NAV_LINKS: tuple[NavLink, ...] = (
    NavLink("Home", "#home"),
    NavLink("About", "#about"),
    NavLink("Services", "#services"),
    NavLink("FAQ", "#faq"),
    NavLink("Contact", "#contact"),
)

ABOUT_HIGHLIGHTS: tuple[str, ...] = (
    "Most Luxurious Setup",
    "Expert Personal Trainers",
    "Soft Spoken & Behaved Staff",
    "High-End Imported Machines",
)

SERVICES: tuple[Service, ...] = (
    Service(
        "dumbbell",
        "Strength Floor",
        "Equipped with world-class imported machinery for targeted hypertrophy.",
    ),
    Service(
        "timer",
        "Elite HIIT",
        "Tactical metabolic conditioning zones designed for maximum efficiency.",
    ),
    Service(
        "heart-pulse",
        "Cardio Zone",
        "A curated range of treadmills and cycles with high-end tech integration.",
    ),
    Service(
        "target",
        "Personal Prep",
        "1-on-1 transformation coaching tailored to your individual anatomy.",
    ),
    Service(
        "users",
        "Group Synergy",
        "Premium group training experiences focused on functional mobility.",
    ),
    Service(
        "award",
        "Nutrition Lab",
        "Personalized diet protocols to fuel your evolution beyond the gym floor.",
    ),
)

REVIEWS: tuple[Review, ...] = (
    Review(
        "Taniyaa rawat",
        "Elite Member",
        "Most luxurious place to visit worth for the money excellent staff service.",
    ),
    Review(
        "Mihika Bhaumik",
        "Athlete",
        "The equipment is high quality and the space is well designed.",
    ),
    Review(
        "k",
        "Regular Member",
        "The all employees here are so soft spoken and well-behaved.",
    ),
)

FAQS: tuple[FaqEntry, ...] = (
    FaqEntry(
        "What are the operating hours?",
        "We are open Monday to Saturday from 6:00 AM to 11:00 PM. On Sundays, we open "
        "early at 5:00 AM for early risers.",
    ),
    FaqEntry(
        "Do you offer personal training?",
        "Yes, we have a team of certified elite trainers specialized in bodybuilding, "
        "functional fitness, and body transformation.",
    ),
    FaqEntry(
        "Is there a trial session available?",
        f"Absolutely! Contact our enrollment desk at {PHONE_DISPLAY} to book your first "
        "elite experience session.",
    ),
    FaqEntry(
        "What makes SK-27 different from local gyms?",
        "Our focus on imported high-end machinery, luxury ambiance, and a high standard "
        "of professional staff behavior sets us apart.",
    ),
)

OPENING_HOURS: tuple[str, ...] = (
    "Mon - Sat: 6:00 AM – 11:00 PM",
    "Sun: 5:00 AM – 11:00 PM",
)

CONTACT_GOALS: tuple[str, ...] = (
    "SELECT YOUR GOAL",
    "WEIGHT LOSS",
    "STRENGTH TRAINING",
    "FLEXIBILITY",
)

IMAGE_SLOTS: dict[str, ImageSlotSpec] = {
    spec.slot_id: spec
    for spec in (
        ImageSlotSpec(
            "hero-backdrop",
            "Atmospheric dark high-end gym interior with luxury weight machines and "
            "golden ambient lighting",
            "slot-cover slot-dim",
        ),
        ImageSlotSpec(
            "hero-portrait",
            "A bodybuilder training on luxury golden-black gym machines in a cinematic "
            "low-key environment",
            "slot-portrait",
        ),
        ImageSlotSpec(
            "about-interior",
            "Luxury gym interior with soft lighting and professional setup",
            "slot-tile",
        ),
        ImageSlotSpec(
            "about-barbell",
            "Detail shot of high-end imported barbell and weight plates",
            "slot-tile",
        ),
    )
}
