# catalog/carousel.py

"""
HERO CAROUSEL

State of the home-page slider: an unbounded `page` counter plus the
`direction` of the last move. The visible slide wraps around in both
directions, so paging left from the first slide shows the last one.

Every slide is rendered, with the one picked by `?slide=&dir=` visible;
static/js/slider.js
switches slides in place every AUTOPLAY_INTERVAL_MS using the same arithmetic.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

AUTOPLAY_INTERVAL_MS = 5000
SLIDE_OFFSET_PX = 1000
FALLBACK_IMAGE_URL = "https://placehold.co/1200x500/cccccc/ffffff?text=Image+Not+Found"


@dataclass(frozen=True)
class Slide:
    image_url: str
    title: str
    subtitle: str
    link: str
    alt: str


DEFAULT_SLIDES: tuple[Slide, ...] = (
    Slide(
        image_url="https://placehold.co/1200x500/3498db/ffffff?text=Summer+Sale",
        title="Huge Summer Sale!",
        subtitle="Up to 50% off on selected items. Dont miss out!",
        link="/products/sale",
        alt="Summer sale promotion",
    ),
    Slide(
        image_url="https://placehold.co/1200x500/2ecc71/ffffff?text=New+Arrivals",
        title="Check Out Our New Arrivals",
        subtitle="The latest trends in fashion and electronics.",
        link="/products/new",
        alt="New arrivals promotion",
    ),
    Slide(
        image_url="https://placehold.co/1200x500/e74c3c/ffffff?text=Free+Shipping",
        title="Free Shipping On All Orders",
        subtitle="Get your items delivered to your doorstep for free.",
        link="/cart",
        alt="Free shipping promotion",
    ),
)


def _lenient_int(value) -> int:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return 0


@dataclass(frozen=True)
class Carousel:
    slides: tuple[Slide, ...] = field(default=DEFAULT_SLIDES)
    page: int = 0
    direction: int = 0

    @classmethod
    def from_query(cls, slides=DEFAULT_SLIDES, page=None, direction=None) -> "Carousel":
        """Build from raw query values; anything unparseable counts as 0."""
        step = _lenient_int(direction)
        step = (step > 0) - (step < 0)
        return cls(slides=tuple(slides), page=_lenient_int(page), direction=step)

    @property
    def count(self) -> int:
        return len(self.slides)

    @property
    def index(self) -> int:
        n = self.count
        if n == 0:
            return 0
        return ((self.page % n) + n) % n

    @property
    def current(self) -> Slide | None:
        if not self.slides:
            return None
        return self.slides[self.index]

    def paginate(self, delta: int) -> "Carousel":
        return replace(self, page=self.page + delta, direction=delta)

    def go_to(self, index: int) -> "Carousel":
        direction = 1 if index > self.index else -1
        return replace(self, page=index, direction=direction)

    def next(self) -> "Carousel":
        return self.paginate(1)

    def previous(self) -> "Carousel":
        return self.paginate(-1)

    # -----------------------------
    # ANIMATION OFFSETS (px)
    # -----------------------------
    def enter_offset(self) -> int:
        """Where the incoming slide starts."""
        return SLIDE_OFFSET_PX if self.direction > 0 else -SLIDE_OFFSET_PX

    def exit_offset(self) -> int:
        """Where the outgoing slide leaves to."""
        return SLIDE_OFFSET_PX if self.direction < 0 else -SLIDE_OFFSET_PX

    def indicators(self) -> list[dict]:
        """One entry per dot: the state reached by clicking it."""
        return [
            {
                "number": i + 1,
                "active": i == self.index,
                "target": self.go_to(i),
            }
            for i in range(self.count)
        ]
