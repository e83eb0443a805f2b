from django.test import SimpleTestCase

from catalog.carousel import DEFAULT_SLIDES, SLIDE_OFFSET_PX, Carousel


class CarouselTests(SimpleTestCase):
    """
    GUARANTEES:
    - The visible slide wraps around in both directions
    - Direction follows the last move (dots compare against the current slide)
    """

    def test_default_state(self):
        carousel = Carousel()
        self.assertEqual(carousel.count, 3)
        self.assertEqual(carousel.index, 0)
        self.assertEqual(carousel.current, DEFAULT_SLIDES[0])
        self.assertEqual(carousel.direction, 0)

    def test_wraps_forward(self):
        carousel = Carousel().paginate(1).paginate(1).paginate(1)
        self.assertEqual(carousel.page, 3)
        self.assertEqual(carousel.index, 0)

    def test_wraps_backward(self):
        carousel = Carousel().paginate(-1)
        self.assertEqual(carousel.page, -1)
        self.assertEqual(carousel.index, 2)
        self.assertEqual(carousel.direction, -1)
        self.assertEqual(Carousel(page=-7).index, 2)

    def test_go_to_sets_direction_from_current_index(self):
        carousel = Carousel(page=1)
        self.assertEqual(carousel.go_to(2).direction, 1)
        self.assertEqual(carousel.go_to(0).direction, -1)
        self.assertEqual(carousel.go_to(1).direction, -1)
        self.assertEqual(carousel.go_to(2).index, 2)

    def test_animation_offsets(self):
        forward = Carousel().next()
        backward = Carousel().previous()

        self.assertEqual(forward.enter_offset(), SLIDE_OFFSET_PX)
        self.assertEqual(forward.exit_offset(), -SLIDE_OFFSET_PX)
        self.assertEqual(backward.enter_offset(), -SLIDE_OFFSET_PX)
        self.assertEqual(backward.exit_offset(), SLIDE_OFFSET_PX)

    def test_from_query_is_lenient(self):
        self.assertEqual(Carousel.from_query(page="abc", direction="x").page, 0)
        self.assertEqual(Carousel.from_query(page=None).index, 0)

        carousel = Carousel.from_query(page="5", direction="-3")
        self.assertEqual(carousel.index, 2)
        self.assertEqual(carousel.direction, -1)

    def test_indicators(self):
        dots = Carousel(page=4).indicators()

        self.assertEqual([d["active"] for d in dots], [False, True, False])
        self.assertEqual(dots[2]["target"].direction, 1)
        self.assertEqual(dots[0]["target"].direction, -1)

    def test_empty_carousel(self):
        carousel = Carousel(slides=())
        self.assertEqual(carousel.index, 0)
        self.assertIsNone(carousel.current)
