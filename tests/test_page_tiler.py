import pytest

from maplayout.page_tiler import calc_page_count
from maplayout.project_types import CanvasSize, Orientation, PaperSize

LETTER = PaperSize("Letter", 850, 1100)
PORTRAIT = Orientation.PORTRAIT
LANDSCAPE = Orientation.LANDSCAPE


def test_small_canvas_fits_one_page():
    assert calc_page_count(CanvasSize(700, 350), LETTER, PORTRAIT) == (1, 1)


def test_pages_are_rounded_up():
    assert calc_page_count(CanvasSize(851, 1101), LETTER, PORTRAIT) == (2, 2)
    assert calc_page_count(CanvasSize(10000, 10000), LETTER, PORTRAIT) == (12, 10)


@pytest.mark.parametrize(
    "canvas", [CanvasSize(0, 0), CanvasSize(700, 350), CanvasSize(1e6, 1e6)]
)
@pytest.mark.parametrize("orientation", list(Orientation))
def test_unknown_paper_cannot_be_tiled(canvas, orientation):
    assert calc_page_count(canvas, None, orientation) == (-1, -1)


def test_exact_multiples_do_not_over_tile():
    assert calc_page_count(CanvasSize(1700, 3300), LETTER, PORTRAIT) == (2, 3)
    assert calc_page_count(CanvasSize(3300, 1700), LETTER, LANDSCAPE) == (3, 2)


def test_float_noise_on_exact_multiples_is_ignored():
    canvas = CanvasSize(850 * 3 * (1 + 1e-13), 1100 * 0.1 * 10)
    assert calc_page_count(canvas, LETTER, PORTRAIT) == (3, 1)


def test_landscape_rotates_the_sheet():
    assert calc_page_count(CanvasSize(1100, 850), LETTER, LANDSCAPE) == (1, 1)
    assert calc_page_count(CanvasSize(1101, 850), LETTER, LANDSCAPE) == (2, 1)
    assert calc_page_count(CanvasSize(1100, 850), LETTER, PORTRAIT) == (2, 1)


@pytest.mark.parametrize(
    "canvas",
    [
        CanvasSize(700, 350),
        CanvasSize(2000, 5000),
        CanvasSize(8660, 123),
        CanvasSize(1, 1),
    ],
)
def test_landscape_matches_portrait_of_transposed_canvas(canvas):
    landscape = calc_page_count(canvas, LETTER, LANDSCAPE)
    portrait = calc_page_count(canvas.transposed(), LETTER, PORTRAIT)

    assert landscape == portrait[::-1]


@pytest.mark.parametrize("orientation", list(Orientation))
def test_page_count_never_drops_as_canvas_grows(orientation):
    previous = 0
    for width in range(0, 20000, 37):
        page_count_x, _ = calc_page_count(CanvasSize(width, 100), LETTER, orientation)
        assert page_count_x >= previous
        previous = page_count_x


@pytest.mark.parametrize("orientation", list(Orientation))
def test_tiny_canvas_needs_one_page(orientation):
    assert calc_page_count(CanvasSize(5e-7, 5e-7), LETTER, orientation) == (1, 1)
    assert calc_page_count(CanvasSize(5e-7, 0), LETTER, orientation) == (1, 0)


def test_empty_canvas_needs_no_pages():
    assert calc_page_count(CanvasSize(0, 0), LETTER, PORTRAIT) == (0, 0)
