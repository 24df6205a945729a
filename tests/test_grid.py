import pytest

from markoff.data import BLACK, WHITE
from markoff.grid import PixelImage


def test_filled_counts_every_pixel():
    image = PixelImage.filled(4, 3, BLACK)
    assert image.count(BLACK) == 12
    assert image.count(WHITE) == 0
    assert image.size == (4, 3)


def test_put_and_pixel_round_trip():
    image = PixelImage.filled(5, 5, BLACK)
    image.put(2, 3, WHITE)
    assert image.pixel(2, 3) == WHITE
    assert image.pixel(3, 2) == BLACK
    assert image.count(WHITE) == 1


def test_row_major_layout():
    image = PixelImage.filled(3, 2, BLACK)
    image.put(1, 1, WHITE)
    offset = (1 * 3 + 1) * 4
    assert bytes(image.data[offset:offset + 4]) == bytes(WHITE)


def test_copy_is_independent():
    image = PixelImage.filled(2, 2, BLACK)
    clone = image.copy()
    clone.put(0, 0, WHITE)
    assert image.pixel(0, 0) == BLACK
    assert clone != image
    assert image.copy() == image


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 4)])
def test_out_of_bounds(x, y):
    image = PixelImage.filled(4, 4, BLACK)
    with pytest.raises(IndexError):
        image.pixel(x, y)
    with pytest.raises(IndexError):
        image.put(x, y, WHITE)


def test_bad_data_length():
    with pytest.raises(ValueError):
        PixelImage(2, 2, bytearray(3))


def test_coords_cover_image():
    image = PixelImage.filled(3, 2, BLACK)
    coords = list(image.coords())
    assert len(coords) == 6
    assert set(coords) == {(x, y) for x in range(3) for y in range(2)}