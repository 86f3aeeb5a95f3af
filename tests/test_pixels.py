import pytest

from stripcast.pixels import BLACK, BLUE, RED, WHITE, Color, Frame


def test_new_frame_is_black():
    frame = Frame(3, 2)
    assert all(frame.get(x, y) == BLACK for x in range(3) for y in range(2))


def test_set_get_round_trip():
    frame = Frame(4, 4)
    frame.set(2, 3, Color(10, 20, 30))
    assert frame.get(2, 3) == Color(10, 20, 30)
    assert frame.get(3, 2) == BLACK


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 4)])
def test_out_of_bounds_raises(x, y):
    frame = Frame(4, 4)
    with pytest.raises(IndexError):
        frame.get(x, y)
    with pytest.raises(IndexError):
        frame.set(x, y, RED)


def test_color_range_checked():
    with pytest.raises(ValueError):
        Color(256, 0, 0)
    with pytest.raises(ValueError):
        Color(0, -1, 0)


def test_to_bytes_layout():
    frame = Frame(2, 2)
    frame.set(1, 0, RED)
    data = frame.to_bytes()
    assert len(data) == 2 * 2 * 3
    assert data[3:6] == bytes((255, 0, 0))
    assert data[0:3] == bytes((0, 0, 0))


def test_fill_rect_is_clipped():
    frame = Frame(5, 5)
    frame.fill_rect(3, 3, 10, 10, WHITE)
    assert frame.get(4, 4) == WHITE
    assert frame.get(3, 3) == WHITE
    assert frame.get(2, 3) == BLACK
    assert frame.get(3, 2) == BLACK


def test_fill_rect_empty_does_nothing():
    frame = Frame(3, 3)
    frame.fill_rect(1, 1, 0, 2, WHITE)
    assert frame == Frame(3, 3)


def test_clear():
    frame = Frame(3, 2)
    frame.set(0, 0, RED)
    frame.clear(BLUE)
    assert all(frame.get(x, y) == BLUE for x in range(3) for y in range(2))
    frame.clear()
    assert frame == Frame(3, 2)